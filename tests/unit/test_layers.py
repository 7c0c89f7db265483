import uuid

import pytest

from sacn_stream.core.exceptions import DMXPayloadTooLargeError
from sacn_stream.e131.layers import (
    DMPLayer,
    FramingLayer,
    RootLayer,
    coerce_cid,
    truncate_source_name,
)
from sacn_stream.e131.layout import DMP_LAYOUT, FRAMING_LAYOUT, LAYOUTS, ROOT_LAYOUT
from sacn_stream.e131.options import FramingOptions

CID = uuid.UUID("5c3e4a1f-9d0b-4a57-8e2c-0123456789ab")


def test_layouts_are_contiguous() -> None:
    assert ROOT_LAYOUT.offset == 0
    assert ROOT_LAYOUT.end == FRAMING_LAYOUT.offset == 38
    assert FRAMING_LAYOUT.end == DMP_LAYOUT.offset == 115
    assert DMP_LAYOUT.end == 126

    for layout in LAYOUTS:
        fields = sorted(layout.fields, key=lambda spec: spec.offset)
        assert fields[0].offset == layout.offset
        for current, following in zip(fields, fields[1:]):
            assert current.end == following.offset
        assert fields[-1].end == layout.end


def test_root_layer_writes_fixed_fields_and_cid() -> None:
    layer = RootLayer(CID)
    buffer = bytearray(126)
    layer.write(buffer, full_length=126)

    assert layer.size == 38
    assert buffer[0:2] == b"\x00\x10"
    assert buffer[2:4] == b"\x00\x00"
    assert buffer[4:16] == b"ASC-E1.17\x00\x00\x00"
    assert buffer[16:18] == bytes([0x70, 126 - 15])
    assert buffer[18:22] == b"\x00\x00\x00\x04"
    assert buffer[22:38] == CID.bytes


def test_coerce_cid_accepts_raw_bytes() -> None:
    assert coerce_cid(bytes(range(16))) == bytes(range(16))
    assert RootLayer(bytearray(16)).cid == bytes(16)


def test_coerce_cid_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        coerce_cid(b"\x01\x02")


def test_framing_layer_field_placement() -> None:
    layer = FramingLayer(
        source_name="Console",
        universe=0x1234,
        priority=150,
        sync_universe=0x0203,
        options=FramingOptions.PREVIEW_DATA,
    )
    buffer = bytearray(126)
    layer.write(buffer, full_length=126, sequence_number=42)

    assert layer.size == 77
    assert buffer[38:40] == bytes([0x70, 126 - 47])
    assert buffer[40:44] == b"\x00\x00\x00\x02"
    assert buffer[44:51] == b"Console"
    assert buffer[51:108] == bytes(57)
    assert buffer[108] == 150
    assert buffer[109:111] == b"\x02\x03"
    assert buffer[111] == 42
    assert buffer[112] == 0x40
    assert buffer[113:115] == b"\x12\x34"


def test_framing_layer_defaults() -> None:
    layer = FramingLayer(source_name="x", universe=1)
    assert layer.priority == 100
    assert layer.sync_universe == 0
    assert layer.options == FramingOptions.NONE


def test_truncate_source_name_keeps_short_names() -> None:
    assert truncate_source_name("Front of house") == b"Front of house"
    exact = "a" * 60 + "€"  # 3-byte code point ending at byte 63
    assert truncate_source_name(exact) == exact.encode("utf-8")


def test_truncate_source_name_ascii_overflow() -> None:
    assert truncate_source_name("a" * 100) == b"a" * 63


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a" * 62 + "é", "a" * 62),
        ("a" * 61 + "€€", "a" * 61),
        ("\U0001F3DB" * 16, "\U0001F3DB" * 15),
        ("é" * 40, "é" * 31),
    ],
)
def test_truncate_source_name_never_splits_code_points(name: str, expected: str) -> None:
    result = truncate_source_name(name)

    assert len(result) <= 63
    assert result.decode("utf-8") == expected
    assert name.startswith(result.decode("utf-8"))


def test_framing_layer_stores_truncated_name_with_null_terminator() -> None:
    layer = FramingLayer(source_name="é" * 40, universe=1)
    buffer = bytearray(126)
    layer.write(buffer, full_length=126, sequence_number=0)

    assert buffer[44:106] == ("é" * 31).encode("utf-8")
    assert buffer[106:108] == b"\x00\x00"


def test_dmp_layer_header_and_payload() -> None:
    layer = DMPLayer(b"\x0a\x0b\x0c")
    full_length = 126 + 3
    buffer = bytearray(full_length)
    layer.write(buffer, full_length=full_length)

    assert layer.size == 14
    assert layer.property_value_count == 4
    assert buffer[115:117] == bytes([0x70, full_length - 114])
    assert buffer[117] == 0x02
    assert buffer[118] == 0xA1
    assert buffer[119:121] == b"\x00\x00"
    assert buffer[121:123] == b"\x00\x01"
    assert buffer[123:125] == b"\x00\x04"
    assert buffer[125] == 0x00
    assert buffer[126:] == b"\x0a\x0b\x0c"


def test_dmp_layer_rejects_oversized_payload() -> None:
    with pytest.raises(DMXPayloadTooLargeError):
        DMPLayer(bytes(513))


def test_dmp_layout_start_code_uses_dmx_constant() -> None:
    from sacn_stream.dmx.universe import DMX_START_CODE

    assert DMP_LAYOUT.field("start_code").constant == DMX_START_CODE
    assert DMP_LAYOUT.template()[-1] == DMX_START_CODE
