"""
PDU layer encoders for E1.31 data packets.

Each layer knows its own byte count and writes itself into a
pre-allocated datagram buffer once the full packet length is known.
Offsets come from :mod:`sacn_stream.e131.layout`.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Union

from sacn_stream.core.exceptions import DMXPayloadTooLargeError
from sacn_stream.dmx.universe import DMX_CHANNEL_COUNT, validate_dmx_payload
from sacn_stream.e131.constants import DEFAULT_PRIORITY, SOURCE_NAME_MAX_BYTES
from sacn_stream.e131.layout import (
    DMP_LAYOUT,
    DMX_DATA_OFFSET,
    FRAMING_LAYOUT,
    ROOT_LAYOUT,
)
from sacn_stream.e131.options import FramingOptions

CIDLike = Union[uuid.UUID, bytes, bytearray]


def coerce_cid(cid: CIDLike) -> bytes:
    """Return the 16 raw bytes of a component identifier."""
    if isinstance(cid, uuid.UUID):
        return cid.bytes
    data = bytes(cid)
    if len(data) != 16:
        raise ValueError(f"CID must be 16 bytes, got {len(data)}")
    return data


def truncate_source_name(name: str, limit: int = SOURCE_NAME_MAX_BYTES) -> bytes:
    """
    Encode ``name`` as UTF-8, cut to at most ``limit`` bytes.

    The cut backs off to the previous code point boundary, so the result
    is always valid UTF-8.
    """
    encoded = name.encode("utf-8", errors="replace")
    if len(encoded) <= limit:
        return encoded
    # A trailing partial sequence is the only invalid part after slicing
    return encoded[:limit].decode("utf-8", errors="ignore").encode("utf-8")


@dataclass(frozen=True)
class RootLayer:
    """ACN root layer: preamble, packet identifier, root vector and CID."""

    cid: bytes

    def __init__(self, cid: CIDLike):
        object.__setattr__(self, "cid", coerce_cid(cid))

    @property
    def size(self) -> int:
        return ROOT_LAYOUT.header_size

    def write(self, buffer: bytearray, full_length: int) -> None:
        ROOT_LAYOUT.write_template(buffer)
        ROOT_LAYOUT.field("cid").write(buffer, self.cid)
        ROOT_LAYOUT.write_flags_and_length(buffer, full_length)


@dataclass(frozen=True)
class FramingLayer:
    """
    E1.31 data framing layer.

    Holds everything that identifies the stream: source name, universe,
    priority, synchronization universe and options. The sequence number
    is supplied per packet.

    Values are written masked to their wire width; universe and priority
    ranges are not checked here.
    """

    source_name: str
    universe: int
    priority: int = DEFAULT_PRIORITY
    sync_universe: int = 0
    options: FramingOptions = FramingOptions.NONE
    source_name_data: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "source_name_data", truncate_source_name(self.source_name)
        )
        object.__setattr__(self, "options", FramingOptions(int(self.options) & 0xFF))

    @property
    def size(self) -> int:
        return FRAMING_LAYOUT.header_size

    def write(self, buffer: bytearray, full_length: int, sequence_number: int) -> None:
        layout = FRAMING_LAYOUT
        layout.write_template(buffer)
        layout.write_flags_and_length(buffer, full_length)

        name_field = layout.field("source_name")
        name = self.source_name_data.ljust(name_field.width, b"\x00")
        name_field.write(buffer, name)

        layout.field("priority").write(buffer, self.priority & 0xFF)
        layout.field("sync_universe").write(buffer, self.sync_universe & 0xFFFF)
        layout.field("sequence_number").write(buffer, sequence_number & 0xFF)
        layout.field("options").write(buffer, int(self.options))
        layout.field("universe").write(buffer, self.universe & 0xFFFF)


@dataclass(frozen=True)
class DMPLayer:
    """
    Device Management Protocol layer carrying one DMX512-A frame.

    ``dmx_data`` excludes the START code; the layer writes a zero START
    code ahead of it, so the property value count is ``1 + len(dmx_data)``.
    """

    dmx_data: bytes

    def __init__(self, dmx_data: bytes):
        object.__setattr__(self, "dmx_data", validate_dmx_payload(dmx_data))

    @property
    def size(self) -> int:
        return DMP_LAYOUT.header_size + len(self.dmx_data)

    @property
    def property_value_count(self) -> int:
        return 1 + len(self.dmx_data)

    def write(self, buffer: bytearray, full_length: int) -> None:
        if len(self.dmx_data) > DMX_CHANNEL_COUNT:
            raise DMXPayloadTooLargeError(len(self.dmx_data), DMX_CHANNEL_COUNT)

        DMP_LAYOUT.write_template(buffer)
        DMP_LAYOUT.write_flags_and_length(buffer, full_length)
        DMP_LAYOUT.field("property_value_count").write(
            buffer, self.property_value_count
        )
        buffer[DMX_DATA_OFFSET:DMX_DATA_OFFSET + len(self.dmx_data)] = self.dmx_data
