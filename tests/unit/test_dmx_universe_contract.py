from __future__ import annotations

import pytest

from sacn_stream.core.exceptions import DMXPayloadTooLargeError
from sacn_stream.dmx.universe import (
    DMX_CHANNEL_COUNT,
    DMX_START_CODE,
    DMX_START_CODE_INDEX,
    DMX_UNIVERSE_SIZE,
    create_universe_buffer,
    is_valid_dmx_channel,
    validate_dmx_payload,
)


def test_create_universe_buffer_contract() -> None:
    universe = create_universe_buffer()
    assert len(universe) == DMX_UNIVERSE_SIZE
    assert universe[DMX_START_CODE_INDEX] == DMX_START_CODE


def test_is_valid_dmx_channel_bounds() -> None:
    assert not is_valid_dmx_channel(0)
    assert is_valid_dmx_channel(1)
    assert is_valid_dmx_channel(512)
    assert not is_valid_dmx_channel(513)


def test_validate_dmx_payload_accepts_full_universe() -> None:
    data = bytearray(range(256)) * 2
    payload = validate_dmx_payload(data)
    assert isinstance(payload, bytes)
    assert payload == bytes(data)


def test_validate_dmx_payload_rejects_oversized_frame() -> None:
    with pytest.raises(DMXPayloadTooLargeError) as excinfo:
        validate_dmx_payload(bytes(DMX_CHANNEL_COUNT + 1))
    assert excinfo.value.size == 513
    assert excinfo.value.recoverable is False
