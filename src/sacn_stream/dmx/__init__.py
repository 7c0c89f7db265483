"""DMX universe helpers."""

from sacn_stream.dmx.universe import (
    DMX_CHANNEL_COUNT,
    DMX_CHANNEL_MAX,
    DMX_CHANNEL_MIN,
    DMX_START_CODE,
    DMX_UNIVERSE_SIZE,
    create_universe_buffer,
    is_valid_dmx_channel,
    validate_dmx_payload,
)

__all__ = [
    "DMX_CHANNEL_COUNT",
    "DMX_CHANNEL_MIN",
    "DMX_CHANNEL_MAX",
    "DMX_START_CODE",
    "DMX_UNIVERSE_SIZE",
    "create_universe_buffer",
    "is_valid_dmx_channel",
    "validate_dmx_payload",
]
