"""Core system components for sacn-stream."""

from sacn_stream.core.config import SenderConfig, Settings, TransportConfig
from sacn_stream.core.exceptions import (
    ConfigError,
    DMXPayloadTooLargeError,
    EncodingError,
    SACNError,
    TransmissionError,
    TransportClosedError,
    TransportError,
)

__all__ = [
    "Settings",
    "SenderConfig",
    "TransportConfig",
    "SACNError",
    "EncodingError",
    "DMXPayloadTooLargeError",
    "TransportError",
    "TransportClosedError",
    "TransmissionError",
    "ConfigError",
]
