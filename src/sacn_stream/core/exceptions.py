"""
Custom Exceptions for sacn-stream.

Provides a hierarchy of exceptions for the encoder, the transport and the
configuration layer, so callers can tell programming errors apart from
network failures.
"""

from __future__ import annotations

from typing import Optional


class SACNError(Exception):
    """Base exception for all sacn-stream errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.recoverable = recoverable


# =============================================================================
# Encoding Errors
# =============================================================================


class EncodingError(SACNError):
    """Base exception for packet encoding precondition violations."""
    pass


class DMXPayloadTooLargeError(EncodingError, ValueError):
    """DMX payload does not fit in a single E1.31 data packet."""

    def __init__(self, size: int, limit: int = 512):
        super().__init__(
            f"DMX payload too large: {size} bytes (limit {limit})",
            recoverable=False,
        )
        self.size = size
        self.limit = limit


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(SACNError):
    """Base exception for UDP transport errors."""
    pass


class TransportClosedError(TransportError):
    """Send attempted on a transport that is not open."""

    def __init__(self, transport: str):
        super().__init__(f"Transport '{transport}' is not open", recoverable=True)
        self.transport = transport


class TransmissionError(TransportError):
    """Error during datagram transmission."""

    def __init__(self, address: tuple, reason: str):
        super().__init__(
            f"sACN transmission to {address[0]}:{address[1]} failed: {reason}",
            recoverable=True,
        )
        self.address = address
        self.reason = reason


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(SACNError):
    """Invalid or unreadable configuration."""

    def __init__(self, reason: str, path: Optional[str] = None):
        where = f" in {path}" if path else ""
        super().__init__(f"Configuration error{where}: {reason}", recoverable=False)
        self.path = path
