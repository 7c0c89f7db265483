"""Local device name lookup, used as the default sACN source name."""

from __future__ import annotations

import platform
import socket

FALLBACK_DEVICE_NAME = "sacn-stream"


def get_device_name() -> str:
    """Return a human-readable name for this host."""
    return socket.gethostname() or platform.node() or FALLBACK_DEVICE_NAME
