"""Framing layer option flags."""

from __future__ import annotations

from enum import IntFlag


class FramingOptions(IntFlag):
    """
    Options bitmask carried in byte 112 of an E1.31 data packet.

    Flags are independent and combine with ``|``; ``&`` and ``in`` test
    membership. ``NONE`` encodes to 0x00.
    """

    NONE = 0
    FORCE_SYNCHRONIZATION = 0x10
    STREAM_TERMINATED = 0x20
    PREVIEW_DATA = 0x40
