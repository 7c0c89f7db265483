"""
sacn-stream: E1.31 (Streaming ACN) sender for DMX512-A lighting data.

Encodes DMX frames as E1.31 data packets (ACN root layer, framing layer
and DMP layer in one datagram) and streams them over UDP multicast or
unicast.

Example:
    from sacn_stream import SACNSender

    with SACNSender(universe=1, source_name="Console") as sender:
        sender.send_dmx_data(bytes([255] * 512))
"""

__version__ = "0.1.0"
__author__ = "sacn-stream contributors"

from sacn_stream.core.config import Settings
from sacn_stream.e131 import (
    DataPacket,
    DMPLayer,
    FramingLayer,
    FramingOptions,
    RootLayer,
    UNIVERSE_DISCOVERY_ADDRESS,
    multicast_address,
)
from sacn_stream.sender import SACNSender

__all__ = [
    "SACNSender",
    "Settings",
    "DataPacket",
    "RootLayer",
    "FramingLayer",
    "DMPLayer",
    "FramingOptions",
    "UNIVERSE_DISCOVERY_ADDRESS",
    "multicast_address",
    "__version__",
]
