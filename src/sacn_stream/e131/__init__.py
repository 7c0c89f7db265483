"""
E1.31 (Streaming ACN) data packet encoding.

Layers are encoded into one pre-sized buffer:
- ACN root layer (38 bytes)
- E1.31 framing layer (77 bytes)
- DMP layer (11 bytes + up to 512 DMX slots)
"""

from sacn_stream.e131.addressing import UNIVERSE_DISCOVERY_ADDRESS, multicast_address
from sacn_stream.e131.constants import DEFAULT_PRIORITY, SACN_PORT
from sacn_stream.e131.layers import DMPLayer, FramingLayer, RootLayer
from sacn_stream.e131.options import FramingOptions
from sacn_stream.e131.packet import DataPacket, assemble
from sacn_stream.e131.primitives import big_endian_bytes, pack_flags_and_length

__all__ = [
    "SACN_PORT",
    "DEFAULT_PRIORITY",
    "UNIVERSE_DISCOVERY_ADDRESS",
    "multicast_address",
    "RootLayer",
    "FramingLayer",
    "DMPLayer",
    "FramingOptions",
    "DataPacket",
    "assemble",
    "big_endian_bytes",
    "pack_flags_and_length",
]
