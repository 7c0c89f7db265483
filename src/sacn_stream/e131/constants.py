"""E1.31 / ACN protocol constants."""

from __future__ import annotations

SACN_PORT = 5568

# Root layer
PREAMBLE_SIZE = 0x0010
POSTAMBLE_SIZE = 0x0000
ACN_PACKET_IDENTIFIER = b"ASC-E1.17\x00\x00\x00"
VECTOR_ROOT_E131_DATA = 0x00000004

# Framing layer
VECTOR_E131_DATA_PACKET = 0x00000002
SOURCE_NAME_SIZE = 64
SOURCE_NAME_MAX_BYTES = SOURCE_NAME_SIZE - 1  # last byte stays null
DEFAULT_PRIORITY = 100

# DMP layer
VECTOR_DMP_SET_PROPERTY = 0x02
DMP_ADDRESS_AND_DATA_TYPE = 0xA1
DMP_FIRST_PROPERTY_ADDRESS = 0x0000
DMP_ADDRESS_INCREMENT = 0x0001

# Flags nibble for PDUs carrying vector, header and data
PDU_FLAGS = 0x07
PDU_LENGTH_MASK = 0x0FFF

# Universe reserved for discovery packets
UNIVERSE_DISCOVERY = 64214
