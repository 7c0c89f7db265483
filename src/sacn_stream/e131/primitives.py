"""Byte-order and bit-packing helpers for ACN PDU headers."""

from __future__ import annotations

from sacn_stream.e131.constants import PDU_FLAGS, PDU_LENGTH_MASK

_SUPPORTED_WIDTHS = (8, 16, 32)


def big_endian_bytes(value: int, width: int) -> bytes:
    """
    Encode an unsigned integer most-significant byte first.

    Args:
        value: Unsigned integer that fits in ``width`` bits
        width: Bit width of the field (8, 16 or 32)

    Returns:
        ``width // 8`` bytes in network byte order
    """
    if width not in _SUPPORTED_WIDTHS:
        raise ValueError(f"Unsupported integer width: {width} bits")
    if not 0 <= value < (1 << width):
        raise ValueError(f"Value {value} does not fit in {width} bits")
    return value.to_bytes(width // 8, "big")


def pack_flags_and_length(length: int, flags: int = PDU_FLAGS) -> int:
    """Merge a 4-bit flags nibble and a 12-bit PDU length into one 16-bit field."""
    escaped_flags = (flags << 12) & 0xF000
    escaped_length = length & PDU_LENGTH_MASK
    return escaped_flags | escaped_length
