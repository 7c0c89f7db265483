"""E1.31 data packet assembly."""

from __future__ import annotations

from dataclasses import dataclass

from sacn_stream.e131.layers import DMPLayer, FramingLayer, RootLayer


def assemble(
    root: RootLayer,
    framing: FramingLayer,
    dmp: DMPLayer,
    sequence_number: int,
) -> bytes:
    """
    Serialize the three layers into a single datagram.

    The full length is known before anything is written, so each layer
    fills in its own flags-and-length field against the same total.

    Args:
        root: Root layer carrying the sender CID
        framing: Framing layer for the target universe
        dmp: DMP layer with the DMX slot data
        sequence_number: Sequence number for this packet (0-255)

    Returns:
        Complete packet bytes ready for transmission
    """
    full_length = root.size + framing.size + dmp.size
    buffer = bytearray(full_length)

    root.write(buffer, full_length)
    framing.write(buffer, full_length, sequence_number)
    dmp.write(buffer, full_length)

    return bytes(buffer)


@dataclass(frozen=True)
class DataPacket:
    """One E1.31 data packet, built fresh for every send."""

    root: RootLayer
    framing: FramingLayer
    dmp: DMPLayer

    @property
    def size(self) -> int:
        return self.root.size + self.framing.size + self.dmp.size

    def build(self, sequence_number: int) -> bytes:
        return assemble(self.root, self.framing, self.dmp, sequence_number)
