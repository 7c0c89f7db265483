"""
Transport interface definition.

Defines the protocol a datagram transport must implement for the sender.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

Address = tuple[str, int]


@runtime_checkable
class Transport(Protocol):
    """
    Protocol (interface) for anything that can carry sACN datagrams.

    UDPTransport implements this over a real socket; tests use an
    in-memory recorder.
    """

    def open(self) -> None:
        """Acquire the underlying socket or resource. Idempotent."""
        ...

    def close(self) -> None:
        """Release the underlying resource. Idempotent."""
        ...

    def send(self, data: bytes, address: Address) -> None:
        """
        Send one datagram, fire-and-forget.

        Args:
            data: Complete packet bytes
            address: Destination (host, port)

        Raises:
            TransportError: If the datagram could not be handed to the network
        """
        ...
