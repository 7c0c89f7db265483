"""
sACN Sender: streams DMX512-A frames for one universe.

Owns the sender identity (CID, source name), the framing defaults and the
per-packet sequence counter. Each call to ``send_dmx_data`` assembles one
E1.31 data packet and hands it to the transport.
"""

from __future__ import annotations

import threading
import uuid
from typing import Optional

import structlog

from sacn_stream.core.config import Settings
from sacn_stream.core.exceptions import TransportError
from sacn_stream.device import get_device_name
from sacn_stream.e131.addressing import multicast_address
from sacn_stream.e131.constants import DEFAULT_PRIORITY, SACN_PORT
from sacn_stream.e131.layers import CIDLike, DMPLayer, FramingLayer, RootLayer
from sacn_stream.e131.options import FramingOptions
from sacn_stream.e131.packet import DataPacket
from sacn_stream.transport.base import Address, Transport
from sacn_stream.transport.udp import UDPTransport

logger = structlog.get_logger()


class SACNSender:
    """
    Sends E1.31 data packets for a single universe.

    The root and framing layers are built once and reused; only the DMP
    layer and the sequence number change per packet. Sequence numbers
    are handed out under a lock, so concurrent callers never share or
    skip a value.

    Example:
        with SACNSender(universe=1, source_name="Desk") as sender:
            sender.send_dmx_data(bytes([255, 0, 128]))
    """

    def __init__(
        self,
        universe: int,
        cid: Optional[CIDLike] = None,
        source_name: Optional[str] = None,
        priority: int = DEFAULT_PRIORITY,
        sync_universe: int = 0,
        options: FramingOptions = FramingOptions.NONE,
        transport: Optional[Transport] = None,
        unicast_host: Optional[str] = None,
        port: int = SACN_PORT,
    ):
        self.cid = cid if cid is not None else uuid.uuid4()
        self.universe = universe
        self.unicast_host = unicast_host
        self.port = port
        self.transport: Transport = transport if transport is not None else UDPTransport()

        self._root_layer = RootLayer(self.cid)
        self._framing_layer = FramingLayer(
            source_name=source_name if source_name is not None else get_device_name(),
            universe=universe,
            priority=priority,
            sync_universe=sync_universe,
            options=options,
        )

        # Sequence counter
        self._sequence_lock = threading.Lock()
        self._sequence_number = 0

        # Stats
        self._stats_lock = threading.Lock()
        self._packets_sent = 0
        self._errors = 0

    @classmethod
    def from_config(
        cls,
        settings: Settings,
        transport: Optional[Transport] = None,
    ) -> "SACNSender":
        """Create a sender from application settings."""
        sender_config = settings.sender
        transport_config = settings.transport
        if transport is None:
            transport = UDPTransport(
                multicast_ttl=transport_config.multicast_ttl,
                bind_interface=transport_config.bind_interface,
            )
        return cls(
            universe=sender_config.universe,
            cid=sender_config.cid,
            source_name=sender_config.resolved_source_name(),
            priority=sender_config.priority,
            sync_universe=sender_config.sync_universe,
            options=sender_config.options(),
            transport=transport,
            unicast_host=transport_config.unicast_host,
            port=transport_config.port,
        )

    @property
    def source_name(self) -> str:
        return self._framing_layer.source_name

    @property
    def framing_layer(self) -> FramingLayer:
        return self._framing_layer

    @property
    def sequence_number(self) -> int:
        """Last sequence number handed out (0 before the first packet)."""
        return self._sequence_number

    @property
    def destination(self) -> Address:
        host = self.unicast_host or multicast_address(self.universe)
        return (host, self.port)

    def open(self) -> None:
        self.transport.open()

    def close(self) -> None:
        self.transport.close()
        logger.info(
            "sACN sender closed",
            universe=self.universe,
            packets_sent=self._packets_sent,
            errors=self._errors,
        )

    def __enter__(self) -> "SACNSender":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def next_sequence_number(self) -> int:
        """Advance the sequence counter (255 wraps to 0) and return the new value."""
        with self._sequence_lock:
            self._sequence_number = (self._sequence_number + 1) & 0xFF
            return self._sequence_number

    def build_packet(self, data: bytes, sequence_number: int) -> bytes:
        """Assemble a data packet for ``data`` without sending it."""
        packet = DataPacket(
            root=self._root_layer,
            framing=self._framing_layer,
            dmp=DMPLayer(data),
        )
        return packet.build(sequence_number)

    def send_dmx_data(self, data: bytes) -> bytes:
        """
        Send one DMX512-A frame (without START code) to this universe.

        Args:
            data: Up to 512 slot values

        Returns:
            The datagram that was sent

        Raises:
            DMXPayloadTooLargeError: If ``data`` exceeds 512 bytes
            TransportError: If the transport rejected the datagram
        """
        # Validate before consuming a sequence number
        dmp_layer = DMPLayer(data)
        packet = DataPacket(
            root=self._root_layer,
            framing=self._framing_layer,
            dmp=dmp_layer,
        ).build(self.next_sequence_number())
        self._transmit(packet)
        return packet

    def terminate_stream(self, data: bytes = b"") -> bytes:
        """
        Send one packet with the Stream_Terminated option set.

        Uses the regular sequence counter. Receivers drop the source on
        the first such packet.
        """
        framing = FramingLayer(
            source_name=self._framing_layer.source_name,
            universe=self._framing_layer.universe,
            priority=self._framing_layer.priority,
            sync_universe=self._framing_layer.sync_universe,
            options=self._framing_layer.options | FramingOptions.STREAM_TERMINATED,
        )
        packet = DataPacket(
            root=self._root_layer,
            framing=framing,
            dmp=DMPLayer(data),
        ).build(self.next_sequence_number())
        self._transmit(packet)
        logger.info("sACN stream terminated", universe=self.universe)
        return packet

    def _transmit(self, packet: bytes) -> None:
        address = self.destination
        try:
            self.transport.send(packet, address)
        except TransportError:
            with self._stats_lock:
                self._errors += 1
            raise
        with self._stats_lock:
            self._packets_sent += 1
        logger.debug(
            "sACN packet sent",
            universe=self.universe,
            host=address[0],
            size=len(packet),
        )

    def get_stats(self) -> dict:
        """Get transmission statistics."""
        with self._stats_lock:
            packets_sent = self._packets_sent
            errors = self._errors
        return {
            "universe": self.universe,
            "destination": f"{self.destination[0]}:{self.destination[1]}",
            "sequence_number": self._sequence_number,
            "packets_sent": packets_sent,
            "errors": errors,
            "error_rate": errors / max(1, packets_sent),
        }
