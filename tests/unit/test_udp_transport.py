import pytest

from sacn_stream.core.exceptions import TransmissionError, TransportClosedError
from sacn_stream.transport.udp import UDPTransport


class FailingSocket:
    def sendto(self, data: bytes, address: tuple) -> int:
        raise OSError("Network is unreachable")

    def close(self) -> None:
        pass


class RecordingSocket:
    def __init__(self) -> None:
        self.sent: list[tuple[bytes, tuple]] = []
        self.closed = False

    def sendto(self, data: bytes, address: tuple) -> int:
        self.sent.append((data, address))
        return len(data)

    def close(self) -> None:
        self.closed = True


def test_send_requires_open_transport() -> None:
    transport = UDPTransport()

    with pytest.raises(TransportClosedError):
        transport.send(b"\x00", ("239.255.0.1", 5568))


def test_send_wraps_socket_errors() -> None:
    transport = UDPTransport()
    transport._socket = FailingSocket()

    with pytest.raises(TransmissionError) as excinfo:
        transport.send(b"\x00", ("239.255.0.1", 5568))

    assert excinfo.value.address == ("239.255.0.1", 5568)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_send_passes_datagram_to_socket() -> None:
    transport = UDPTransport()
    sock = RecordingSocket()
    transport._socket = sock

    transport.send(b"\x01\x02", ("10.0.0.5", 5568))
    transport.close()

    assert sock.sent == [(b"\x01\x02", ("10.0.0.5", 5568))]
    assert sock.closed
    assert not transport.is_open


def test_open_is_idempotent() -> None:
    transport = UDPTransport(multicast_ttl=4)
    transport.open()
    try:
        first = transport._socket
        transport.open()
        assert transport._socket is first
        assert transport.is_open
    finally:
        transport.close()
