from sacn_stream.e131.addressing import UNIVERSE_DISCOVERY_ADDRESS, multicast_address


def test_multicast_address_for_first_universe() -> None:
    assert multicast_address(1) == "239.255.0.1"


def test_multicast_address_splits_universe_big_endian() -> None:
    assert multicast_address(256) == "239.255.1.0"
    assert multicast_address(63999) == "239.255.249.255"


def test_universe_discovery_address() -> None:
    # 64214 == 0xFAD6
    assert multicast_address(64214) == "239.255.250.214"
    assert UNIVERSE_DISCOVERY_ADDRESS == "239.255.250.214"
