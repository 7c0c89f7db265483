"""sACN multicast group addressing."""

from __future__ import annotations

from sacn_stream.e131.constants import UNIVERSE_DISCOVERY
from sacn_stream.e131.primitives import big_endian_bytes


def multicast_address(universe: int) -> str:
    """
    Return the IPv4 multicast group for ``universe``.

    The universe number's two bytes become the last two octets:
    ``239.255.<high byte>.<low byte>``.
    """
    high, low = big_endian_bytes(universe & 0xFFFF, 16)
    return f"239.255.{high}.{low}"


# Reserved for universe discovery; data packets never go here
UNIVERSE_DISCOVERY_ADDRESS = multicast_address(UNIVERSE_DISCOVERY)
