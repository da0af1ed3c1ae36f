"""Constants for arpiface models and discovery."""

import sys
from enum import auto
from ipaddress import IPv4Address

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035


class InterfaceType(StrEnum):
    """Link-layer classification of a host network interface."""

    ETHERNET = auto()
    GIGABIT_ETHERNET = auto()
    WIRELESS_80211 = auto()
    LOOPBACK = auto()
    TUNNEL = auto()
    PPP = auto()
    UNKNOWN = auto()


class OperationalStatus(StrEnum):
    """Link state as reported by the host."""

    UP = auto()
    DOWN = auto()
    UNKNOWN = auto()


# Interface types that carry ARP on a broadcast link
ELIGIBLE_INTERFACE_TYPES = frozenset(
    {
        InterfaceType.ETHERNET,
        InterfaceType.GIGABIT_ETHERNET,
        InterfaceType.WIRELESS_80211,
    }
)

# Stand-in for "no IPv4 address bound"; never a bindable unicast address
NO_ADDRESS = IPv4Address("255.255.255.255")

# Link speed at and above which an Ethernet interface counts as gigabit
GIGABIT_SPEED_MBPS = 1000
