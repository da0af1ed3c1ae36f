"""psutil host backend - enumerates the running host's network interfaces.

Addresses and MACs come from psutil.net_if_addrs(), link state, speed and
flags from psutil.net_if_stats(). psutil has no notion of interface type, so
on Linux the type is read from sysfs:

    - /sys/class/net/<name>/type: ARPHRD hardware type code
    - /sys/class/net/<name>/wireless, phy80211: present on 802.11 devices

Other platforms, and Linux interfaces whose sysfs entries cannot be read,
are classified by name prefix.
"""

from __future__ import annotations

import socket
import sys
from pathlib import Path

import psutil

from arpiface.backends.host import HostInterface, IPProperties, UnicastAddress
from arpiface.models.constants import (
    GIGABIT_SPEED_MBPS,
    InterfaceType,
    OperationalStatus,
)
from arpiface.models.interface_models import mac_from_text
from arpiface.utils.logger import Logger

SYSFS_NET_PATH = Path("/sys/class/net")

# ARPHRD_* codes from <linux/if_arp.h>
_ARPHRD_TYPES: dict[int, InterfaceType] = {
    1: InterfaceType.ETHERNET,
    512: InterfaceType.PPP,
    768: InterfaceType.TUNNEL,
    769: InterfaceType.TUNNEL,
    772: InterfaceType.LOOPBACK,
    776: InterfaceType.TUNNEL,
    778: InterfaceType.TUNNEL,
    801: InterfaceType.WIRELESS_80211,
    802: InterfaceType.WIRELESS_80211,
    803: InterfaceType.WIRELESS_80211,
    65534: InterfaceType.TUNNEL,
}

# Checked in order; first match wins
_NAME_PREFIXES: tuple[tuple[tuple[str, ...], InterfaceType], ...] = (
    # Older Windows wired adapter name; must precede the "lo" prefix
    (("local area connection",), InterfaceType.ETHERNET),
    (("lo", "loopback"), InterfaceType.LOOPBACK),
    (("wl", "wi-fi", "wifi", "wireless", "ath"), InterfaceType.WIRELESS_80211),
    (("tun", "tap", "utun", "wg", "gif", "stf", "ipsec"), InterfaceType.TUNNEL),
    (("ppp",), InterfaceType.PPP),
    (("eth", "en", "em", "ethernet"), InterfaceType.ETHERNET),
)


def _parse_flags(flags: str | None) -> set[str]:
    """Split psutil's comma-separated interface flags into a set."""
    if not flags:
        return set()
    return {flag.strip() for flag in flags.split(",") if flag.strip()}


def _type_from_name(name: str) -> InterfaceType:
    lowered = name.lower()
    for prefixes, interface_type in _NAME_PREFIXES:
        if lowered.startswith(prefixes):
            return interface_type
    return InterfaceType.UNKNOWN


def _type_from_sysfs(name: str, sysfs_root: Path) -> InterfaceType | None:
    """Classify a Linux interface from sysfs, or None if sysfs has no answer."""
    iface_dir = sysfs_root / name
    try:
        arphrd = int((iface_dir / "type").read_text().strip())
    except (OSError, ValueError):
        Logger.debug("backends.psutil", f"{name}: no readable sysfs type entry")
        return None

    interface_type = _ARPHRD_TYPES.get(arphrd, InterfaceType.UNKNOWN)
    if interface_type == InterfaceType.ETHERNET and (
        (iface_dir / "wireless").exists() or (iface_dir / "phy80211").exists()
    ):
        return InterfaceType.WIRELESS_80211
    return interface_type


def classify_interface_type(
    name: str,
    speed_mbps: int | None = None,
    flags: str | None = None,
    sysfs_root: Path | None = None,
) -> InterfaceType:
    """Classify an interface by link-layer type.

    Args:
        name: Interface name.
        speed_mbps: Link speed from psutil; 0 or None when unknown.
        flags: psutil's comma-separated flag string.
        sysfs_root: Directory holding per-interface sysfs entries. Defaults
            to /sys/class/net on Linux; on other platforms sysfs is only
            consulted when passed explicitly.

    Returns:
        The interface type. Ethernet links at or above 1000 Mbps are
        reported as GIGABIT_ETHERNET.
    """
    if "loopback" in _parse_flags(flags):
        return InterfaceType.LOOPBACK

    if sysfs_root is None and sys.platform.startswith("linux"):
        sysfs_root = SYSFS_NET_PATH

    interface_type = None
    if sysfs_root is not None:
        interface_type = _type_from_sysfs(name, sysfs_root)
    if interface_type is None:
        interface_type = _type_from_name(name)

    if (
        interface_type == InterfaceType.ETHERNET
        and speed_mbps
        and speed_mbps >= GIGABIT_SPEED_MBPS
    ):
        return InterfaceType.GIGABIT_ETHERNET
    return interface_type


def parse_mac_address(text: str | None) -> bytes:
    """Parse psutil's MAC text ('aa:bb:..' or 'AA-BB-..') into raw bytes.

    Returns:
        Raw address bytes, or b"" if text is missing or not hex.
    """
    if not text:
        return b""
    try:
        return mac_from_text(text)
    except ValueError:
        return b""


class PsutilHostInterface(HostInterface):
    """HostInterface built from one psutil address list and stats entry."""

    def __init__(
        self,
        name: str,
        addrs: list,
        stats=None,
        sysfs_root: Path | None = None,
    ):
        """Snapshot one interface.

        Args:
            name: Interface name (key in psutil's dicts).
            addrs: psutil snicaddr entries for the interface, in host order.
            stats: psutil snicstats entry, or None if psutil has none.
            sysfs_root: Passed through to classify_interface_type.
        """
        self._name = name
        self._flags = _parse_flags(getattr(stats, "flags", None))

        self._physical_address = b""
        unicast_addresses = []
        for addr in addrs:
            if addr.family == psutil.AF_LINK:
                self._physical_address = parse_mac_address(addr.address)
            elif addr.family in (socket.AF_INET, socket.AF_INET6):
                unicast_addresses.append(UnicastAddress(addr.address, addr.family))
        self._ip_properties = IPProperties(unicast_addresses)

        if stats is None:
            self._operational_status = OperationalStatus.UNKNOWN
        elif stats.isup:
            self._operational_status = OperationalStatus.UP
        else:
            self._operational_status = OperationalStatus.DOWN

        self._interface_type = classify_interface_type(
            name,
            speed_mbps=getattr(stats, "speed", None),
            flags=getattr(stats, "flags", None),
            sysfs_root=sysfs_root,
        )

    def __repr__(self) -> str:
        """Return a string representation of the interface."""
        return (
            f"PsutilHostInterface(name='{self._name}', "
            f"type='{self._interface_type}', status='{self._operational_status}')"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def supports_multicast(self) -> bool:
        # Windows reports no flags; assume multicast on anything but loopback
        if self._flags:
            return "multicast" in self._flags
        return self._interface_type != InterfaceType.LOOPBACK

    @property
    def operational_status(self) -> OperationalStatus:
        return self._operational_status

    @property
    def interface_type(self) -> InterfaceType:
        return self._interface_type

    def get_physical_address(self) -> bytes:
        return self._physical_address

    def get_ip_properties(self) -> IPProperties:
        return self._ip_properties


def enumerate_host_interfaces(
    sysfs_root: Path | None = None,
) -> list[PsutilHostInterface]:
    """Enumerate every network interface the host reports.

    Interfaces are returned in psutil's address-table order, followed by
    any that appear only in the stats table.

    Returns:
        One PsutilHostInterface per interface.
    """
    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()

    names = list(addrs)
    names.extend(name for name in stats if name not in addrs)

    return [
        PsutilHostInterface(
            name,
            addrs.get(name, []),
            stats.get(name),
            sysfs_root=sysfs_root,
        )
        for name in names
    ]
