"""Interface discovery - picks the host interfaces ARP can run on.

An interface is eligible when it has multicast enabled, its link is up and
it is wired or wireless Ethernet. Everything else (loopback, tunnels, PPP,
downed links) is dropped without error. Each call re-queries the host; no
results are cached.

The ARP client itself lives outside this package. create_arp_client hands
the caller's endpoint to whichever constructor was configured, either
passed in directly or named by ARPIFACE_ARP_CLIENT as "module:attribute".
"""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable
from ipaddress import IPv4Address
from typing import Any

from arpiface.backends.host import HostInterface
from arpiface.backends.psutil_host import enumerate_host_interfaces
from arpiface.models.constants import ELIGIBLE_INTERFACE_TYPES, OperationalStatus
from arpiface.models.interface_models import InterfaceDescriptor, LocalEndpoint
from arpiface.utils.env import get_env
from arpiface.utils.logger import Logger

ArpClientFactory = Callable[[LocalEndpoint], Any]
HostEnumerator = Callable[[], Iterable[HostInterface]]

ARP_CLIENT_ENV_VAR = "ARPIFACE_ARP_CLIENT"


class ArpClientNotConfiguredError(Exception):
    """Raised when create_arp_client has no ARP client constructor to call."""

    def __init__(self) -> None:
        super().__init__(
            "No ARP client configured. Pass arp_client_factory or set "
            f"{ARP_CLIENT_ENV_VAR}=module:attribute."
        )


def load_arp_client_factory(path: str) -> ArpClientFactory:
    """Import an ARP client constructor from a "module:attribute" path.

    A dotted "module.attribute" path is accepted as well.

    Raises:
        ValueError: If path names no attribute.
        ImportError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
    """
    if ":" in path:
        module_name, _, attribute = path.partition(":")
    else:
        module_name, _, attribute = path.rpartition(".")
    if not module_name or not attribute:
        raise ValueError(f"Invalid ARP client path '{path}', expected module:attribute")

    module = importlib.import_module(module_name)
    factory: ArpClientFactory = getattr(module, attribute)
    return factory


def is_eligible(handle: HostInterface) -> bool:
    """Check whether a host interface can carry ARP.

    Returns:
        True if multicast is enabled, the link is up and the type is
        Ethernet, Gigabit Ethernet or 802.11 wireless.
    """
    return (
        handle.supports_multicast
        and handle.operational_status == OperationalStatus.UP
        and handle.interface_type in ELIGIBLE_INTERFACE_TYPES
    )


def _exclusion_reason(handle: HostInterface) -> str:
    if not handle.supports_multicast:
        return "multicast disabled"
    if handle.operational_status != OperationalStatus.UP:
        return f"status {handle.operational_status}"
    return f"type {handle.interface_type}"


class InterfaceDiscovery:
    """Stateless service for finding ARP-capable interfaces.

    Holds only the collaborators it was built with; every call re-reads the
    host, so one instance can be shared freely between threads.
    """

    def __init__(
        self,
        host_enumerator: HostEnumerator | None = None,
        arp_client_factory: ArpClientFactory | None = None,
    ) -> None:
        """Create a discovery service.

        Args:
            host_enumerator: Callable returning the host's interfaces.
                Defaults to the psutil backend.
            arp_client_factory: ARP client constructor. If None,
                ARPIFACE_ARP_CLIENT is consulted on each create_arp_client
                call.
        """
        self._host_enumerator = host_enumerator or enumerate_host_interfaces
        self._arp_client_factory = arp_client_factory

    def host_interfaces(self) -> list[HostInterface]:
        """Return every interface the host reports, eligible or not."""
        return list(self._host_enumerator())

    def list_eligible_interfaces(self) -> list[InterfaceDescriptor]:
        """Snapshot the interfaces ARP can run on.

        Returns:
            One InterfaceDescriptor per eligible interface, in host order.
            Empty when nothing qualifies.
        """
        descriptors = []
        for handle in self._host_enumerator():
            if not is_eligible(handle):
                Logger.debug(
                    "discovery", f"{handle.name} excluded: {_exclusion_reason(handle)}"
                )
                continue
            descriptors.append(InterfaceDescriptor.from_host_interface(handle))

        Logger.debug("discovery", f"{len(descriptors)} eligible interface(s)")
        return descriptors

    def create_arp_client(self, local_endpoint: LocalEndpoint) -> Any:
        """Build an ARP client bound to local_endpoint.

        The endpoint is passed to the constructor as is. It is not checked
        against the host's addresses, and anything the constructor raises
        reaches the caller untouched.

        Returns:
            Whatever the ARP client constructor returns; the caller owns it.

        Raises:
            ArpClientNotConfiguredError: If no constructor was given and
                ARPIFACE_ARP_CLIENT is unset.
        """
        factory = self._arp_client_factory
        if factory is None:
            path = get_env(ARP_CLIENT_ENV_VAR, log=True)
            if not path:
                raise ArpClientNotConfiguredError()
            factory = load_arp_client_factory(path)

        Logger.debug("discovery", f"creating ARP client on {local_endpoint}")
        return factory(local_endpoint)


def find_by_name(
    interfaces: Iterable[InterfaceDescriptor], name: str
) -> InterfaceDescriptor | None:
    """Return the interface called name, or None."""
    return next((iface for iface in interfaces if iface.name == name), None)


def find_by_address(
    interfaces: Iterable[InterfaceDescriptor], address: str | IPv4Address
) -> InterfaceDescriptor | None:
    """Return the first valid-addressed interface bound to address, or None."""
    target = IPv4Address(address)
    return next(
        (
            iface
            for iface in interfaces
            if iface.has_valid_address and iface.ipv4_address == target
        ),
        None,
    )


def first_with_valid_address(
    interfaces: Iterable[InterfaceDescriptor],
) -> InterfaceDescriptor | None:
    """Return the first interface that has an IPv4 address, or None."""
    return next((iface for iface in interfaces if iface.has_valid_address), None)


def list_eligible_interfaces() -> list[InterfaceDescriptor]:
    """List eligible interfaces on the running host."""
    return InterfaceDiscovery().list_eligible_interfaces()


def create_arp_client(
    local_endpoint: LocalEndpoint, arp_client_factory: ArpClientFactory | None = None
) -> Any:
    """Build an ARP client bound to local_endpoint.

    See InterfaceDiscovery.create_arp_client.
    """
    return InterfaceDiscovery(
        arp_client_factory=arp_client_factory
    ).create_arp_client(local_endpoint)
