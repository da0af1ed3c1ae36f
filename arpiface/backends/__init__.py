"""Host backends and interface discovery."""

from arpiface.backends.discovery import (
    ArpClientNotConfiguredError,
    InterfaceDiscovery,
    create_arp_client,
    find_by_address,
    find_by_name,
    first_with_valid_address,
    is_eligible,
    list_eligible_interfaces,
    load_arp_client_factory,
)
from arpiface.backends.host import (
    HostInterface,
    IPProperties,
    StaticHostInterface,
    UnicastAddress,
)
from arpiface.backends.psutil_host import (
    PsutilHostInterface,
    classify_interface_type,
    enumerate_host_interfaces,
)

__all__ = [
    "ArpClientNotConfiguredError",
    "HostInterface",
    "IPProperties",
    "InterfaceDiscovery",
    "PsutilHostInterface",
    "StaticHostInterface",
    "UnicastAddress",
    "classify_interface_type",
    "create_arp_client",
    "enumerate_host_interfaces",
    "find_by_address",
    "find_by_name",
    "first_with_valid_address",
    "is_eligible",
    "list_eligible_interfaces",
    "load_arp_client_factory",
]
