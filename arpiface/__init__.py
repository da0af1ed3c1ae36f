"""arpiface - network interface discovery for ARP tooling."""

from arpiface.backends.discovery import (
    ArpClientNotConfiguredError,
    InterfaceDiscovery,
    create_arp_client,
    list_eligible_interfaces,
)
from arpiface.models.constants import NO_ADDRESS
from arpiface.models.interface_models import InterfaceDescriptor, LocalEndpoint
from arpiface.version.arpiface_version import ARPIFACE_VERSION, Version

__version__ = str(ARPIFACE_VERSION)
__version_info__ = ARPIFACE_VERSION

__all__ = [
    "ARPIFACE_VERSION",
    "NO_ADDRESS",
    "ArpClientNotConfiguredError",
    "InterfaceDescriptor",
    "InterfaceDiscovery",
    "LocalEndpoint",
    "Version",
    "__version__",
    "__version_info__",
    "create_arp_client",
    "list_eligible_interfaces",
]
