"""Host interface abstraction.

Discovery only needs a narrow view of an OS network interface: its name,
link-layer address, link state, multicast capability, type and bound
unicast addresses. HostInterface is that view. The psutil backend
implements it for the running host; StaticHostInterface implements it from
plain values so discovery can run against fabricated interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import NamedTuple

from arpiface.models.constants import InterfaceType, OperationalStatus


class UnicastAddress(NamedTuple):
    """One address bound to an interface, tagged with its socket family."""

    address: str
    family: int


@dataclass(frozen=True)
class IPProperties:
    """IP configuration of an interface, addresses in host-reported order."""

    unicast_addresses: list[UnicastAddress] = field(default_factory=list)


class HostInterface(ABC):
    """Abstract view of one network interface as the host reports it."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Interface name as reported by the OS (e.g., 'eth0', 'en0')."""
        pass

    @property
    @abstractmethod
    def supports_multicast(self) -> bool:
        """Whether the interface has multicast enabled."""
        pass

    @property
    @abstractmethod
    def operational_status(self) -> OperationalStatus:
        """Current link state."""
        pass

    @property
    @abstractmethod
    def interface_type(self) -> InterfaceType:
        """Link-layer classification."""
        pass

    @abstractmethod
    def get_physical_address(self) -> bytes:
        """Return the raw hardware address, empty if the host reports none."""
        pass

    @abstractmethod
    def get_ip_properties(self) -> IPProperties:
        """Return the bound unicast addresses."""
        pass


class StaticHostInterface(HostInterface):
    """HostInterface backed by fixed values."""

    def __init__(
        self,
        name: str,
        physical_address: bytes = b"",
        unicast_addresses: list[UnicastAddress] | None = None,
        supports_multicast: bool = True,
        operational_status: OperationalStatus = OperationalStatus.UP,
        interface_type: InterfaceType = InterfaceType.ETHERNET,
    ):
        self._name = name
        self._physical_address = physical_address
        self._ip_properties = IPProperties(list(unicast_addresses or []))
        self._supports_multicast = supports_multicast
        self._operational_status = operational_status
        self._interface_type = interface_type

    def __repr__(self) -> str:
        """Return a string representation of the interface."""
        return (
            f"StaticHostInterface(name='{self._name}', "
            f"type='{self._interface_type}', status='{self._operational_status}')"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def supports_multicast(self) -> bool:
        return self._supports_multicast

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
