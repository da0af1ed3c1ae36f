"""Pydantic models for discovered interfaces and ARP client endpoints."""

from __future__ import annotations

import socket
from ipaddress import IPv4Address
from typing import TYPE_CHECKING

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_serializer,
    field_validator,
)

from arpiface.models.constants import NO_ADDRESS

if TYPE_CHECKING:
    from arpiface.backends.host import HostInterface


def mac_from_text(text: str) -> bytes:
    """Parse MAC text ('aa:bb:..', 'AA-BB-..' or bare hex) into raw bytes.

    Raises:
        ValueError: If text is not hex once separators are removed.
    """
    return bytes.fromhex(text.replace(":", "").replace("-", ""))


class LocalEndpoint(BaseModel):
    """Local address handed to an ARP client constructor.

    ARP has no ports; ``port`` exists so the endpoint can double as a
    ``(host, port)`` socket address.
    """

    model_config = ConfigDict(frozen=True)

    address: IPv4Address = Field(..., description="Local IPv4 address to bind to")
    port: int = Field(0, description="Unused by ARP", ge=0, le=65535)

    def as_tuple(self) -> tuple[str, int]:
        """Return the endpoint as a socket-style ``(host, port)`` pair."""
        return (str(self.address), self.port)

    def __str__(self) -> str:
        return f"{self.address}:{self.port}"


class InterfaceDescriptor(BaseModel):
    """Point-in-time snapshot of one network interface.

    Built once per discovery pass and never mutated. An interface with no
    IPv4 address carries NO_ADDRESS instead of None, so every descriptor
    has an address value; check has_valid_address before using it.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Interface name as reported by the OS")
    hardware_address: bytes = Field(..., description="Raw link-layer (MAC) address")
    ipv4_address: IPv4Address = Field(
        NO_ADDRESS, description="First bound IPv4 address, or NO_ADDRESS"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hardware_address_text(self) -> str:
        """Colon-delimited lowercase hex rendering, e.g. '00:1a:2b:3c:4d:5e'."""
        return ":".join(f"{octet:02x}" for octet in self.hardware_address)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_valid_address(self) -> bool:
        """True unless ipv4_address is the NO_ADDRESS sentinel."""
        return self.ipv4_address != NO_ADDRESS

    @field_validator("hardware_address", mode="before")
    @classmethod
    def parse_hardware_address(cls, value):
        # JSON exports carry the MAC as text
        if isinstance(value, str):
            return mac_from_text(value)
        return value

    @field_serializer("hardware_address")
    def serialize_hardware_address(self, value: bytes) -> str:
        """Write the MAC in its textual form."""
        return ":".join(f"{octet:02x}" for octet in value)

    def endpoint(self, port: int = 0) -> LocalEndpoint:
        """Return the local endpoint for binding an ARP client to this interface.

        The endpoint is built even when has_valid_address is False; callers
        that care must check the flag first.
        """
        return LocalEndpoint(address=self.ipv4_address, port=port)

    @classmethod
    def from_host_interface(cls, handle: HostInterface) -> InterfaceDescriptor:
        """Snapshot a host interface.

        Copies the name and hardware address verbatim and takes the first
        IPv4 unicast address in host-reported order. Interfaces without one
        get NO_ADDRESS.

        Args:
            handle: Host interface exposing name, physical address and
                IP properties.

        Returns:
            InterfaceDescriptor for the handle.
        """
        ipv4_address = next(
            (
                IPv4Address(unicast.address)
                for unicast in handle.get_ip_properties().unicast_addresses
                if unicast.family == socket.AF_INET
            ),
            NO_ADDRESS,
        )

        return cls(
            name=handle.name,
            hardware_address=bytes(handle.get_physical_address()),
            ipv4_address=ipv4_address,
        )


class InterfaceListing(BaseModel):
    """Result of one discovery pass, for display and JSON export."""

    model_config = ConfigDict(frozen=True)

    hostname: str = Field(..., description="System hostname")
    interfaces: list[InterfaceDescriptor] = Field(
        default_factory=list, description="Interfaces in host-reported order"
    )
