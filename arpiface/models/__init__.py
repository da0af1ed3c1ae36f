"""Pydantic models and constants for interface discovery."""

from arpiface.models.constants import (
    ELIGIBLE_INTERFACE_TYPES,
    NO_ADDRESS,
    InterfaceType,
    OperationalStatus,
)
from arpiface.models.interface_models import (
    InterfaceDescriptor,
    InterfaceListing,
    LocalEndpoint,
)

__all__ = [
    "ELIGIBLE_INTERFACE_TYPES",
    "NO_ADDRESS",
    "InterfaceDescriptor",
    "InterfaceListing",
    "InterfaceType",
    "LocalEndpoint",
    "OperationalStatus",
]
