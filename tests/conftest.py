"""Shared fixtures for arpiface tests."""

import logging
import socket

import pytest

from arpiface.backends.host import StaticHostInterface, UnicastAddress
from arpiface.models.constants import InterfaceType, OperationalStatus
from arpiface.utils.logger import Logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the package logger unconfigured between tests."""
    yield
    root = logging.getLogger("arpiface")
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    Logger._configured = False


@pytest.fixture
def three_interface_host() -> list[StaticHostInterface]:
    """eth0 usable, lo without multicast, wlan0 down."""
    return [
        StaticHostInterface(
            name="eth0",
            physical_address=bytes.fromhex("001a2b3c4d5e"),
            unicast_addresses=[UnicastAddress("192.168.1.10", socket.AF_INET)],
            supports_multicast=True,
            operational_status=OperationalStatus.UP,
            interface_type=InterfaceType.ETHERNET,
        ),
        StaticHostInterface(
            name="lo",
            physical_address=bytes(6),
            unicast_addresses=[UnicastAddress("127.0.0.1", socket.AF_INET)],
            supports_multicast=False,
            operational_status=OperationalStatus.UP,
            interface_type=InterfaceType.LOOPBACK,
        ),
        StaticHostInterface(
            name="wlan0",
            physical_address=bytes.fromhex("a0b1c2d3e4f5"),
            unicast_addresses=[UnicastAddress("10.0.0.7", socket.AF_INET)],
            supports_multicast=True,
            operational_status=OperationalStatus.DOWN,
            interface_type=InterfaceType.WIRELESS_80211,
        ),
    ]
