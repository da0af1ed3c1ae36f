"""Tests for interface discovery and ARP client construction."""

import socket
import sys
import types
from ipaddress import IPv4Address
from unittest.mock import MagicMock

import pytest

from arpiface.backends.discovery import (
    ArpClientNotConfiguredError,
    InterfaceDiscovery,
    create_arp_client,
    find_by_address,
    find_by_name,
    first_with_valid_address,
    is_eligible,
    load_arp_client_factory,
)
from arpiface.backends.host import StaticHostInterface, UnicastAddress
from arpiface.models.constants import NO_ADDRESS, InterfaceType, OperationalStatus
from arpiface.models.interface_models import InterfaceDescriptor, LocalEndpoint


def _iface(name, **kwargs):
    kwargs.setdefault("physical_address", bytes.fromhex("020000000001"))
    return StaticHostInterface(name=name, **kwargs)


def test_only_eligible_interface_is_listed(three_interface_host):
    """eth0 survives; lo (no multicast) and wlan0 (down) are dropped."""
    discovery = InterfaceDiscovery(host_enumerator=lambda: three_interface_host)

    result = discovery.list_eligible_interfaces()

    assert [d.name for d in result] == ["eth0"]
    assert result[0].has_valid_address is True
    assert result[0].ipv4_address == IPv4Address("192.168.1.10")
    assert result[0].hardware_address == bytes.fromhex("001a2b3c4d5e")


def test_eligible_interface_without_ipv4_uses_sentinel():
    """eth1 with only IPv6 is listed with NO_ADDRESS."""
    host = [
        _iface("eth1", unicast_addresses=[UnicastAddress("fe80::2", socket.AF_INET6)])
    ]
    discovery = InterfaceDiscovery(host_enumerator=lambda: host)

    result = discovery.list_eligible_interfaces()

    assert len(result) == 1
    assert result[0].has_valid_address is False
    assert result[0].ipv4_address == NO_ADDRESS


@pytest.mark.parametrize(
    "interface_type",
    [
        InterfaceType.ETHERNET,
        InterfaceType.GIGABIT_ETHERNET,
        InterfaceType.WIRELESS_80211,
    ],
)
def test_eligible_types(interface_type):
    """Wired, gigabit and 802.11 interfaces are eligible when up with multicast."""
    assert is_eligible(_iface("x", interface_type=interface_type)) is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"supports_multicast": False},
        {"operational_status": OperationalStatus.DOWN},
        {"operational_status": OperationalStatus.UNKNOWN},
        {"interface_type": InterfaceType.LOOPBACK},
        {"interface_type": InterfaceType.TUNNEL},
        {"interface_type": InterfaceType.PPP},
        {"interface_type": InterfaceType.UNKNOWN},
    ],
)
def test_ineligible_interfaces_are_excluded(kwargs):
    """Failing any single condition keeps an interface out of the result."""
    host = [_iface("bad0", **kwargs), _iface("good0")]
    discovery = InterfaceDiscovery(host_enumerator=lambda: host)

    assert [d.name for d in discovery.list_eligible_interfaces()] == ["good0"]


def test_host_order_is_preserved():
    """Descriptors come back in the order the host reports interfaces."""
    host = [_iface("wlp3s0", interface_type=InterfaceType.WIRELESS_80211),
            _iface("enp0s31f6"),
            _iface("eth9", interface_type=InterfaceType.GIGABIT_ETHERNET)]
    discovery = InterfaceDiscovery(host_enumerator=lambda: host)

    assert [d.name for d in discovery.list_eligible_interfaces()] == [
        "wlp3s0",
        "enp0s31f6",
        "eth9",
    ]


def test_empty_host_gives_empty_result():
    """No interfaces is a valid, empty answer."""
    discovery = InterfaceDiscovery(host_enumerator=lambda: [])
    assert discovery.list_eligible_interfaces() == []


def test_each_call_requeries_host():
    """Results are not cached between calls."""
    states = [[_iface("eth0")], [_iface("eth0"), _iface("eth1")]]
    enumerator = MagicMock(side_effect=states)
    discovery = InterfaceDiscovery(host_enumerator=enumerator)

    first = discovery.list_eligible_interfaces()
    second = discovery.list_eligible_interfaces()

    assert enumerator.call_count == 2
    assert [d.name for d in first] == ["eth0"]
    assert [d.name for d in second] == ["eth0", "eth1"]
    assert first[0] is not second[0]


def test_create_arp_client_passes_endpoint_unchanged():
    """The constructor receives exactly the endpoint it was given."""
    factory = MagicMock()
    endpoint = LocalEndpoint(address="192.168.1.10")
    discovery = InterfaceDiscovery(host_enumerator=lambda: [], arp_client_factory=factory)

    client = discovery.create_arp_client(endpoint)

    factory.assert_called_once_with(endpoint)
    assert factory.call_args.args[0] is endpoint
    assert client is factory.return_value


def test_create_arp_client_does_not_validate_address():
    """Addresses not owned by the host, even the sentinel, are passed through."""
    factory = MagicMock()
    endpoint = LocalEndpoint(address=NO_ADDRESS)

    create_arp_client(endpoint, factory)

    factory.assert_called_once_with(endpoint)


def test_create_arp_client_propagates_constructor_errors():
    """Constructor failures reach the caller untouched."""
    error = PermissionError("raw sockets need CAP_NET_RAW")
    factory = MagicMock(side_effect=error)
    discovery = InterfaceDiscovery(arp_client_factory=factory)

    with pytest.raises(PermissionError) as excinfo:
        discovery.create_arp_client(LocalEndpoint(address="10.0.0.1"))
    assert excinfo.value is error


def test_create_arp_client_without_factory(monkeypatch: pytest.MonkeyPatch):
    """With nothing configured, a configuration error is raised."""
    monkeypatch.delenv("ARPIFACE_ARP_CLIENT", raising=False)

    with pytest.raises(ArpClientNotConfiguredError) as excinfo:
        InterfaceDiscovery().create_arp_client(LocalEndpoint(address="10.0.0.1"))
    assert "ARPIFACE_ARP_CLIENT" in str(excinfo.value)


def test_create_arp_client_from_env(monkeypatch: pytest.MonkeyPatch):
    """ARPIFACE_ARP_CLIENT names the constructor to use."""
    constructor = MagicMock()
    module = types.ModuleType("fake_arp_backend")
    module.ArpClient = constructor
    monkeypatch.setitem(sys.modules, "fake_arp_backend", module)
    monkeypatch.setenv("ARPIFACE_ARP_CLIENT", "fake_arp_backend:ArpClient")
    endpoint = LocalEndpoint(address="10.0.0.1")

    client = InterfaceDiscovery().create_arp_client(endpoint)

    constructor.assert_called_once_with(endpoint)
    assert client is constructor.return_value


def test_load_arp_client_factory_paths(monkeypatch: pytest.MonkeyPatch):
    """Both module:attribute and dotted paths resolve; bare names do not."""
    module = types.ModuleType("fake_arp_backend")
    module.ArpClient = object
    monkeypatch.setitem(sys.modules, "fake_arp_backend", module)

    assert load_arp_client_factory("fake_arp_backend:ArpClient") is object
    assert load_arp_client_factory("fake_arp_backend.ArpClient") is object

    with pytest.raises(ValueError):
        load_arp_client_factory("ArpClient")
    with pytest.raises(AttributeError):
        load_arp_client_factory("fake_arp_backend:Missing")


def test_selection_helpers():
    """Interfaces can be picked by name, address, or first valid address."""
    mac = bytes.fromhex("001a2b3c4d5e")
    no_ip = InterfaceDescriptor(name="eth1", hardware_address=mac)
    eth0 = InterfaceDescriptor(
        name="eth0", hardware_address=mac, ipv4_address="192.168.1.10"
    )
    interfaces = [no_ip, eth0]

    assert find_by_name(interfaces, "eth0") is eth0
    assert find_by_name(interfaces, "wlan0") is None
    assert find_by_address(interfaces, "192.168.1.10") is eth0
    assert find_by_address(interfaces, NO_ADDRESS) is None
    assert first_with_valid_address(interfaces) is eth0
    assert first_with_valid_address([no_ip]) is None
