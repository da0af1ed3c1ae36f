#!/usr/bin/env python3
"""Pick an interface for ARP work and bind a client to it.

This demo shows how to:
1. List the interfaces ARP tooling can use
2. Select one by name, or the first with an IPv4 address
3. Hand its endpoint to an ARP client constructor

A real ARP client (scapy-based, raw-socket, ...) lives outside arpiface.
Here a stand-in constructor just records the endpoint it was given.

Usage:
    python select_interface_demo.py [interface]
"""

import sys

from arpiface import InterfaceDiscovery
from arpiface.backends.discovery import find_by_name, first_with_valid_address
from arpiface.utils.logger import Logger


class RecordingArpClient:
    """Stand-in ARP client that remembers where it was bound."""

    def __init__(self, endpoint):
        self.endpoint = endpoint

    def __repr__(self) -> str:
        return f"RecordingArpClient(bound to {self.endpoint})"


def main():
    Logger.configure(level="DEBUG", timestamps=False)

    discovery = InterfaceDiscovery(arp_client_factory=RecordingArpClient)
    interfaces = discovery.list_eligible_interfaces()

    if not interfaces:
        print("Error: No active Ethernet/Wi-Fi interface found.")
        sys.exit(1)

    print("Eligible interfaces:")
    for iface in interfaces:
        address = iface.ipv4_address if iface.has_valid_address else "(no IPv4)"
        print(f"  - {iface.name:<16} {iface.hardware_address_text:<18} {address}")
    print()

    if len(sys.argv) > 1:
        selected = find_by_name(interfaces, sys.argv[1])
        if selected is None:
            print(f"Error: '{sys.argv[1]}' is not an eligible interface.")
            sys.exit(1)
    else:
        selected = first_with_valid_address(interfaces)
        if selected is None:
            print("Error: No eligible interface has an IPv4 address.")
            sys.exit(1)

    if not selected.has_valid_address:
        print(f"Error: {selected.name} has no IPv4 address.")
        sys.exit(1)

    client = discovery.create_arp_client(selected.endpoint())
    print(f"Selected {selected.name}: {client}")


if __name__ == "__main__":
    main()
