"""Show command - details for one eligible interface."""

import click

from arpiface.backends.discovery import InterfaceDiscovery, find_by_name

NO_ADDRESS_MESSAGE = "Selected interface has no IPv4 address."


def run_show(name: str, discovery: InterfaceDiscovery | None = None) -> int:
    """Display one eligible interface and the endpoint an ARP client would use.

    Returns:
        Process exit code: 0 on success, 1 if the interface is not
        eligible or has no IPv4 address.
    """
    discovery = discovery or InterfaceDiscovery()
    descriptor = find_by_name(discovery.list_eligible_interfaces(), name)

    if descriptor is None:
        click.echo(
            f"Interface '{name}' not found or not usable for ARP "
            "(needs an active Ethernet/Wi-Fi link with multicast).",
            err=True,
        )
        return 1

    print(f"Interface:          {descriptor.name}")
    print(f"MAC Address:        {descriptor.hardware_address_text or '-'}")

    if not descriptor.has_valid_address:
        print("IPv4 Address:       (none)")
        click.echo(NO_ADDRESS_MESSAGE, err=True)
        return 1

    print(f"IPv4 Address:       {descriptor.ipv4_address}")
    print(f"ARP Endpoint:       {descriptor.endpoint()}")
    return 0
