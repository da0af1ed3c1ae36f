"""List command - displays the interfaces ARP tooling can bind to."""

import socket
from datetime import datetime
from pathlib import Path

import click

from arpiface.backends.discovery import InterfaceDiscovery, is_eligible
from arpiface.models.interface_models import InterfaceDescriptor, InterfaceListing

NO_INTERFACES_MESSAGE = "No active Ethernet/Wi-Fi interface found."


def _address_column(descriptor: InterfaceDescriptor) -> str:
    if descriptor.has_valid_address:
        return str(descriptor.ipv4_address)
    return "(no IPv4)"


def _print_table(descriptors: list[InterfaceDescriptor]) -> None:
    print(f"{'Interface':<16} {'MAC Address':<18} {'IPv4 Address'}")
    print("-" * 52)
    for descriptor in descriptors:
        mac = descriptor.hardware_address_text or "-"
        print(f"{descriptor.name:<16} {mac:<18} {_address_column(descriptor)}")


def _print_all(discovery: InterfaceDiscovery) -> None:
    """Print every host interface with the attributes eligibility looks at."""
    print(
        f"{'Interface':<16} {'Type':<17} {'Status':<8} {'Multicast':<10} "
        f"{'IPv4 Address':<16} {'Eligible'}"
    )
    print("-" * 80)
    for handle in discovery.host_interfaces():
        descriptor = InterfaceDescriptor.from_host_interface(handle)
        print(
            f"{handle.name:<16} {handle.interface_type:<17} "
            f"{handle.operational_status:<8} "
            f"{'yes' if handle.supports_multicast else 'no':<10} "
            f"{_address_column(descriptor):<16} "
            f"{'yes' if is_eligible(handle) else 'no'}"
        )


def run_list(
    show_all: bool = False,
    as_json: bool = False,
    export_filename: str | None = None,
    discovery: InterfaceDiscovery | None = None,
) -> int:
    """Display eligible interfaces.

    Args:
        show_all: Show every host interface with its eligibility verdict.
        as_json: Print the listing as JSON instead of a table.
        export_filename: Also write the listing as JSON to this file.
        discovery: Discovery service to use (defaults to the host's).

    Returns:
        Process exit code: 0, or 1 when no eligible interface exists.
    """
    discovery = discovery or InterfaceDiscovery()

    if show_all:
        _print_all(discovery)
        return 0

    descriptors = discovery.list_eligible_interfaces()
    listing = InterfaceListing(hostname=socket.gethostname(), interfaces=descriptors)

    if as_json:
        print(listing.model_dump_json(indent=2))
    elif descriptors:
        _print_table(descriptors)

    if export_filename:
        if export_filename == "-":
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            export_filename = f"arpiface_list_{timestamp}.json"
        Path(export_filename).write_text(listing.model_dump_json(indent=2))
        click.echo(f"JSON exported to: {export_filename}", err=True)

    if not descriptors:
        click.echo(NO_INTERFACES_MESSAGE, err=True)
        return 1
    return 0
