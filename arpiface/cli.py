#!/usr/bin/env python3
"""arpiface CLI - inspect the interfaces available for ARP tooling."""

import click

from arpiface.utils.env import EnvVarTypeError, get_env
from arpiface.utils.logger import Logger, LogLevel


@click.group()
@click.option("--debug", is_flag=True, help="Log discovery decisions to stderr")
def arpiface(debug):
    """Find network interfaces usable for ARP operations."""
    if not Logger.is_configured():
        try:
            level = get_env(
                "ARPIFACE_LOG_LEVEL", default=LogLevel.WARNING, as_type=LogLevel
            )
        except EnvVarTypeError as e:
            raise click.UsageError(str(e)) from e
        Logger.configure(level=level, timestamps=True)
    if debug:
        Logger.set_level("DEBUG")


@arpiface.command(name="list")
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    default=False,
    help="Show every host interface and whether it is eligible",
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option(
    "--export-file",
    default=None,
    help="Also write results to this JSON file ('-' for a timestamped name)",
)
@click.pass_context
def list_interfaces(ctx, show_all, as_json, export_file):
    """List active Ethernet and Wi-Fi interfaces."""
    from arpiface.commands.list_cmd import run_list

    if show_all and (as_json or export_file):
        raise click.UsageError("--all cannot be combined with --json or --export-file")

    ctx.exit(run_list(show_all=show_all, as_json=as_json, export_filename=export_file))


@arpiface.command()
@click.argument("name")
@click.pass_context
def show(ctx, name):
    """Show one interface and its ARP endpoint."""
    from arpiface.commands.show_cmd import run_show

    ctx.exit(run_show(name))


@arpiface.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display arpiface version information."""
    from arpiface.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    arpiface()
