"""Version command."""

from arpiface.version import ARPIFACE_VERSION, runtime_report


def run_version(verbose: bool = False) -> None:
    """Print the arpiface version, plus runtime library versions if verbose."""
    print(f"arpiface {ARPIFACE_VERSION}")
    if not verbose:
        return

    print()
    for name, version in runtime_report().items():
        print(f"  {name + ':':<10} {version}")
