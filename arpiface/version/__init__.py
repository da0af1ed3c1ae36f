"""Package version record."""

from arpiface.version.arpiface_version import (
    ARPIFACE_VERSION,
    Version,
    installed_version,
    runtime_report,
)

__all__ = ["ARPIFACE_VERSION", "Version", "installed_version", "runtime_report"]
