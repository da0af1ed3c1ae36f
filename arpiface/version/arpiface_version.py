"""Version information for arpiface, read from the installed distribution.

The version lives in pyproject.toml only. At runtime it is taken from the
package metadata, so a source checkout that was never installed reports
0.0.0 with the local label "unknown".
"""

from __future__ import annotations

import platform
import re
from dataclasses import dataclass
from importlib import metadata

DISTRIBUTION_NAME = "arpiface"

# Libraries whose versions matter when reporting interface discovery bugs
RUNTIME_DEPENDENCIES = ("psutil", "pydantic", "click")

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?(?:[+.-]?(.+))?$")


@dataclass(frozen=True)
class Version:
    """Semantic version plus an optional pre-release/local label."""

    major: int
    minor: int
    patch: int
    label: str | None = None

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        return f"{core}+{self.label}" if self.label else core

    def semver(self) -> tuple[int, int, int]:
        """Return (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a PEP 440-ish version string such as '0.2.0' or '1.0.0rc1'.

        Raises:
            ValueError: If text does not start with MAJOR.MINOR.
        """
        match = _VERSION_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Unrecognised version string: {text!r}")
        major, minor, patch, label = match.groups()
        return cls(int(major), int(minor), int(patch or 0), label)


def installed_version(distribution: str = DISTRIBUTION_NAME) -> Version:
    """Return the installed version of distribution.

    Returns:
        The parsed version, or 0.0.0+unknown if it is not installed.
    """
    try:
        return Version.parse(metadata.version(distribution))
    except metadata.PackageNotFoundError:
        return Version(0, 0, 0, "unknown")


def runtime_report() -> dict[str, str]:
    """Collect Python and dependency versions for `arpiface version -v`."""
    report = {"python": platform.python_version()}
    for name in RUNTIME_DEPENDENCIES:
        try:
            report[name] = metadata.version(name)
        except metadata.PackageNotFoundError:
            report[name] = "not installed"
    return report


ARPIFACE_VERSION = installed_version()
