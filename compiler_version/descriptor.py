"""
Version descriptor parsing.

A descriptor has the form ``<major>.<minor>.<patch>[-<qualifier>]``. The
qualifier delimiter is what marks a version as something other than a
plain stable release.
"""

import re
from dataclasses import dataclass
from typing import Optional

QUALIFIER_DELIMITER = "-"

_VERSION_PATTERN = re.compile(r'^(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z][0-9A-Za-z.+-]*))?$')


@dataclass(frozen=True)
class VersionDescriptor:
    """Components of a compiler version string."""

    major: int
    minor: int
    patch: int
    qualifier: Optional[str] = None

    @property
    def is_stable(self) -> bool:
        return self.qualifier is None

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.qualifier is None:
            return base
        return f"{base}{QUALIFIER_DELIMITER}{self.qualifier}"


def has_qualifier(version_str: str) -> bool:
    """Return True if the version string carries a qualifier delimiter."""
    return QUALIFIER_DELIMITER in version_str


def parse_version(version_str: str) -> VersionDescriptor:
    """
    Parse a compiler version string into its components.

    Args:
        version_str: Version string like "1.9.0", "1.9.0-dev-123" or "2.0.0-RC2"

    Returns:
        VersionDescriptor with the numeric parts and optional qualifier

    Raises:
        ValueError: If version string format is invalid
    """
    match = _VERSION_PATTERN.match(version_str.strip())
    if not match:
        raise ValueError(f"Invalid version format: {version_str}")

    major, minor, patch, qualifier = match.groups()
    return VersionDescriptor(int(major), int(minor), int(patch), qualifier)
