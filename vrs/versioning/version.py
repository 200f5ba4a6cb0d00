"""
Version utility module for version string operations.

vrs only ever increments the middle component of a ``major.minor.patch``
string. The outer components are opaque: they are not required to be numeric
and are never reset or changed.
"""

import re
from typing import NamedTuple

from .exceptions import MalformedVersionError

_MINOR_PATTERN = re.compile(r"[0-9]+")


class VersionParts(NamedTuple):
    """The three dot separated components of a version string."""

    major: str
    minor: int
    patch: str

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version_string: str) -> VersionParts:
    """
    Split a version string into its three components.

    Args:
        version_string: Version string in format "x.y.z" where y is a
            non-negative integer

    Returns:
        VersionParts with the minor component as an int

    Raises:
        MalformedVersionError: If there are not exactly three components or the
            minor component is not a non-negative integer
    """
    parts = str(version_string).split(".")
    if len(parts) != 3:
        raise MalformedVersionError(version_string)

    major, minor, patch = parts
    if not _MINOR_PATTERN.fullmatch(minor):
        raise MalformedVersionError(version_string)

    return VersionParts(major, int(minor), patch)


def bump_version(version_string: str) -> str:
    """
    Return the version with its minor component incremented.

    >>> bump_version("1.4.0")
    '1.5.0'
    >>> bump_version("2.9.beta")
    '2.10.beta'
    """
    parts = parse_version(version_string)
    return str(parts._replace(minor=parts.minor + 1))


def tag_name(version_string: str, prefix: str = "v") -> str:
    """Name of the git tag for a version."""
    return f"{prefix}{version_string}"
