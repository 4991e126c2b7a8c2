"""Library version information."""

from __future__ import annotations

VERSION_MAJOR = 2
VERSION_MINOR = 5
VERSION_PATCH = 1
VERSION_BUILD = 0


def library_version() -> int:
    """The version packed into one number, two decimal digits per component."""
    return (
        VERSION_MAJOR * 100 * 100 * 100
        + VERSION_MINOR * 100 * 100
        + VERSION_PATCH * 100
        + VERSION_BUILD
    )


def version_string() -> str:
    """The version as "major.minor.patch"."""
    return f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"