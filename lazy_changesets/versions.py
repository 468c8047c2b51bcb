"""Version parsing and bumping utilities.

Handles conversion between version strings and semver objects, with
special handling for incomplete version strings (e.g., "1.0" → "1.0.0").
Used to show what a bump would turn a package's version into.
"""

from __future__ import annotations

import semver

from .models import BumpType


def parse_version(version_str: str) -> semver.Version:
    """Parse a version string into a semver.Version object.

    Handles incomplete versions by padding with zeros:
    - "1" → "1.0.0"
    - "1.2" → "1.2.0"
    - "1.2.3" → "1.2.3"

    Only the first 3 components are used (major.minor.patch).

    Raises:
        ValueError: If the string is not a dotted numeric version.
    """
    parts = version_str.split(".")
    while len(parts) < 3:
        parts.append("0")
    return semver.Version.parse(".".join(parts[:3]))


def bump_version(version_str: str, bump: BumpType) -> str:
    """Apply a bump to a version and return the result as a string.

    Examples:
        bump_version("1.2.3", BumpType.PATCH) → "1.2.4"
        bump_version("1.2.3", BumpType.MINOR) → "1.3.0"
        bump_version("1.2", BumpType.MAJOR) → "2.0.0"
    """
    v = parse_version(version_str)
    if bump is BumpType.MAJOR:
        return str(v.bump_major())
    if bump is BumpType.MINOR:
        return str(v.bump_minor())
    return str(v.bump_patch())


def describe_bump(version_str: str | None, bump: BumpType) -> str:
    """Render "old → new" for display, or just the bump type if unknown."""
    if version_str is None:
        return bump.value
    try:
        return f"{version_str} → {bump_version(version_str, bump)}"
    except ValueError:
        return bump.value
