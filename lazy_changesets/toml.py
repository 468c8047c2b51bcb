"""TOML reading and writing utilities.

Uses tomlkit to preserve formatting and comments when modifying pyproject.toml
files. This is important for maintaining readable, diff-friendly files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from packaging.utils import canonicalize_name

TOOL_NAME = "lazy-changesets"
PRIVATE_CLASSIFIER = "Private :: Do Not Upload"


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file.

    Returns a TOMLDocument that preserves formatting when modified and saved.
    """
    return tomlkit.parse(path.read_text())


def save_pyproject(path: Path, doc: tomlkit.TOMLDocument) -> None:
    """Save a TOMLDocument back to disk, preserving original formatting."""
    path.write_text(tomlkit.dumps(doc))


def get_project_name(doc: tomlkit.TOMLDocument, fallback: str) -> str:
    """Extract the canonical package name from [project].name.

    Names are normalized per PEP 503 (lowercase, hyphens instead of
    underscores) for consistent comparison.

    Args:
        doc: Parsed pyproject.toml document.
        fallback: Value to return if name is not specified.
    """
    return canonicalize_name(doc.get("project", {}).get("name", fallback))


def get_project_version(doc: tomlkit.TOMLDocument) -> str | None:
    """Extract version from [project].version.

    Packages that declare ``version`` as dynamic report "dynamic", and
    packages with neither report None (they can never be released).
    """
    project = doc.get("project", {})
    version = project.get("version")
    if version is not None:
        return str(version)
    if "version" in project.get("dynamic", []):
        return "dynamic"
    return None


def is_private(doc: tomlkit.TOMLDocument) -> bool:
    """True if the package opts out of uploads via its classifiers."""
    classifiers = doc.get("project", {}).get("classifiers", [])
    return PRIVATE_CLASSIFIER in classifiers


def get_workspace_member_globs(doc: tomlkit.TOMLDocument) -> list[str]:
    """Extract workspace member glob patterns from [tool.uv.workspace].

    These patterns (e.g., "packages/*", "libs/*") define which directories
    contain workspace packages. Returns an empty list when none are defined.
    """
    members = doc.get("tool", {}).get("uv", {}).get("workspace", {}).get("members")
    return list(members) if members else []


def get_tool_settings(doc: tomlkit.TOMLDocument) -> dict[str, Any]:
    """Return [tool.lazy-changesets] as plain Python values (empty if absent)."""
    table = doc.get("tool", {}).get(TOOL_NAME)
    if table is None:
        return {}
    return table.unwrap()
