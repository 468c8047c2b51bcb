"""Workspace discovery.

Finds every package of a uv workspace and decides which of them may
appear in a changeset.
"""

from __future__ import annotations

import glob
from pathlib import Path

from packaging.utils import canonicalize_name

from .models import Config, PackageInfo
from .toml import (
    get_project_name,
    get_project_version,
    get_workspace_member_globs,
    is_private,
    load_pyproject,
)


def discover_packages(root: Path) -> dict[str, PackageInfo]:
    """Scan the workspace and discover all packages.

    Reads [tool.uv.workspace].members from root pyproject.toml to find
    package directories, then extracts name, version and privacy from each
    package's pyproject.toml.

    Returns:
        Map of package name to PackageInfo, in glob order. Empty when the
        root has no pyproject.toml or no members match.
    """
    root_pyproject = root / "pyproject.toml"
    if not root_pyproject.exists():
        return {}
    member_globs = get_workspace_member_globs(load_pyproject(root_pyproject))

    # Expand globs to find all package directories
    member_dirs: list[Path] = []
    for pattern in member_globs:
        for match in sorted(glob.glob(str(root / pattern))):
            p = Path(match)
            if (p / "pyproject.toml").exists() and p not in member_dirs:
                member_dirs.append(p)

    packages: dict[str, PackageInfo] = {}
    for d in member_dirs:
        doc = load_pyproject(d / "pyproject.toml")
        name = get_project_name(doc, d.name)
        packages[name] = PackageInfo(
            name=name,
            path=d.relative_to(root).as_posix(),
            version=get_project_version(doc),
            private=is_private(doc),
        )

    return packages


def is_listable(config: Config, package: PackageInfo) -> bool:
    """Whether a package may be offered for a changeset.

    Ignored packages never are, private packages only when the config
    allows versioning them, and packages without a version never are.
    """
    ignored = {canonicalize_name(name) for name in config.ignore}
    if package.name in ignored:
        return False
    if package.private and not config.private_packages_version:
        return False
    return package.version is not None


def listable_packages(
    config: Config, packages: dict[str, PackageInfo]
) -> list[PackageInfo]:
    return [pkg for pkg in packages.values() if is_listable(config, pkg)]
