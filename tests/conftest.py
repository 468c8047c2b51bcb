"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from lazy_changesets.models import PackageInfo

WorkspaceWriter = Callable[[Path, dict[str, str]], None]


def _write_workspace(root: Path, packages: dict[str, str]) -> None:
    (root / "pyproject.toml").write_text(
        '[tool.uv.workspace]\nmembers = ["packages/*"]\n'
    )
    for dirname, body in packages.items():
        package_dir = root / "packages" / dirname
        package_dir.mkdir(parents=True)
        (package_dir / "pyproject.toml").write_text(body)


@pytest.fixture
def write_workspace() -> WorkspaceWriter:
    """Create a uv workspace whose members have the given pyproject bodies."""
    return _write_workspace


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A workspace with two public packages, one depending on the other."""
    _write_workspace(
        tmp_path,
        {
            "alpha": '[project]\nname = "pkg-alpha"\nversion = "1.0.0"\n',
            "beta": (
                '[project]\nname = "pkg_beta"\nversion = "0.3.1"\n'
                'dependencies = ["pkg-alpha>=1.0", "requests>=2.0"]\n'
            ),
        },
    )
    return tmp_path


@pytest.fixture
def sample_packages() -> dict[str, PackageInfo]:
    """Discovered packages for tests that mock out discovery."""
    return {
        "pkg-a": PackageInfo(name="pkg-a", path="packages/a", version="1.0.0"),
        "pkg-b": PackageInfo(name="pkg-b", path="packages/b", version="2.1.0"),
        "pkg-c": PackageInfo(name="pkg-c", path="packages/c", version="0.1.0"),
    }
