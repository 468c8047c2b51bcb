"""Change detection against a baseline git reference."""

from __future__ import annotations

from pathlib import Path

from .models import PackageInfo
from .shell import git


def get_diverged_commit(root: Path, ref: str) -> str:
    """Return the commit where HEAD diverged from ``ref``."""
    return git("merge-base", ref, "HEAD", cwd=root)


def get_changed_files_since(root: Path, ref: str) -> list[str]:
    """List files changed since ``ref``, relative to the repo root.

    Includes committed and uncommitted modifications since the merge base
    as well as untracked files that are not ignored.
    """
    diverged_at = get_diverged_commit(root, ref)
    committed = git("diff", "--name-only", diverged_at, cwd=root).splitlines()
    untracked = git(
        "ls-files", "--others", "--exclude-standard", cwd=root
    ).splitlines()
    files: list[str] = []
    for f in [*committed, *untracked]:
        if f and f not in files:
            files.append(f)
    return files


def get_changed_packages_since_ref(
    root: Path, packages: dict[str, PackageInfo], ref: str
) -> list[PackageInfo]:
    """Determine which packages have files changed since ``ref``.

    Each changed file belongs to the package whose directory is the
    longest prefix of its path, so nested packages are not reported for
    their parent's changes. Files outside every package are ignored.

    Returns:
        Changed packages in discovery order.
    """
    # git reports paths relative to the repository top level, which can sit
    # above the workspace root
    toplevel = Path(git("rev-parse", "--show-toplevel", cwd=root)).resolve()
    prefix = root.resolve().relative_to(toplevel).as_posix()
    prefix = "" if prefix == "." else prefix + "/"

    owners: dict[str, PackageInfo] = {}
    for path in get_changed_files_since(root, ref):
        if not path.startswith(prefix):
            continue
        rel = path[len(prefix) :]
        for pkg in packages.values():
            pkg_dir = pkg.path.rstrip("/") + "/"
            if not rel.startswith(pkg_dir):
                continue
            current = owners.get(rel)
            if current is None or len(pkg.path) > len(current.path):
                owners[rel] = pkg

    changed = {pkg.name for pkg in owners.values()}
    return [pkg for name, pkg in packages.items() if name in changed]
