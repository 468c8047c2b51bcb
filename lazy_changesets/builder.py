"""Changeset building: turn candidate packages into a changeset draft."""

from __future__ import annotations

from .models import BumpType, Changeset, PackageInfo, Release
from .prompts import ask_bump_type, ask_packages, ask_summary
from .shell import log, warn
from .versions import describe_bump


def _usable_candidates(
    changed_names: list[str], listable: dict[str, PackageInfo]
) -> list[str]:
    """De-duplicate candidates, keeping only packages that can be listed."""
    names: list[str] = []
    for name in changed_names:
        if name in names:
            continue
        if name not in listable:
            warn(f"{name} is not a listable workspace package, skipping it")
            continue
        names.append(name)
    return names


def create_changeset(
    changed_names: list[str],
    listable_packages: list[PackageInfo],
    bump: BumpType | None = None,
    summary: str | None = None,
) -> Changeset:
    """Build a changeset draft for the given candidate packages.

    With both ``bump`` and ``summary`` given nothing is asked: every
    candidate is released at ``bump`` and the draft comes back confirmed.
    Otherwise the operator picks packages, bump types and a summary, with
    ``bump``/``summary`` as defaults, and the draft is left unconfirmed for
    the caller to decide.

    Args:
        changed_names: Candidate package names, usually the changed ones.
        listable_packages: Every package that may appear in a changeset.
        bump: Forced bump type, or the default when asking.
        summary: Forced summary, or the default when asking.
    """
    listable = {pkg.name: pkg for pkg in listable_packages}
    candidates = _usable_candidates(changed_names, listable)

    if bump is not None and summary is not None:
        return Changeset(
            releases=[Release(name=name, type=bump) for name in candidates],
            summary=summary,
            confirmed=True,
        )

    if len(listable) > 1:
        unchanged = [name for name in listable if name not in candidates]
        selected = ask_packages(candidates, unchanged)
    else:
        # Nothing to choose between in a single-package repo
        selected = list(listable)

    releases: list[Release] = []
    for name in selected:
        pkg = listable[name]
        bump_type = ask_bump_type(name, pkg.version, bump or BumpType.PATCH)
        log(f"  {name}: {describe_bump(pkg.version, bump_type)}")
        releases.append(Release(name=name, type=bump_type))

    return Changeset(releases=releases, summary=ask_summary(summary), confirmed=False)
