"""Human-readable output for changesets."""

from __future__ import annotations

import click

from .models import BumpType, Changeset
from .shell import log, warn

MAJOR_CHANGE_REMINDER = (
    "This Changeset includes a major change and we STRONGLY recommend adding "
    "more information to the changeset:",
    "WHAT the breaking change is",
    "WHY the change was made",
    "HOW a consumer should update their code",
)


def print_confirmation_message(
    changeset: Changeset, repo_has_multiple_packages: bool
) -> None:
    """Preview which packages a changeset releases, grouped by bump type."""
    log("\n=== Summary of changesets ===")
    for bump in (BumpType.MAJOR, BumpType.MINOR, BumpType.PATCH):
        names = changeset.names_of_type(bump)
        if names:
            label = click.style(f"{bump.value}:", fg="green", bold=True)
            log(f"{label}  {', '.join(names)}")
    log("")

    if repo_has_multiple_packages:
        log(
            "Note: All dependents of these packages that will be incompatible "
            f"with the new version will be {click.style('patch bumped', fg='bright_red')} "
            "when this changeset is applied.\n"
        )


def print_major_change_reminder() -> None:
    for line in MAJOR_CHANGE_REMINDER:
        warn(line)
