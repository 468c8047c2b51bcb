"""CLI entry point for lazy-changesets."""

from __future__ import annotations

from pathlib import Path

import click
import tomlkit

from lazy_changesets.config import load_config
from lazy_changesets.create import create
from lazy_changesets.models import BumpType, RunOptions
from lazy_changesets.toml import (
    TOOL_NAME,
    get_workspace_member_globs,
    load_pyproject,
    save_pyproject,
)
from lazy_changesets.write import CHANGESET_DIR

README = """\
# Changesets

This folder holds changesets: markdown files describing which workspace
packages a change releases, how far each one is bumped, and a summary for
the changelog. Add one with:

    lazy-changesets add
"""


@click.group()
@click.version_option(package_name="lazy-changesets")
def cli() -> None:
    """Record release notes for packages of a uv workspace."""


@cli.command()
def init() -> None:
    """Set up the .changeset folder and default settings."""
    root = Path.cwd()

    # Sanity checks
    if not (root / ".git").exists():
        raise click.ClickException("Not a git repository. Run from the repo root.")

    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        raise click.ClickException("No pyproject.toml found in current directory.")

    doc = load_pyproject(pyproject)
    if not get_workspace_member_globs(doc):
        raise click.ClickException(
            "No [tool.uv.workspace] members defined in pyproject.toml.\n"
            "lazy-changesets requires a uv workspace. Example:\n\n"
            "  [tool.uv.workspace]\n"
            '  members = ["packages/*"]'
        )

    changeset_dir = root / CHANGESET_DIR
    changeset_dir.mkdir(exist_ok=True)
    readme = changeset_dir / "README.md"
    if not readme.exists():
        readme.write_text(README)

    tool = doc.setdefault("tool", tomlkit.table(is_super_table=True))
    if TOOL_NAME not in tool:
        settings = tomlkit.table()
        settings["base-branch"] = "main"
        settings["commit"] = False
        settings["ignore"] = tomlkit.array()
        tool[TOOL_NAME] = settings
        save_pyproject(pyproject, doc)

    click.echo(f"✓ Initialized {CHANGESET_DIR}/")
    click.echo()
    click.echo("Next steps:")
    click.echo(f"  1. Review [tool.{TOOL_NAME}] in pyproject.toml")
    click.echo("  2. Record your first changeset:")
    click.echo("       lazy-changesets add")


@cli.command()
@click.option("--empty", is_flag=True, help="Add a changeset with no releases.")
@click.option("--open", "open_", is_flag=True, help="Open the changeset in $EDITOR.")
@click.option("--filter", "filter_", default=None, help="Only release this package.")
@click.option(
    "--bump",
    type=click.Choice([b.value for b in BumpType]),
    default=None,
    help="Bump type for every package.",
)
@click.option("--summary", default=None, help="Changelog summary.")
def add(
    empty: bool,
    open_: bool,
    filter_: str | None,
    bump: str | None,
    summary: str | None,
) -> None:
    """Record a changeset for the packages changed since the base branch.

    Passing both --bump and --summary skips every question.
    """
    root = Path.cwd()
    options = RunOptions(
        empty=empty,
        open=open_,
        filter=filter_,
        bump=BumpType(bump) if bump else None,
        summary=summary,
    )
    create(root, options, load_config(root))


cli.add_command(add, name="create")
