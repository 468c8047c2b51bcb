"""The create workflow: discover → decide → build → confirm → write → commit.

This module orchestrates ``lazy-changesets add``:
1. Discover all packages in the workspace
2. Detect which packages changed since the base branch
3. Decide, once, how the changeset is built and confirmed
4. Build the changeset (asking the operator where needed)
5. Write it to .changeset/<id>.md if confirmed
6. Commit it when a commit strategy is configured
7. Optionally open it in the operator's editor

Nothing is written, committed or opened unless the changeset ends up
confirmed; declining or having nothing to record is not an error.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import click
from packaging.utils import canonicalize_name
from pydantic import BaseModel, Field

from .builder import create_changeset
from .changes import get_changed_packages_since_ref
from .commit import get_commit_functions
from .editor import open_in_editor
from .errors import EmptyWorkspaceError
from .messages import print_confirmation_message, print_major_change_reminder
from .models import Changeset, Config, PackageInfo, RunOptions
from .prompts import ask_confirm
from .shell import error, git_add, git_commit, info, log, warn
from .workspace import discover_packages, is_listable, listable_packages
from .write import changeset_path, write_changeset


class DecisionKind(str, Enum):
    """How a changeset is built and confirmed for one run.

    EMPTY: placeholder with no releases, confirmed without git or prompts.
    NO_CHANGE: nothing changed and no filter; unconfirmed, nothing written.
    NON_INTERACTIVE: bump and summary both given; built without prompts.
    FORCED: bump or filter given; confirmed without asking.
    INTERACTIVE: nothing forced; the operator confirms the result.
    """

    EMPTY = "empty"
    NO_CHANGE = "no-change"
    NON_INTERACTIVE = "non-interactive"
    FORCED = "forced"
    INTERACTIVE = "interactive"


class Decision(BaseModel):
    """The decision kind for a run and the package names it starts from."""

    kind: DecisionKind
    candidates: list[str] = Field(default_factory=list)


class CreateResult(BaseModel):
    """Outcome of a create run. ``changeset_id``/``path`` are set once written."""

    changeset: Changeset
    changeset_id: str | None = None
    path: Path | None = None


def decide(options: RunOptions, changed_names: list[str]) -> Decision:
    """Resolve the run options and detected changes into a single decision.

    Args:
        options: CLI options for this run.
        changed_names: Listable packages changed since the base branch.
    """
    if options.empty:
        return Decision(kind=DecisionKind.EMPTY)

    package_filter = canonicalize_name(options.filter) if options.filter else None
    if changed_names:
        candidates = [
            name
            for name in changed_names
            if package_filter is None or name == package_filter
        ]
    elif package_filter is not None:
        # Allows a changeset for a package without a diff, e.g. a dep-only bump
        candidates = [package_filter]
    else:
        return Decision(kind=DecisionKind.NO_CHANGE)

    if options.bump is not None and options.summary is not None:
        kind = DecisionKind.NON_INTERACTIVE
    elif options.bump is not None or package_filter is not None:
        kind = DecisionKind.FORCED
    else:
        kind = DecisionKind.INTERACTIVE
    return Decision(kind=kind, candidates=candidates)


def build_changeset(
    decision: Decision, options: RunOptions, listable: list[PackageInfo]
) -> Changeset:
    """Produce the changeset for a decision, confirmed or not."""
    if decision.kind is DecisionKind.EMPTY:
        return Changeset(releases=[], summary="", confirmed=True)
    if decision.kind is DecisionKind.NO_CHANGE:
        error("No changed files detected.")
        return Changeset(releases=[], summary="", confirmed=False)

    changeset = create_changeset(
        decision.candidates, listable, options.bump, options.summary
    )
    print_confirmation_message(changeset, len(listable) > 1)

    if decision.kind is DecisionKind.INTERACTIVE:
        if not changeset.confirmed:
            confirmed = ask_confirm("Is this your desired changeset?")
            changeset = changeset.model_copy(update={"confirmed": confirmed})
    elif not changeset.confirmed:
        changeset = changeset.model_copy(update={"confirmed": True})
    return changeset


def warn_unknown_filter(package_filter: str, listable: list[PackageInfo]) -> None:
    """Report a --filter that cannot end up in the changeset."""
    name = canonicalize_name(package_filter)
    if all(pkg.name != name for pkg in listable):
        warn(
            f"--filter {package_filter!r} does not name a listable workspace "
            "package; it will not be released by this changeset"
        )


def create(cwd: Path, options: RunOptions, config: Config) -> CreateResult:
    """Run the create workflow for the workspace rooted at ``cwd``.

    Args:
        cwd: Workspace root.
        options: CLI options for this run.
        config: Workspace settings (base branch, commit strategy, ...).

    Raises:
        EmptyWorkspaceError: If the workspace has no packages at all.
    """
    root = Path(cwd)
    packages = discover_packages(root)
    if not packages:
        raise EmptyWorkspaceError(str(root))
    listable = listable_packages(config, packages)

    if options.empty:
        decision = decide(options, [])
    else:
        changed = get_changed_packages_since_ref(root, packages, config.base_branch)
        decision = decide(
            options, [pkg.name for pkg in changed if is_listable(config, pkg)]
        )

    if options.filter and not options.empty:
        warn_unknown_filter(options.filter, listable)

    changeset = build_changeset(decision, options, listable)
    if not changeset.confirmed:
        return CreateResult(changeset=changeset)

    # Resolved first so a broken strategy fails before anything is written
    get_add_message, commit_options = get_commit_functions(config.commit, root)
    changeset_id = write_changeset(changeset, root)
    path = changeset_path(root, changeset_id)

    prefix = "Empty " if options.empty else ""
    if get_add_message is not None:
        git_add(path, root)
        git_commit(get_add_message(changeset, commit_options), root)
        log(click.style(f"{prefix}Changeset added and committed", fg="green"))
    else:
        log(
            click.style(
                f"{prefix}Changeset added! - you can now commit it\n", fg="green"
            )
        )

    if changeset.has_major_change:
        print_major_change_reminder()
    else:
        log(
            click.style(
                "If you want to modify or expand on the changeset summary, "
                "you can find it here",
                fg="green",
            )
        )
    info(click.style(str(path), fg="blue"))

    if options.open:
        open_in_editor(path)

    return CreateResult(changeset=changeset, changeset_id=changeset_id, path=path)
