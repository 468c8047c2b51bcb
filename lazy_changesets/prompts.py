"""Interactive prompts used while building a changeset.

Every question goes through click so that answers can be fed from stdin
in tests and CI.
"""

from __future__ import annotations

import click

from .models import BumpType

SUMMARY_EDITOR_TEMPLATE = (
    "\n"
    "# Please enter a summary for your changes.\n"
    "# An empty message aborts the editor.\n"
)


def ask_confirm(question: str) -> bool:
    return click.confirm(question, default=True)


def _parse_selection(raw: str, options: list[str]) -> list[str]:
    """Turn "a, 2, c" into package names, accepting names or 1-based indices.

    Raises:
        click.UsageError: Makes click.prompt show the message and re-ask.
    """
    selected: list[str] = []
    for token in (t.strip() for t in raw.split(",")):
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= len(options):
            name = options[int(token) - 1]
        elif token in options:
            name = token
        else:
            raise click.UsageError(f"Unknown package: {token}")
        if name not in selected:
            selected.append(name)
    if not selected:
        raise click.UsageError("You must select at least one package.")
    return selected


def ask_packages(changed: list[str], unchanged: list[str]) -> list[str]:
    """Ask which packages the changeset should include.

    Changed packages are listed first and preselected.
    """
    options = [*changed, *unchanged]
    for heading, names, offset in (
        ("changed packages", changed, 0),
        ("unchanged packages", unchanged, len(changed)),
    ):
        if not names:
            continue
        click.echo(click.style(heading, bold=True))
        for i, name in enumerate(names, start=offset + 1):
            click.echo(f"  {i:>3}. {name}")

    return click.prompt(
        "Which packages would you like to include? (names or numbers, comma separated)",
        default=", ".join(changed) if changed else None,
        value_proc=lambda raw: _parse_selection(raw, options),
    )


def ask_bump_type(name: str, version: str | None, default: BumpType) -> BumpType:
    label = f"{name} ({version})" if version else name
    answer = click.prompt(
        f"What kind of change is this for {label}?",
        type=click.Choice([b.value for b in BumpType]),
        default=default.value,
    )
    return BumpType(answer)


def _strip_comments(text: str) -> str:
    lines = [line for line in text.splitlines() if not line.startswith("#")]
    return "\n".join(lines).strip()


def ask_summary(default: str | None = None) -> str:
    """Ask for the changelog summary.

    An empty answer opens the editor for a longer, multi-line summary. If
    that also comes back empty, keep asking until a summary is given.
    """
    summary = click.prompt(
        "Please enter a summary for this change (this will be in the changelogs).\n"
        "  (submit empty line to open external editor)\nSummary",
        default=default or "",
        show_default=bool(default),
    ).strip()
    if not summary:
        edited = click.edit(SUMMARY_EDITOR_TEMPLATE, extension=".md")
        summary = _strip_comments(edited or "")
    while not summary:
        summary = click.prompt("A summary is required for the changelog! 😪").strip()
    return summary
