"""Shell and git utilities.

Provides simple wrappers around subprocess calls for git operations, plus
the output helpers every step of the create workflow prints through.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import click

PREFIX = "🦋 "


def git(*args: str, cwd: Path | str | None = None, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "diff", "--name-only").
        cwd: Directory to run git in. Defaults to the process cwd.
        check: If True (default), raise on non-zero exit.

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=check
    )
    return result.stdout.strip()


def git_add(path: Path | str, cwd: Path | str) -> None:
    """Stage a single path."""
    git("add", str(path), cwd=cwd)


def git_commit(message: str, cwd: Path | str) -> None:
    """Commit whatever is staged with the given message."""
    git("commit", "-m", message, "--allow-empty", cwd=cwd)


def log(msg: str) -> None:
    """Print a plain progress line."""
    click.echo(msg)


def info(msg: str) -> None:
    click.echo(f"{PREFIX} {click.style('info', fg='cyan')} {msg}")


def warn(msg: str) -> None:
    """Print a warning line to stderr."""
    click.echo(f"{PREFIX} {click.style('warn', fg='yellow')} {msg}", err=True)


def error(msg: str) -> None:
    """Print an error line to stderr without stopping the run.

    Use for problems the workflow recovers from; unrecoverable ones raise
    a LazyChangesetsError instead.
    """
    click.echo(f"{PREFIX} {click.style('error', fg='red')} {msg}", err=True)
