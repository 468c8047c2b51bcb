"""Errors surfaced to the command line.

All of these are click exceptions so the CLI prints ``Error: <message>``
and exits with code 1 without a traceback.
"""

from __future__ import annotations

import click


class LazyChangesetsError(click.ClickException):
    """Base class for user-facing lazy-changesets failures."""


class EmptyWorkspaceError(LazyChangesetsError):
    """Raised when the workspace has no packages at all."""

    def __init__(self, root: str) -> None:
        super().__init__(
            f"No packages found in {root}. You might have a uv workspace "
            "configured but no packages yet?"
        )


class ConfigError(LazyChangesetsError):
    """Raised when [tool.lazy-changesets] holds invalid settings."""
