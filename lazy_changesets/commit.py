"""Commit message strategies.

The ``commit`` setting selects a module that generates commit messages.
A strategy module may define::

    def get_add_message(changeset: Changeset, options: dict | None) -> str

The setting is either an installed module ("my_tools.changesets") or a
Python file in the workspace ("scripts/commit.py"). This module is itself
the built-in strategy used for ``commit = true``.
"""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Callable
from pathlib import Path
from types import ModuleType
from typing import Any

from .errors import ConfigError
from .models import Changeset

AddMessage = Callable[[Changeset, dict[str, Any] | None], str]


def get_add_message(changeset: Changeset, options: dict[str, Any] | None) -> str:
    """Commit message for a newly added changeset.

    ``skip_ci`` set to True or "add" appends a ``[skip ci]`` trailer.
    """
    skip_ci = (options or {}).get("skip_ci") in (True, "add")
    message = f"docs(changeset): {changeset.summary}"
    if skip_ci:
        message += "\n\n[skip ci]\n"
    return message


def _strategy_file(root: Path, target: str) -> Path | None:
    """Map a strategy setting to a file in the workspace, if it names one.

    "./release/commit.py" and "release/commit.py" are paths relative to
    the workspace root; "release.commit" names the same file when it is
    not an installed module.
    """
    if target.endswith(".py") or "/" in target or "\\" in target:
        return root / target
    candidate = root / (target.replace(".", "/") + ".py")
    return candidate if candidate.is_file() else None


def _load_file(path: Path) -> ModuleType:
    if not path.is_file():
        raise ConfigError(f"Commit strategy file not found: {path}")
    module_name = f"lazy_changesets_strategy_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ConfigError(f"Could not load commit strategy from {path}")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except (ImportError, SyntaxError) as exc:
        raise ConfigError(f"Could not load commit strategy {path}: {exc}") from exc
    return module


def get_commit_functions(
    commit: bool | str | list[Any], root: Path
) -> tuple[AddMessage | None, dict[str, Any] | None]:
    """Resolve the configured strategy to its add-message generator.

    Workspace files are loaded from their path; anything else is imported
    as an installed module.

    Args:
        commit: The ``commit`` setting.
        root: Workspace root that strategy paths are relative to.

    Returns:
        ``(get_add_message, options)``. The generator is None when commits
        are disabled or the strategy module does not define one.

    Raises:
        ConfigError: If the strategy module cannot be loaded.
    """
    if commit is False:
        return None, None
    if commit is True:
        return get_add_message, None

    if isinstance(commit, str):
        target, options = commit, None
    else:
        target = commit[0]
        options = commit[1] if len(commit) > 1 else None

    path = _strategy_file(root, target)
    if path is not None:
        module = _load_file(path)
    else:
        try:
            module = importlib.import_module(target)
        except ImportError as exc:
            raise ConfigError(
                f"Could not load commit strategy {target!r}: {exc}"
            ) from exc
    return getattr(module, "get_add_message", None), options
