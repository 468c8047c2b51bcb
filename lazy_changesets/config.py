"""Loading of [tool.lazy-changesets] settings from the root pyproject.toml."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigError
from .models import Config
from .toml import TOOL_NAME, get_tool_settings, load_pyproject


def load_config(root: Path) -> Config:
    """Read settings for the workspace rooted at ``root``.

    A workspace without a pyproject.toml or without the tool table gets the
    defaults (base branch "main", no automatic commits).

    Raises:
        ConfigError: If the table holds unknown shapes or values.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return Config()

    settings = get_tool_settings(load_pyproject(pyproject))
    try:
        return Config.model_validate(settings)
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.{TOOL_NAME}] settings:\n{exc}") from exc
