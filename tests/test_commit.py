"""Tests for lazy_changesets.commit."""

from __future__ import annotations

from pathlib import Path

import pytest

from lazy_changesets import commit
from lazy_changesets.commit import get_add_message, get_commit_functions
from lazy_changesets.errors import ConfigError
from lazy_changesets.models import Changeset


class TestGetAddMessage:
    def test_message(self) -> None:
        changeset = Changeset(summary="Add retries", confirmed=True)
        assert get_add_message(changeset, None) == "docs(changeset): Add retries"

    @pytest.mark.parametrize("skip_ci", [True, "add"])
    def test_skip_ci(self, skip_ci: bool | str) -> None:
        changeset = Changeset(summary="Add retries", confirmed=True)
        message = get_add_message(changeset, {"skip_ci": skip_ci})
        assert message == "docs(changeset): Add retries\n\n[skip ci]\n"

    def test_skip_ci_for_other_commands_only(self) -> None:
        message = get_add_message(Changeset(summary="x"), {"skip_ci": "version"})
        assert "[skip ci]" not in message


STRATEGY = '''\
def get_add_message(changeset, options):
    return f"chore: {changeset.summary} ({(options or {}).get('team', 'none')})"
'''


class TestGetCommitFunctions:
    def test_disabled(self, tmp_path: Path) -> None:
        assert get_commit_functions(False, tmp_path) == (None, None)

    def test_builtin(self, tmp_path: Path) -> None:
        assert get_commit_functions(True, tmp_path) == (get_add_message, None)

    def test_module_path(self, tmp_path: Path) -> None:
        add_message, options = get_commit_functions("lazy_changesets.commit", tmp_path)
        assert add_message is commit.get_add_message
        assert options is None

    def test_module_with_options(self, tmp_path: Path) -> None:
        add_message, options = get_commit_functions(
            ["lazy_changesets.commit", {"skip_ci": True}], tmp_path
        )
        assert add_message is commit.get_add_message
        assert options == {"skip_ci": True}

    def test_module_without_generator(self, tmp_path: Path) -> None:
        assert get_commit_functions("lazy_changesets.versions", tmp_path) == (
            None,
            None,
        )

    def test_missing_module(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="no_such_strategy"):
            get_commit_functions("no_such_strategy", tmp_path)


class TestWorkspaceStrategies:
    """Strategies that live in the workspace rather than an installed package."""

    def test_module_name_of_workspace_file(self, tmp_path: Path) -> None:
        (tmp_path / "my_commit.py").write_text(STRATEGY)

        add_message, options = get_commit_functions("my_commit", tmp_path)

        assert add_message is not None
        assert add_message(Changeset(summary="Add retries"), options) == (
            "chore: Add retries (none)"
        )

    def test_dotted_name_of_nested_file(self, tmp_path: Path) -> None:
        (tmp_path / "tools").mkdir()
        (tmp_path / "tools" / "commit_msg.py").write_text(STRATEGY)

        add_message, _ = get_commit_functions("tools.commit_msg", tmp_path)

        assert add_message is not None

    def test_relative_file_path_with_options(self, tmp_path: Path) -> None:
        (tmp_path / ".changeset").mkdir()
        (tmp_path / ".changeset" / "commit.py").write_text(STRATEGY)

        add_message, options = get_commit_functions(
            ["./.changeset/commit.py", {"team": "core"}], tmp_path
        )

        assert options == {"team": "core"}
        assert add_message is not None
        assert add_message(Changeset(summary="x"), options) == "chore: x (core)"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            get_commit_functions("./scripts/commit.py", tmp_path)

    def test_file_without_generator(self, tmp_path: Path) -> None:
        (tmp_path / "empty_strategy.py").write_text("VALUE = 1\n")

        assert get_commit_functions("empty_strategy.py", tmp_path) == (None, None)

    def test_broken_file(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text("import not_a_real_module_xyz\n")

        with pytest.raises(ConfigError, match="broken.py"):
            get_commit_functions("broken.py", tmp_path)
