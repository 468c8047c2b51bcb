"""Tests for lazy_changesets.builder."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from lazy_changesets.builder import create_changeset
from lazy_changesets.models import BumpType, Changeset, PackageInfo, Release


@pytest.fixture
def listable(sample_packages: dict[str, PackageInfo]) -> list[PackageInfo]:
    return list(sample_packages.values())


class TestForced:
    """Both bump and summary given: nothing is asked."""

    @patch("lazy_changesets.builder.ask_summary")
    @patch("lazy_changesets.builder.ask_bump_type")
    @patch("lazy_changesets.builder.ask_packages")
    def test_builds_confirmed_changeset(
        self,
        mock_packages: MagicMock,
        mock_bump: MagicMock,
        mock_summary: MagicMock,
        listable: list[PackageInfo],
    ) -> None:
        changeset = create_changeset(
            ["pkg-a", "pkg-b"], listable, BumpType.MINOR, "fix"
        )

        assert changeset == Changeset(
            releases=[
                Release(name="pkg-a", type=BumpType.MINOR),
                Release(name="pkg-b", type=BumpType.MINOR),
            ],
            summary="fix",
            confirmed=True,
        )
        mock_packages.assert_not_called()
        mock_bump.assert_not_called()
        mock_summary.assert_not_called()

    def test_zero_candidates(self, listable: list[PackageInfo]) -> None:
        changeset = create_changeset([], listable, BumpType.PATCH, "deps")

        assert changeset.releases == []
        assert changeset.confirmed is True

    def test_duplicates_and_unknown_names_dropped(
        self, listable: list[PackageInfo]
    ) -> None:
        changeset = create_changeset(
            ["pkg-a", "pkg-x", "pkg-a"], listable, BumpType.MAJOR, "breaking"
        )

        assert [r.name for r in changeset.releases] == ["pkg-a"]

    def test_empty_summary_still_forces(self, listable: list[PackageInfo]) -> None:
        changeset = create_changeset(["pkg-c"], listable, BumpType.PATCH, "")

        assert changeset.summary == ""
        assert changeset.confirmed is True


class TestInteractive:
    @patch("lazy_changesets.builder.ask_summary")
    @patch("lazy_changesets.builder.ask_bump_type")
    @patch("lazy_changesets.builder.ask_packages")
    def test_collects_answers_unconfirmed(
        self,
        mock_packages: MagicMock,
        mock_bump: MagicMock,
        mock_summary: MagicMock,
        listable: list[PackageInfo],
    ) -> None:
        mock_packages.return_value = ["pkg-b", "pkg-c"]
        mock_bump.side_effect = [BumpType.MAJOR, BumpType.PATCH]
        mock_summary.return_value = "Reworked the API"

        changeset = create_changeset(["pkg-b"], listable)

        mock_packages.assert_called_once_with(["pkg-b"], ["pkg-a", "pkg-c"])
        mock_bump.assert_any_call("pkg-b", "2.1.0", BumpType.PATCH)
        mock_summary.assert_called_once_with(None)
        assert changeset == Changeset(
            releases=[
                Release(name="pkg-b", type=BumpType.MAJOR),
                Release(name="pkg-c", type=BumpType.PATCH),
            ],
            summary="Reworked the API",
            confirmed=False,
        )

    @patch("lazy_changesets.builder.ask_summary")
    @patch("lazy_changesets.builder.ask_bump_type")
    @patch("lazy_changesets.builder.ask_packages")
    def test_forced_values_become_defaults(
        self,
        mock_packages: MagicMock,
        mock_bump: MagicMock,
        mock_summary: MagicMock,
        listable: list[PackageInfo],
    ) -> None:
        """Only one of bump/summary given: still asked, with it as default."""
        mock_packages.return_value = ["pkg-a"]
        mock_bump.return_value = BumpType.MINOR
        mock_summary.return_value = "typed"

        changeset = create_changeset(["pkg-a"], listable, bump=BumpType.MINOR)

        mock_bump.assert_called_once_with("pkg-a", "1.0.0", BumpType.MINOR)
        assert changeset.confirmed is False

        create_changeset(["pkg-a"], listable, summary="preset")
        mock_summary.assert_called_with("preset")

    @patch("lazy_changesets.builder.ask_summary")
    @patch("lazy_changesets.builder.ask_bump_type")
    @patch("lazy_changesets.builder.ask_packages")
    def test_single_package_selected_automatically(
        self,
        mock_packages: MagicMock,
        mock_bump: MagicMock,
        mock_summary: MagicMock,
    ) -> None:
        only = PackageInfo(name="solo", path=".", version="0.1.0")
        mock_bump.return_value = BumpType.MINOR
        mock_summary.return_value = "First feature"

        changeset = create_changeset([], [only])

        mock_packages.assert_not_called()
        assert changeset.releases == [Release(name="solo", type=BumpType.MINOR)]

    @patch("lazy_changesets.builder.ask_summary")
    @patch("lazy_changesets.builder.ask_bump_type")
    @patch("lazy_changesets.builder.ask_packages")
    def test_no_listable_packages(
        self,
        mock_packages: MagicMock,
        mock_bump: MagicMock,
        mock_summary: MagicMock,
    ) -> None:
        mock_summary.return_value = "Docs only"

        changeset = create_changeset([], [])

        mock_packages.assert_not_called()
        mock_bump.assert_not_called()
        assert changeset.releases == []
        assert changeset.summary == "Docs only"
