"""Data models for lazy-changesets.

These Pydantic models represent the core data structures used throughout
the create workflow: discovered packages, releases, the changeset draft,
and the options/config a single run is driven by.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BumpType(str, Enum):
    """Magnitude of change signaled for a package's next release."""

    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


class PackageInfo(BaseModel):
    """Metadata for a single package in the monorepo workspace.

    Attributes:
        name: Canonical (PEP 503) package name.
        path: Relative path from workspace root to the package directory.
        version: Version from pyproject.toml, None when the package has no
                 static or dynamic version.
        private: True when the package carries the
                 "Private :: Do Not Upload" classifier.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    version: str | None = None
    private: bool = False


class Release(BaseModel):
    """A single package bump recorded in a changeset."""

    name: str
    type: BumpType


class Changeset(BaseModel):
    """A changeset draft.

    Only ``confirmed`` changes after creation; once a changeset has been
    written to disk it is treated as read-only.
    """

    releases: list[Release] = Field(default_factory=list)
    summary: str = ""
    confirmed: bool = False

    @field_validator("releases")
    @classmethod
    def _unique_packages(cls, releases: list[Release]) -> list[Release]:
        seen: set[str] = set()
        for release in releases:
            if release.name in seen:
                raise ValueError(f"duplicate release for package {release.name!r}")
            seen.add(release.name)
        return releases

    @property
    def has_major_change(self) -> bool:
        return any(r.type is BumpType.MAJOR for r in self.releases)

    def names_of_type(self, bump: BumpType) -> list[str]:
        return [r.name for r in self.releases if r.type is bump]


class RunOptions(BaseModel):
    """Options for a single ``add`` invocation, as supplied by the CLI."""

    model_config = ConfigDict(frozen=True)

    empty: bool = False
    open: bool = False
    filter: str | None = None
    bump: BumpType | None = None
    summary: str | None = None


class Config(BaseModel):
    """Settings read from ``[tool.lazy-changesets]``.

    Attributes:
        base_branch: Git reference changes are computed against.
        commit: False to never commit, True for the built-in commit message,
                a dotted module path, or ``[module, options]``.
        ignore: Package names that may never appear in a changeset.
        private_packages_version: Whether private packages can be listed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_branch: str = Field(default="main", alias="base-branch")
    commit: bool | str | list[Any] = False
    ignore: list[str] = Field(default_factory=list)
    private_packages_version: bool = Field(
        default=True, alias="private-packages-version"
    )

    @field_validator("commit")
    @classmethod
    def _commit_shape(cls, value: bool | str | list[Any]) -> bool | str | list[Any]:
        if isinstance(value, list):
            if not 1 <= len(value) <= 2 or not isinstance(value[0], str):
                raise ValueError("commit must be [module] or [module, options]")
            if len(value) == 2 and not isinstance(value[1], dict):
                raise ValueError("commit options must be a table")
        return value
