"""Data models for version-realign.

These Pydantic models are the read-only view of a build that the version
calculation needs: coordinates, projects with their parent references, and
the old/new pair reported for each realigned module.
"""

from __future__ import annotations

from typing import cast

from pydantic import BaseModel, ConfigDict, model_validator


class Coordinate(BaseModel):
    """A groupId/artifactId pair identifying one module independent of version."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


class ParentRef(BaseModel):
    """Reference to a module's parent descriptor."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str


class Project(BaseModel):
    """A single module of the build.

    Attributes:
        group_id: Declared groupId, or None when inherited from the parent.
        artifact_id: Declared artifactId.
        version: Declared version, or None when inherited from the parent.
        parent: The parent reference, if the descriptor declares one.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str | None = None
    artifact_id: str
    version: str | None = None
    parent: ParentRef | None = None

    @model_validator(mode="after")
    def _check_inheritance(self) -> Project:
        if self.parent is None and (self.group_id is None or self.version is None):
            raise ValueError(
                f"Project '{self.artifact_id}' has no parent to inherit "
                "groupId/version from"
            )
        return self

    @property
    def effective_group_id(self) -> str:
        if self.group_id is not None:
            return self.group_id
        return cast(ParentRef, self.parent).group_id

    @property
    def effective_version(self) -> str:
        if self.version is not None:
            return self.version
        return cast(ParentRef, self.parent).version

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(group_id=self.effective_group_id, artifact_id=self.artifact_id)


class VersionChange(BaseModel):
    """Records the version change computed for a module.

    Attributes:
        old: The declared version before realignment.
        new: The computed replacement version.
    """

    old: str
    new: str

    @property
    def changed(self) -> bool:
        return self.old != self.new
