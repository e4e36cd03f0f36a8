from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from errors import ManifestError


class ProjectKind(str, Enum):
    """What a Cargo.toml describes."""

    PACKAGE = "package"
    WORKSPACE = "workspace"


class PackageTable(BaseModel):
    """The `[package]` table. Only the name is read."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(description="Package name")


class WorkspaceTable(BaseModel):
    """The `[workspace]` table. Only the member list is read."""

    model_config = ConfigDict(extra="ignore")

    members: list[str] = Field(
        default_factory=list,
        description="Member package directories, relative to the workspace root",
    )


class CargoManifest(BaseModel):
    """The parts of Cargo.toml that decide where a module goes."""

    model_config = ConfigDict(extra="ignore")

    package: PackageTable | None = None
    workspace: WorkspaceTable | None = None

    @property
    def kind(self) -> ProjectKind:
        # A root package that is also a workspace is treated as a package.
        if self.package is not None:
            return ProjectKind.PACKAGE
        if self.workspace is not None:
            return ProjectKind.WORKSPACE
        msg = "`Cargo.toml` declares neither a [package] nor a [workspace]"
        raise ManifestError(msg)
