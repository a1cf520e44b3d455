# componentdirs/model/snapshot.py
from __future__ import annotations
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from componentdirs.core.paths import PathLinux, pathNormalizeToLinux
from .ids import ComponentId

__all__ = [
    "FileRecord",
    "RelativePath",
    "DependencyRecord",
    "Dependencies",
    "VersionSnapshot",
]



def _coerceComponentId(value: Any) -> Any:
    # Object-store payloads carry ids either as "name@version" or as {"name", "version"}.
    if isinstance(value, str):
        return ComponentId.parse(value)
    return value



class FileRecord(BaseModel):
    """A file stored in a component version, path relative to the component root."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    relativePath: str



class RelativePath(BaseModel):
    """Where a dependency file was found (source) and where it is linked from (destination)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sourceRelativePath: str
    destinationRelativePath: str



class DependencyRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: ComponentId
    relativePaths: tuple[RelativePath, ...] = ()

    @field_validator("id", mode="before")
    @classmethod
    def coerceId(cls, value: Any) -> Any:
        return _coerceComponentId(value)



class Dependencies:
    """Read-only view over a list of dependency records."""

    def __init__(self, dependencies: Iterable[DependencyRecord]) -> None:
        self.dependencies: tuple[DependencyRecord, ...] = tuple(dependencies)

    def getSourcesPaths(self) -> list[PathLinux]:
        return [
            pathNormalizeToLinux(relativePath.sourceRelativePath)
            for dependency in self.dependencies
            for relativePath in dependency.relativePaths
        ]

    def __iter__(self):
        return iter(self.dependencies)

    def __len__(self) -> int:
        return len(self.dependencies)



class VersionSnapshot(BaseModel):
    """
    Immutable snapshot of one component version as resolved by the object store.

    Holds the component's own files and every group of its resolved dependencies.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    files: tuple[FileRecord, ...] = ()
    dependencies: tuple[DependencyRecord, ...] = ()
    devDependencies: tuple[DependencyRecord, ...] = ()
    compilerDependencies: tuple[DependencyRecord, ...] = ()
    testerDependencies: tuple[DependencyRecord, ...] = ()

    def getAllDependencies(self) -> list[DependencyRecord]:
        return [
            *self.dependencies,
            *self.devDependencies,
            *self.compilerDependencies,
            *self.testerDependencies,
        ]

    def getFilesPaths(self) -> list[PathLinux]:
        return [pathNormalizeToLinux(file.relativePath) for file in self.files]
