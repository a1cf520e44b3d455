# componentdirs/manipulation/wrap_dir.py
from __future__ import annotations

from componentdirs.constants import PACKAGE_JSON, WRAPPER_DIR
from componentdirs.core.paths import PathLinux
from componentdirs.model.snapshot import Dependencies, VersionSnapshot
from componentdirs.model.tracking import ComponentOrigin

__all__ = ["isWrapperDirNeeded", "getWrapDirIfNeeded"]



def isWrapperDirNeeded(version: VersionSnapshot) -> bool:
    """
    True when one of the files is a root package.json, or one of the dependencies is
    the root package.json. Either would collide with the package.json generated on import.
    """
    dependenciesSourcePaths = Dependencies(version.getAllDependencies()).getSourcesPaths()
    return (
        any(file.relativePath == PACKAGE_JSON for file in version.files)
        or any(dependencyPath == PACKAGE_JSON for dependencyPath in dependenciesSourcePaths)
    )



def getWrapDirIfNeeded(origin: ComponentOrigin, version: VersionSnapshot) -> PathLinux | None:
    # An authored component's package.json is the project's own one.
    if origin is ComponentOrigin.AUTHORED:
        return None
    return WRAPPER_DIR if isWrapperDirNeeded(version) else None
