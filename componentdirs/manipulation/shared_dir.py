# componentdirs/manipulation/shared_dir.py
from __future__ import annotations

import logging

from componentdirs.constants import PACKAGE_JSON, PATH_SEP
from componentdirs.core.paths import PathLinux, sharedStartOfArray
from componentdirs.model.snapshot import Dependencies, VersionSnapshot
from componentdirs.model.tracking import ComponentOrigin

logger = logging.getLogger(__name__)

__all__ = [
    "collectAllPaths",
    "calculateOriginallySharedDir",
    "getOriginallySharedDirIfNeeded",
]



def collectAllPaths(version: VersionSnapshot) -> list[PathLinux]:
    """Component files followed by the source paths of every dependency group."""
    dependencies = Dependencies(version.getAllDependencies())
    return [*version.getFilesPaths(), *dependencies.getSourcesPaths()]



def calculateOriginallySharedDir(version: VersionSnapshot) -> PathLinux | None:
    """
    Find a directory shared by the files of the component and its dependencies.
    
      ["a/b/x.js", "a/b/y.js"]               -> "a/b"
      ["a/bx.js", "a/by.js"]                 -> "a"      (the "b" is a partial filename)
      ["a/x.js", "b/y.js"]                   -> None
      ["pkg/package.json", "pkg/index.js"]   -> None     (package.json sits at the shared root)
    """
    allPaths = collectAllPaths(version)
    sharedStart = sharedStartOfArray(allPaths)
    if not sharedStart or PATH_SEP not in sharedStart:
        return None
    sharedStartDirectories = sharedStart.split(PATH_SEP)
    # The last piece is either "" (sharedStart ended with a slash) or a partial filename.
    sharedStartDirectories.pop()
    # TODO: compare against the directory prefix, not sharedStart. When sharedStart ends inside a
    # filename (["a/package.json", "a/pz.js"] -> "a/p") the check misses and package.json lands
    # at the root once "a" is stripped. Layouts on disk already depend on this result.
    if any(p[len(sharedStart):] == PACKAGE_JSON for p in allPaths):
        # package.json right under the shared dir: keep one more level so it can't collide
        # with the package.json generated on import.
        logger.debug("calculateOriginallySharedDir: '%s' found at shared root '%s'", PACKAGE_JSON, sharedStart)
        if sharedStartDirectories:
            sharedStartDirectories.pop()
    sharedDir = PATH_SEP.join(sharedStartDirectories)
    return sharedDir or None



def getOriginallySharedDirIfNeeded(origin: ComponentOrigin, version: VersionSnapshot) -> PathLinux | None:
    if origin is not ComponentOrigin.IMPORTED:
        return None
    return calculateOriginallySharedDir(version)
