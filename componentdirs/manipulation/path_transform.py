# componentdirs/manipulation/path_transform.py
from __future__ import annotations

from componentdirs.constants import PATH_SEP
from componentdirs.core.paths import PathLinux, PathOsBased, pathJoinLinux, pathNormalizeToLinux

__all__ = [
    "addSharedDirForPath",
    "removeWrapperDirFromPath",
    "revertDirManipulationForPath",
    "stripSharedDirFromPath",
    "addWrapperDirToPath",
    "applyDirManipulationForPath",
]



# ----- Revert (workspace -> original layout) -----

def addSharedDirForPath(pathStr: PathOsBased, originallySharedDir: PathLinux | None) -> PathLinux:
    if not originallySharedDir:
        return pathNormalizeToLinux(pathStr)
    return pathJoinLinux(originallySharedDir, pathStr)



def removeWrapperDirFromPath(pathStr: PathLinux, wrapDir: PathLinux | None) -> PathLinux:
    # First occurrence anywhere in the path, not only at its start.
    # TODO: anchor to the path start once workspaces written with the unanchored form are migrated.
    if not wrapDir:
        return pathStr
    return pathStr.replace(f"{wrapDir}{PATH_SEP}", "", 1)



def revertDirManipulationForPath(
    pathStr: PathOsBased,
    originallySharedDir: PathLinux | None,
    wrapDir: PathLinux | None,
) -> PathLinux:
    """
    Restores the path a file had in the original component.
    
    The wrap dir wraps the tree that already has its shared dir back, so the
    shared dir is added first and the wrapper is removed second:
    
      "bit_wrapper_dir/index.js", "src", "bit_wrapper_dir" -> "src/index.js"
    """
    withSharedDir = addSharedDirForPath(pathStr, originallySharedDir)
    return removeWrapperDirFromPath(withSharedDir, wrapDir)



# ----- Apply (original layout -> workspace) -----

def stripSharedDirFromPath(pathStr: PathOsBased, originallySharedDir: PathLinux | None) -> PathLinux:
    normalized = pathNormalizeToLinux(pathStr)
    if not originallySharedDir:
        return normalized
    prefix = f"{originallySharedDir}{PATH_SEP}"
    if normalized.startswith(prefix):
        return normalized[len(prefix):]
    return normalized



def addWrapperDirToPath(pathStr: PathLinux, wrapDir: PathLinux | None) -> PathLinux:
    if not wrapDir:
        return pathStr
    return pathJoinLinux(wrapDir, pathStr)



def applyDirManipulationForPath(
    pathStr: PathOsBased,
    originallySharedDir: PathLinux | None,
    wrapDir: PathLinux | None,
) -> PathLinux:
    """Inverse of revertDirManipulationForPath: strip the shared dir, then wrap."""
    withoutSharedDir = stripSharedDirFromPath(pathStr, originallySharedDir)
    return addWrapperDirToPath(withoutSharedDir, wrapDir)
