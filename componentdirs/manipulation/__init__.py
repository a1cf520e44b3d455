# componentdirs/manipulation/__init__.py
from .origin import getComponentOrigin, lookupTrackingEntry
from .path_transform import (
    addSharedDirForPath,
    removeWrapperDirFromPath,
    revertDirManipulationForPath,
    stripSharedDirFromPath,
    addWrapperDirToPath,
    applyDirManipulationForPath,
)
from .resolver import (
    ManipulateDirItem,
    buildManipulateDirItem,
    getManipulateDirForExistingComponents,
    getManipulateDirWhenImportingComponents,
    getManipulateDirItem,
)
from .shared_dir import calculateOriginallySharedDir, getOriginallySharedDirIfNeeded
from .wrap_dir import getWrapDirIfNeeded, isWrapperDirNeeded

__all__ = [
    "getComponentOrigin",
    "lookupTrackingEntry",
    "addSharedDirForPath",
    "removeWrapperDirFromPath",
    "revertDirManipulationForPath",
    "stripSharedDirFromPath",
    "addWrapperDirToPath",
    "applyDirManipulationForPath",
    "ManipulateDirItem",
    "buildManipulateDirItem",
    "getManipulateDirForExistingComponents",
    "getManipulateDirWhenImportingComponents",
    "getManipulateDirItem",
    "calculateOriginallySharedDir",
    "getOriginallySharedDirIfNeeded",
    "getWrapDirIfNeeded",
    "isWrapperDirNeeded",
]
