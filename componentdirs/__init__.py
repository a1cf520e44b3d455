# componentdirs/__init__.py
from .constants import PACKAGE_JSON, WRAPPER_DIR
from .model.ids import ComponentId, ComponentIds
from .model.snapshot import (
    FileRecord,
    RelativePath,
    DependencyRecord,
    Dependencies,
    VersionSnapshot,
)
from .model.tracking import ComponentOrigin, TrackingEntry
from .model.stores import (
    ComponentVersion,
    VersionDependencies,
    TrackingStore,
    ObjectStore,
    InMemoryTrackingStore,
    InMemoryObjectStore,
)
from .manipulation import (
    ManipulateDirItem,
    getManipulateDirForExistingComponents,
    getManipulateDirWhenImportingComponents,
    getManipulateDirItem,
    revertDirManipulationForPath,
    applyDirManipulationForPath,
)

__all__ = [
    "PACKAGE_JSON",
    "WRAPPER_DIR",
    "ComponentId",
    "ComponentIds",
    "FileRecord",
    "RelativePath",
    "DependencyRecord",
    "Dependencies",
    "VersionSnapshot",
    "ComponentOrigin",
    "TrackingEntry",
    "ComponentVersion",
    "VersionDependencies",
    "TrackingStore",
    "ObjectStore",
    "InMemoryTrackingStore",
    "InMemoryObjectStore",
    "ManipulateDirItem",
    "getManipulateDirForExistingComponents",
    "getManipulateDirWhenImportingComponents",
    "getManipulateDirItem",
    "revertDirManipulationForPath",
    "applyDirManipulationForPath",
]
