# componentdirs/model/stores.py
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import json5

from componentdirs.core.errors import SnapshotNotFoundError
from .ids import ComponentId
from .snapshot import VersionSnapshot
from .tracking import TrackingEntry

logger = logging.getLogger(__name__)

__all__ = [
    "ComponentVersion",
    "VersionDependencies",
    "TrackingStore",
    "ObjectStore",
    "InMemoryTrackingStore",
    "InMemoryObjectStore",
]



# ------------------------------------------------------------------ #
# Collaborator capabilities
# ------------------------------------------------------------------ #

@runtime_checkable
class TrackingStore(Protocol):
    """Read-only view of the workspace tracking records."""
    def getEntry(self, componentId: ComponentId, *, ignoreVersion: bool = False) -> TrackingEntry | None: ...



@runtime_checkable
class ObjectStore(Protocol):
    """Resolves a component version reference into its snapshot. May raise on missing or corrupt objects."""
    async def resolveVersion(self, ref: ComponentVersion) -> VersionSnapshot: ...



@dataclass(frozen=True, slots=True)
class ComponentVersion:
    """Reference to one version of a component inside the object store."""
    id: ComponentId

    async def getVersion(self, objectStore: ObjectStore) -> VersionSnapshot:
        return await objectStore.resolveVersion(self)



@dataclass(frozen=True, slots=True)
class VersionDependencies:
    """A top-level component of an import batch with its full, already-resolved dependency set."""
    component: ComponentVersion
    allDependencies: tuple[ComponentVersion, ...] = field(default_factory=tuple)



# ------------------------------------------------------------------ #
# In-memory implementations
# ------------------------------------------------------------------ #

class InMemoryTrackingStore:
    """
    TrackingStore over a fixed set of entries.
    
    Lookup rules:
      - exact lookup: name and version must both match
      - ignoreVersion lookup: an exact match wins, otherwise the first
        registered entry with the same name
    """

    def __init__(self, entries: Iterable[TrackingEntry] = ()) -> None:
        self._byId: dict[ComponentId, TrackingEntry] = {}
        self._byName: dict[str, list[TrackingEntry]] = {}
        for entry in entries:
            self._register(entry)

    def _register(self, entry: TrackingEntry) -> None:
        if entry.id in self._byId:
            raise ValueError(f"Duplicate tracking entry for '{entry.id}'")
        self._byId[entry.id] = entry
        self._byName.setdefault(entry.id.name, []).append(entry)

    @classmethod
    def fromMapping(cls, data: Mapping[str, Mapping[str, Any]]) -> InMemoryTrackingStore:
        """
        Build from a workspace map keyed by id string:
        
            {"utils/is-string@0.0.1": {"origin": "IMPORTED", "originallySharedDir": "src"}}
        """
        return cls(
            TrackingEntry.model_validate({"id": rawId, **dict(rawEntry)})
            for rawId, rawEntry in data.items()
        )

    @classmethod
    def fromFile(cls, path: str | Path) -> InMemoryTrackingStore:
        path = Path(path)
        parsed = json5.loads(path.read_text(encoding="utf-8"))
        if not isinstance(parsed, Mapping):
            raise TypeError(f"{cls.__name__}: '{path}' must contain a JSON object, not '{type(parsed).__name__}'")
        logger.debug("%s: loaded %d entries from '%s'", cls.__name__, len(parsed), path)
        return cls.fromMapping(parsed)

    def getEntry(self, componentId: ComponentId, *, ignoreVersion: bool = False) -> TrackingEntry | None:
        exact = self._byId.get(componentId)
        if exact is not None or not ignoreVersion:
            return exact
        sameName = self._byName.get(componentId.name)
        return sameName[0] if sameName else None

    def __len__(self) -> int:
        return len(self._byId)



class InMemoryObjectStore:
    """ObjectStore over a fixed mapping of component ids to snapshots."""

    def __init__(self, snapshots: Mapping[ComponentId, VersionSnapshot] | None = None) -> None:
        self._snapshots: dict[ComponentId, VersionSnapshot] = dict(snapshots or {})

    @classmethod
    def fromMapping(cls, data: Mapping[str, Mapping[str, Any]]) -> InMemoryObjectStore:
        return cls({
            ComponentId.parse(rawId): VersionSnapshot.model_validate(payload)
            for rawId, payload in data.items()
        })

    def add(self, componentId: ComponentId, snapshot: VersionSnapshot) -> None:
        self._snapshots[componentId] = snapshot

    async def resolveVersion(self, ref: ComponentVersion) -> VersionSnapshot:
        snapshot = self._snapshots.get(ref.id)
        if snapshot is None:
            raise SnapshotNotFoundError(
                f"No version object found for component '{ref.id}'",
                componentId=ref.id,
            )
        return snapshot
