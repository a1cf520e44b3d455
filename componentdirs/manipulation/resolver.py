# componentdirs/manipulation/resolver.py
from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Sequence
from contextlib import AsyncExitStack
from dataclasses import dataclass
from typing import TypeVar

from componentdirs.config.settings import Settings
from componentdirs.core.logging import logContext
from componentdirs.core.paths import PathLinux
from componentdirs.model.ids import ComponentId, ComponentIds
from componentdirs.model.stores import (
    ComponentVersion,
    ObjectStore,
    TrackingStore,
    VersionDependencies,
)
from componentdirs.model.tracking import ComponentOrigin
from componentdirs.model.snapshot import VersionSnapshot
from .origin import getComponentOrigin, lookupTrackingEntry
from .shared_dir import getOriginallySharedDirIfNeeded
from .wrap_dir import getWrapDirIfNeeded

logger = logging.getLogger(__name__)

__all__ = [
    "ManipulateDirItem",
    "buildManipulateDirItem",
    "getManipulateDirForExistingComponents",
    "getManipulateDirWhenImportingComponents",
    "getManipulateDirItem",
]

T = TypeVar("T")



@dataclass(frozen=True, slots=True)
class ManipulateDirItem:
    """Shared dir and wrap dir to apply to (or revert from) the files of one component."""
    id: ComponentId
    originallySharedDir: PathLinux | None = None
    wrapDir: PathLinux | None = None



def buildManipulateDirItem(
    componentId: ComponentId,
    origin: ComponentOrigin,
    version: VersionSnapshot,
) -> ManipulateDirItem:
    return ManipulateDirItem(
        id=componentId,
        originallySharedDir=getOriginallySharedDirIfNeeded(origin, version),
        wrapDir=getWrapDirIfNeeded(origin, version),
    )



def getManipulateDirItem(items: Iterable[ManipulateDirItem], componentId: ComponentId) -> ManipulateDirItem | None:
    """Returns the item of `componentId` (exact version match), or None."""
    for item in items:
        if item.id == componentId:
            return item
    return None



# ------------------------------------------------------------------ #
# Recall mode: component already in the workspace
# ------------------------------------------------------------------ #

async def getManipulateDirForExistingComponents(
    trackingStore: TrackingStore,
    objectStore: ObjectStore,
    componentVersion: ComponentVersion,
) -> list[ManipulateDirItem]:
    """
    Use when loading a component that is already in the workspace, not while importing.

    The component's own values are computed from its tracked origin. Its dependencies
    keep the values recorded when they were installed (None when they have no record);
    they are never recomputed here.

    An untracked component has no prior origin, so it counts as imported.

    Raises:
        Whatever the object store raises while resolving the snapshot.
    """
    componentId = componentVersion.id
    entry = lookupTrackingEntry(trackingStore, componentId, isDependency=False)
    # The recorded origin is used as is (NESTED stays NESTED); no entry means no prior origin.
    origin = entry.origin if entry else getComponentOrigin(None, False)

    with logContext(operation="recall", componentId=str(componentId)):
        version = await componentVersion.getVersion(objectStore)
        manipulateDirData = [buildManipulateDirItem(componentId, origin, version)]
        for dependency in version.getAllDependencies():
            depEntry = trackingStore.getEntry(dependency.id)
            manipulateDirData.append(ManipulateDirItem(
                id=dependency.id,
                originallySharedDir=depEntry.originallySharedDir if depEntry else None,
                wrapDir=depEntry.wrapDir if depEntry else None,
            ))
        logger.debug(
            "getManipulateDirForExistingComponents: %s (%s) with %d dependencies",
            componentId,
            origin.value,
            len(manipulateDirData) - 1,
        )
    return manipulateDirData



# ------------------------------------------------------------------ #
# Import mode: batch of components being imported right now
# ------------------------------------------------------------------ #

async def _getManipulateDirItemFromComponentVersion(
    componentVersion: ComponentVersion,
    trackingStore: TrackingStore,
    objectStore: ObjectStore,
    isDependency: bool,
    limiter: asyncio.Semaphore | None,
) -> ManipulateDirItem:
    componentId = componentVersion.id
    entry = lookupTrackingEntry(trackingStore, componentId, isDependency=isDependency)
    origin = getComponentOrigin(entry.origin if entry else None, isDependency)
    async with AsyncExitStack() as stack:
        if limiter is not None:
            await stack.enter_async_context(limiter)
        version = await componentVersion.getVersion(objectStore)
    return buildManipulateDirItem(componentId, origin, version)



async def _gatherInOrder(awaitables: Sequence[Awaitable[T]]) -> list[T]:
    # gather() keeps input order regardless of completion order, and fails on the first error.
    return list(await asyncio.gather(*awaitables))



async def getManipulateDirWhenImportingComponents(
    trackingStore: TrackingStore,
    objectStore: ObjectStore,
    versionsDependencies: Sequence[VersionDependencies],
    *,
    settings: Settings | None = None,
) -> list[ManipulateDirItem]:
    """
    Use while importing components.

    The tracking store alone is not enough here: a component tracked as NESTED may be
    imported directly now, and a component imported in this batch may also be a
    dependency of another one in the same batch. The top-level result always wins.

    Output order: each top-level component followed by its dependencies not seen before,
    in input order.
    """
    # Shipped defaults unless the caller passes loaded settings; never read from disk here.
    settings = settings or Settings()
    maxConcurrency = settings.resolver.maxConcurrency
    limiter = asyncio.Semaphore(maxConcurrency) if maxConcurrency > 0 else None

    nonDependencies = ComponentIds.fromArray(
        versionDependency.component.id for versionDependency in versionsDependencies
    )
    logger.debug(
        "getManipulateDirWhenImportingComponents: %d components, limit=%s",
        len(nonDependencies),
        maxConcurrency or "none",
    )

    async def _forVersionDependency(versionDependency: VersionDependencies) -> list[ManipulateDirItem]:
        with logContext(operation="import", componentId=str(versionDependency.component.id)):
            manipulateDirComponent, *manipulateDirDependencies = await _gatherInOrder([
                _getManipulateDirItemFromComponentVersion(
                    versionDependency.component, trackingStore, objectStore, False, limiter
                ),
                *(
                    _getManipulateDirItemFromComponentVersion(
                        dependency, trackingStore, objectStore, True, limiter
                    )
                    for dependency in versionDependency.allDependencies
                ),
            ])
        # A component might be a dependency and directly imported at the same time.
        # It is considered imported then, not nested.
        manipulateDirDependenciesOnly = []
        for item in manipulateDirDependencies:
            if nonDependencies.has(item.id):
                logger.debug("Dropping dependency result of '%s': imported directly in this batch", item.id)
                continue
            manipulateDirDependenciesOnly.append(item)
        return [manipulateDirComponent, *manipulateDirDependenciesOnly]

    perComponent = await _gatherInOrder([
        _forVersionDependency(versionDependency) for versionDependency in versionsDependencies
    ])

    manipulateDirData: list[ManipulateDirItem] = []
    seen: set[ComponentId] = set()
    for items in perComponent:
        for item in items:
            if item.id in seen:
                continue
            seen.add(item.id)
            manipulateDirData.append(item)
    logger.debug("getManipulateDirWhenImportingComponents: %d items", len(manipulateDirData))
    return manipulateDirData
