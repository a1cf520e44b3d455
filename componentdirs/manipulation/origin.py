# componentdirs/manipulation/origin.py
from __future__ import annotations

from componentdirs.model.ids import ComponentId
from componentdirs.model.stores import TrackingStore
from componentdirs.model.tracking import ComponentOrigin, TrackingEntry

__all__ = ["getComponentOrigin", "lookupTrackingEntry"]



def getComponentOrigin(trackedOrigin: ComponentOrigin | None, isDependency: bool) -> ComponentOrigin:
    """
    An authored component that is now imported is still authored.
    A nested component that is now imported directly is imported.
    An untracked component is imported, or nested when it only shows up as a dependency.
    An imported component never goes back to nested.
    """
    if trackedOrigin is None:
        return ComponentOrigin.NESTED if isDependency else ComponentOrigin.IMPORTED
    if trackedOrigin is ComponentOrigin.NESTED and not isDependency:
        return ComponentOrigin.IMPORTED
    return trackedOrigin



def lookupTrackingEntry(
    trackingStore: TrackingStore,
    componentId: ComponentId,
    *,
    isDependency: bool,
) -> TrackingEntry | None:
    """
    A component imported directly replaces whatever version was tracked before, so its
    lookup ignores the version. A dependency may coexist with other versions of itself,
    so its lookup is exact.
    """
    return trackingStore.getEntry(componentId, ignoreVersion=not isDependency)
