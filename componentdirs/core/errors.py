# componentdirs/core/errors.py
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from componentdirs.model.ids import ComponentId

__all__ = [
    "ComponentDirsError",
    "SnapshotNotFoundError",
]



class ComponentDirsError(RuntimeError):
    """Base class for dir manipulation errors."""
    
    def __init__(
        self,
        message: str,
        *,
        componentId: ComponentId | None = None
    ) -> None:
        super().__init__(message)
        self.componentId: ComponentId | None = componentId



class SnapshotNotFoundError(ComponentDirsError, LookupError):
    """Raised when the object store has no version snapshot for a component reference."""
