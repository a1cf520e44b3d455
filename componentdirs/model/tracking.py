# componentdirs/model/tracking.py
from __future__ import annotations
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .ids import ComponentId

__all__ = ["ComponentOrigin", "TrackingEntry"]



class ComponentOrigin(Enum):
    # The user's own code, written in this workspace
    AUTHORED = "AUTHORED"
    # Pulled in directly by the user
    IMPORTED = "IMPORTED"
    # Pulled in only as someone else's dependency
    NESTED = "NESTED"



class TrackingEntry(BaseModel):
    """
    What the workspace recorded about one component.

    `originallySharedDir` and `wrapDir` are the values actually used on disk
    when the component was written, or None when not computed or not needed.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: ComponentId
    origin: ComponentOrigin
    originallySharedDir: str | None = None
    wrapDir: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerceId(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ComponentId.parse(value)
        return value

    @field_validator("origin", mode="before")
    @classmethod
    def coerceOrigin(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ComponentOrigin(value.strip().upper())
        return value

    @model_validator(mode="after")
    def checkAuthoredNotWrapped(self) -> TrackingEntry:
        if self.origin is ComponentOrigin.AUTHORED and self.wrapDir:
            raise ValueError(f"Authored component '{self.id}' cannot have a wrapDir")
        return self
