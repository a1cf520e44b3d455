# componentdirs/model/ids.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["VERSION_DELIMITER", "ComponentId", "ComponentIds"]



VERSION_DELIMITER = "@"



@dataclass(frozen=True)
class ComponentId:
    """
    Versioned component identifier.
    
    `name` may carry a scope prefix ("owner.collection/utils/is-string").
    `version` is None for ids that are not pinned yet.
    """
    name: str
    version: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("ComponentId name cannot be empty")
        if self.version is not None and not str(self.version).strip():
            raise ValueError(f"ComponentId '{self.name}' has an empty version")

    @classmethod
    def parse(cls, raw: str) -> ComponentId:
        """
        Parse "<name>[@<version>]".
        
        Examples:
            "utils/is-string"           -> name only
            "utils/is-string@0.0.1"     -> name + version
        """
        if not isinstance(raw, str):
            raise TypeError(f"ComponentId string must be a str, got {type(raw).__name__}")
        text = raw.strip()
        if not text:
            raise ValueError("Empty ComponentId string is not allowed")
        name, sep, version = text.rpartition(VERSION_DELIMITER)
        if not sep:
            return cls(name=text)
        if not name:
            raise ValueError(f"ComponentId string {text!r} has an empty name part")
        return cls(name=name, version=version or None)

    def toString(self) -> str:
        if self.version is None:
            return self.name
        return f"{self.name}{VERSION_DELIMITER}{self.version}"

    def __str__(self) -> str:
        return self.toString()



class ComponentIds:
    """Ordered, duplicate-free collection of ComponentId."""

    def __init__(self, ids: Iterable[ComponentId] = ()) -> None:
        self._ids: dict[ComponentId, None] = {}
        for componentId in ids:
            self.add(componentId)

    @classmethod
    def fromArray(cls, ids: Iterable[ComponentId]) -> ComponentIds:
        return cls(ids)

    def add(self, componentId: ComponentId) -> None:
        self._ids[componentId] = None

    def has(self, componentId: ComponentId) -> bool:
        """Exact match, version included."""
        return componentId in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"ComponentIds([{', '.join(str(cid) for cid in self._ids)}])"
