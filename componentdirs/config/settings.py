# componentdirs/config/settings.py
from __future__ import annotations
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from .providers import DefaultsProvider, FileProvider, OverrideProvider

import logging
logger = logging.getLogger(__name__)

__all__ = [
    "SETTINGS_ENV_VAR", "DEFAULT_SETTINGS", "LoggingSettings", "ResolverSettings",
    "Settings", "defaultUserSettingsPath", "deepMerge", "loadSettings",
]



SETTINGS_ENV_VAR = "COMPONENTDIRS_SETTINGS"

DEFAULT_SETTINGS: dict[str, JsonValue] = {
    "logging": {"devMode": True, "level": None, "logFile": None},
    "resolver": {"maxConcurrency": 16},
}



class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    devMode: bool = True
    level: str | None = None
    logFile: str | None = None



class ResolverSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # Upper bound of object-store resolutions pending at once; 0 means unbounded.
    maxConcurrency: int = Field(default=16, ge=0)



class Settings(BaseModel):
    """Merged and validated settings."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)



def defaultUserSettingsPath() -> Path:
    fromEnv = os.environ.get(SETTINGS_ENV_VAR)
    if fromEnv:
        return Path(fromEnv).expanduser()
    return Path(os.path.expanduser("~/.componentdirs/settings.json5"))



def deepMerge(first: JsonValue, second: JsonValue) -> JsonValue:
    """
    Returns a new JsonValue where keys from `second` override/extend `first`.
    Only merges recursively when BOTH sides are JSON objects (dicts).
    For all other JSON types (lists, strings, numbers, booleans, null),
    the right-hand value `second` replaces `first`.
    """
    if isinstance(first, dict) and isinstance(second, dict):
        out: dict[str, JsonValue] = dict(first)
        for key, value in second.items():
            if key in out:
                out[key] = deepMerge(out[key], cast(JsonValue, value))
            else:
                out[key] = cast(JsonValue, value)
        return cast(JsonValue, out)
    
    return cast(JsonValue, second)



def loadSettings(
    *,
    defaults: DefaultsProvider | None = None,
    userPath: str | Path | None = None,
    overrides: OverrideProvider | Mapping[str, Any] | None = None,
) -> Settings:
    """
    Builds Settings from three layers, lowest first:
    
      1. shipped defaults (DEFAULT_SETTINGS unless `defaults` is given)
      2. user file (`userPath`, else $COMPONENTDIRS_SETTINGS, else ~/.componentdirs/settings.json5)
      3. in-memory overrides
    
    Raises pydantic.ValidationError when the merged result has unknown keys or bad values.
    """
    defaults = defaults or DefaultsProvider(data=DEFAULT_SETTINGS)
    userFile = FileProvider(userPath if userPath is not None else defaultUserSettingsPath())
    if overrides is None:
        overrides = OverrideProvider()
    elif not isinstance(overrides, OverrideProvider):
        overrides = OverrideProvider(overrides)

    merged: JsonValue = {}
    for layer in (defaults, userFile, overrides):
        merged = deepMerge(merged, cast(JsonValue, layer.to_dict()))
    
    logger.debug("loadSettings: user file '%s'", userFile.path)
    return Settings.model_validate(merged)
