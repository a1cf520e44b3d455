# componentdirs/config/__init__.py
from .providers import DefaultsProvider, FileProvider, OverrideProvider
from .settings import Settings, LoggingSettings, ResolverSettings, loadSettings, deepMerge

__all__ = [
    "DefaultsProvider",
    "FileProvider",
    "OverrideProvider",
    "Settings",
    "LoggingSettings",
    "ResolverSettings",
    "loadSettings",
    "deepMerge",
]
