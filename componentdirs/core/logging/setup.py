# componentdirs/core/logging/setup.py
from __future__ import annotations
import logging
import logging.handlers
from typing import TYPE_CHECKING

from .formatters import DevFormatter, JsonFormatter

if TYPE_CHECKING:
    from componentdirs.config.settings import Settings

__all__ = [
    "NO_PROPAGATE",
    "configureLogging",
]



# Disable propagation from common libraries
NO_PROPAGATE = [
    "asyncio", "concurrent.futures",
]



def configureLogging(settings: Settings | None = None) -> logging.Logger:
    """
    Initiate the global logging configuration.

    Dev:
      - Console pretty logs (DEBUG)
      - JSON file log (DEBUG) when logging.logFile is set
    
    Prod:
      - Console JSON lines (INFO)
      - JSON file log (INFO) with rotation when logging.logFile is set
    
    logging.level, when set, overrides the level picked by the mode.
    """
    if settings is None:
        from componentdirs.config.settings import loadSettings
        settings = loadSettings()

    devMode = settings.logging.devMode
    rootLevel = logging.DEBUG if devMode else logging.INFO
    if settings.logging.level:
        rootLevel = getattr(logging, settings.logging.level.upper(), rootLevel)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(rootLevel)
    
    for name in NO_PROPAGATE:
        logging.getLogger(name).propagate = False

    consoleHandler = logging.StreamHandler()
    consoleHandler.setLevel(rootLevel)
    consoleHandler.setFormatter(DevFormatter() if devMode else JsonFormatter())
    root.addHandler(consoleHandler)

    if settings.logging.logFile:
        fileHandler = logging.handlers.RotatingFileHandler(
            settings.logging.logFile,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        )
        fileHandler.setLevel(rootLevel)
        fileHandler.setFormatter(JsonFormatter())
        root.addHandler(fileHandler)

    return root
