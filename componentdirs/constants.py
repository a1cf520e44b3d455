# componentdirs/constants.py
from __future__ import annotations

__all__ = ["PACKAGE_JSON", "WRAPPER_DIR", "PATH_SEP"]



# Package descriptor generated by the tool when a component is imported.
PACKAGE_JSON = "package.json"

# Synthetic directory wrapping components that ship their own root package.json.
WRAPPER_DIR = "bit_wrapper_dir"

# Every path handled here is normalized to Linux separators, Windows included.
PATH_SEP = "/"
