# componentdirs/core/paths.py
from __future__ import annotations
import posixpath
from collections.abc import Iterable

__all__ = [
    "PathLinux",
    "PathOsBased",
    "pathNormalizeToLinux",
    "pathJoinLinux",
    "sharedStartOfArray",
]



# Forward-slash relative path, independent of the host conventions.
PathLinux = str
# Path as given by the host (may contain backslashes on Windows).
PathOsBased = str



def pathNormalizeToLinux(pathStr: PathOsBased) -> PathLinux:
    """Returns `pathStr` with every backslash replaced by a forward slash."""
    return pathStr.replace("\\", "/") if pathStr else pathStr



def pathJoinLinux(*parts: str) -> PathLinux:
    """
    Joins and normalizes path parts with forward slashes.
    
      pathJoinLinux("a/b", "./c.js")  -> "a/b/c.js"
      pathJoinLinux("a\\b", "c.js")   -> "a/b/c.js"
    """
    normalized = [pathNormalizeToLinux(part) for part in parts if part]
    if not normalized:
        return ""
    return posixpath.normpath(posixpath.join(*normalized))



def sharedStartOfArray(items: Iterable[str]) -> str:
    """
    Returns the longest common leading substring of all `items`.
    
    Character level, not segment level: ["a/bc.js", "a/bd.js"] -> "a/b".
    After sorting, the first and the last entries are the most different ones,
    so comparing them is enough. An empty input returns "".
    """
    ordered = sorted(items)
    if not ordered:
        return ""
    first = ordered[0]
    last = ordered[-1]
    idx = 0
    limit = min(len(first), len(last))
    while idx < limit and first[idx] == last[idx]:
        idx += 1
    return first[:idx]
