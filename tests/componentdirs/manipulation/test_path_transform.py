import pytest

from componentdirs.constants import WRAPPER_DIR
from componentdirs.manipulation.path_transform import (
    addSharedDirForPath,
    addWrapperDirToPath,
    applyDirManipulationForPath,
    removeWrapperDirFromPath,
    revertDirManipulationForPath,
    stripSharedDirFromPath,
)


def test_addSharedDirForPath():
    assert addSharedDirForPath("index.js", "src/lib") == "src/lib/index.js"
    assert addSharedDirForPath("sub\\index.js", "src") == "src/sub/index.js"
    assert addSharedDirForPath("index.js", None) == "index.js"


def test_removeWrapperDirFromPath_first_match_anywhere():
    assert removeWrapperDirFromPath(f"{WRAPPER_DIR}/index.js", WRAPPER_DIR) == "index.js"
    assert removeWrapperDirFromPath(f"src/{WRAPPER_DIR}/index.js", WRAPPER_DIR) == "src/index.js"
    assert removeWrapperDirFromPath(f"{WRAPPER_DIR}/{WRAPPER_DIR}/a.js", WRAPPER_DIR) == f"{WRAPPER_DIR}/a.js"
    assert removeWrapperDirFromPath("index.js", WRAPPER_DIR) == "index.js"
    assert removeWrapperDirFromPath(f"{WRAPPER_DIR}/index.js", None) == f"{WRAPPER_DIR}/index.js"


def test_revert_adds_shared_dir_before_unwrapping():
    assert revertDirManipulationForPath(f"{WRAPPER_DIR}/index.js", "src", WRAPPER_DIR) == "src/index.js"
    assert revertDirManipulationForPath("index.js", "src", None) == "src/index.js"
    assert revertDirManipulationForPath(f"{WRAPPER_DIR}/package.json", None, WRAPPER_DIR) == "package.json"


def test_forward_operations():
    assert stripSharedDirFromPath("src/lib/index.js", "src/lib") == "index.js"
    assert stripSharedDirFromPath("src/lib/index.js", "src") == "lib/index.js"
    assert stripSharedDirFromPath("other/index.js", "src") == "other/index.js"
    assert stripSharedDirFromPath("srcx/index.js", "src") == "srcx/index.js"
    assert addWrapperDirToPath("index.js", WRAPPER_DIR) == f"{WRAPPER_DIR}/index.js"
    assert addWrapperDirToPath("index.js", None) == "index.js"
    assert applyDirManipulationForPath("src/package.json", "src", WRAPPER_DIR) == f"{WRAPPER_DIR}/package.json"


@pytest.mark.parametrize(
    ("path", "sharedDir", "wrapDir"),
    [
        ("src/index.js", "src", None),
        ("src/lib/a/b.js", "src/lib", WRAPPER_DIR),
        ("package.json", None, WRAPPER_DIR),
        ("index.js", None, None),
        ("a/b/c/d.js", "a", WRAPPER_DIR),
    ],
)
def test_apply_then_revert_is_identity(path, sharedDir, wrapDir):
    stored = applyDirManipulationForPath(path, sharedDir, wrapDir)
    assert revertDirManipulationForPath(stored, sharedDir, wrapDir) == path
