import pytest

from componentdirs.constants import WRAPPER_DIR
from componentdirs.manipulation.wrap_dir import getWrapDirIfNeeded, isWrapperDirNeeded
from componentdirs.model.tracking import ComponentOrigin


def test_root_package_json_needs_wrapper(make_snapshot):
    snapshot = make_snapshot(["package.json", "index.js"])
    assert isWrapperDirNeeded(snapshot)
    assert getWrapDirIfNeeded(ComponentOrigin.IMPORTED, snapshot) == WRAPPER_DIR
    assert getWrapDirIfNeeded(ComponentOrigin.NESTED, snapshot) == WRAPPER_DIR


def test_authored_is_never_wrapped(make_snapshot):
    snapshot = make_snapshot(["package.json", "index.js"])
    assert getWrapDirIfNeeded(ComponentOrigin.AUTHORED, snapshot) is None


def test_dependency_on_root_package_json_needs_wrapper(make_snapshot):
    snapshot = make_snapshot(["index.js"], {"root/pkg@1.0.0": ["package.json"]})
    assert getWrapDirIfNeeded(ComponentOrigin.IMPORTED, snapshot) == WRAPPER_DIR


@pytest.mark.parametrize("files", [["index.js"], ["lib/package.json", "index.js"], []])
def test_no_root_package_json_no_wrapper(make_snapshot, files):
    assert getWrapDirIfNeeded(ComponentOrigin.IMPORTED, make_snapshot(files)) is None
