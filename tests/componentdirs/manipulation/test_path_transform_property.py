from __future__ import annotations

import pytest

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given, strategies as st  # type: ignore[no-redef]

from componentdirs.constants import PATH_SEP, WRAPPER_DIR
from componentdirs.manipulation.path_transform import (
    applyDirManipulationForPath,
    revertDirManipulationForPath,
)


# Plain path segments: no separators and no "." so normalization leaves them alone
segment_strat = st.text(
    alphabet=st.characters(blacklist_characters=[".", "/", "\\"], min_codepoint=32, max_codepoint=126),
    min_size=1,
    max_size=8,
)


@given(st.lists(segment_strat, min_size=1, max_size=4), st.integers(min_value=0, max_value=3), st.booleans())
def test_revert_undoes_apply(segments: list[str], sharedDepth: int, wrapped: bool) -> None:
    path = PATH_SEP.join(segments)
    # The shared dir is a directory prefix, never the file itself
    sharedSegments = segments[:sharedDepth % len(segments)]
    sharedDir = PATH_SEP.join(sharedSegments) or None
    wrapDir = WRAPPER_DIR if wrapped else None

    applied = applyDirManipulationForPath(path, sharedDir, wrapDir)
    assert revertDirManipulationForPath(applied, sharedDir, wrapDir) == path


@given(st.lists(segment_strat, min_size=1, max_size=4))
def test_apply_with_nothing_to_do_is_identity(segments: list[str]) -> None:
    path = PATH_SEP.join(segments)
    assert applyDirManipulationForPath(path, None, None) == path
    assert revertDirManipulationForPath(path, None, None) == path
