import pytest

from componentdirs.manipulation.origin import getComponentOrigin, lookupTrackingEntry
from componentdirs.model.ids import ComponentId
from componentdirs.model.stores import InMemoryTrackingStore
from componentdirs.model.tracking import ComponentOrigin

AUTHORED = ComponentOrigin.AUTHORED
IMPORTED = ComponentOrigin.IMPORTED
NESTED = ComponentOrigin.NESTED


@pytest.mark.parametrize(
    ("tracked", "isDependency", "expected"),
    [
        (None, True, NESTED),
        (None, False, IMPORTED),
        (NESTED, False, IMPORTED),
        (NESTED, True, NESTED),
        (IMPORTED, True, IMPORTED),
        (IMPORTED, False, IMPORTED),
        (AUTHORED, True, AUTHORED),
        (AUTHORED, False, AUTHORED),
    ],
)
def test_getComponentOrigin(tracked, isDependency, expected):
    assert getComponentOrigin(tracked, isDependency) is expected


def test_lookup_ignores_version_only_for_top_level():
    store = InMemoryTrackingStore.fromMapping({"bar/foo@1.0.0": {"origin": "NESTED"}})
    newer = ComponentId("bar/foo", "2.0.0")
    assert lookupTrackingEntry(store, newer, isDependency=False).id.version == "1.0.0"
    assert lookupTrackingEntry(store, newer, isDependency=True) is None
