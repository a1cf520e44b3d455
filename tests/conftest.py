import sys
from collections.abc import Iterable, Mapping

import pytest

from componentdirs.config.settings import Settings, loadSettings
from componentdirs.model.ids import ComponentId
from componentdirs.model.snapshot import DependencyRecord, FileRecord, RelativePath, VersionSnapshot



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



@pytest.fixture(autouse=True)
def isolated_user_settings(monkeypatch, tmp_path):
    # Never pick up the developer's own ~/.componentdirs/settings.json5
    monkeypatch.setenv("COMPONENTDIRS_SETTINGS", str(tmp_path / "no-such-settings.json5"))



@pytest.fixture()
def settings() -> Settings:
    return loadSettings(overrides={"resolver": {"maxConcurrency": 2}})



def _dependency(rawId: str, paths: Iterable[str]) -> DependencyRecord:
    return DependencyRecord(
        id=ComponentId.parse(rawId),
        relativePaths=tuple(
            RelativePath(sourceRelativePath=p, destinationRelativePath=p) for p in paths
        ),
    )



@pytest.fixture()
def make_snapshot():
    """
    make_snapshot(["src/index.js"], {"utils/is-string@1.0.0": ["src/is-string.js"]})
    """
    def _make(
        files: Iterable[str],
        dependencies: Mapping[str, Iterable[str]] | None = None,
        *,
        devDependencies: Mapping[str, Iterable[str]] | None = None,
    ) -> VersionSnapshot:
        return VersionSnapshot(
            files=tuple(FileRecord(relativePath=p) for p in files),
            dependencies=tuple(_dependency(k, v) for k, v in (dependencies or {}).items()),
            devDependencies=tuple(_dependency(k, v) for k, v in (devDependencies or {}).items()),
        )
    return _make
