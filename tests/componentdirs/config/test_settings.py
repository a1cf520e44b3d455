from __future__ import annotations

import json5
import pydantic
import pytest

from componentdirs.config.providers import DefaultsProvider, FileProvider, OverrideProvider
from componentdirs.config.settings import DEFAULT_SETTINGS, deepMerge, loadSettings


def test_loadSettings_defaults(tmp_path):
    settings = loadSettings(userPath=tmp_path / "missing.json5")
    assert settings.logging.devMode is True
    assert settings.logging.logFile is None
    assert settings.resolver.maxConcurrency == 16
    assert settings.logging.level is None


def test_loadSettings_user_file_then_overrides(tmp_path):
    userPath = tmp_path / "settings.json5"
    userPath.write_text(
        "{\n  // comments are fine in json5\n  resolver: { maxConcurrency: 4 },\n  logging: { devMode: false },\n}\n",
        encoding="utf-8",
    )
    settings = loadSettings(userPath=userPath, overrides={"resolver": {"maxConcurrency": 1}})
    assert settings.logging.devMode is False
    assert settings.resolver.maxConcurrency == 1


def test_loadSettings_reads_env_var(monkeypatch, tmp_path):
    userPath = tmp_path / "from-env.json5"
    userPath.write_text(json5.dumps({"resolver": {"maxConcurrency": 3}}), encoding="utf-8")
    monkeypatch.setenv("COMPONENTDIRS_SETTINGS", str(userPath))
    assert loadSettings().resolver.maxConcurrency == 3


def test_loadSettings_rejects_unknown_and_negative(tmp_path):
    with pytest.raises(pydantic.ValidationError):
        loadSettings(userPath=tmp_path / "x.json5", overrides={"resolver": {"bogus": 1}})
    with pytest.raises(pydantic.ValidationError):
        loadSettings(userPath=tmp_path / "x.json5", overrides={"resolver": {"maxConcurrency": -1}})


def test_fileProvider_parse_error_starts_empty(tmp_path):
    path = tmp_path / "broken.json5"
    path.write_text("{ not json", encoding="utf-8")
    assert FileProvider(path).to_dict() == {}


def test_fileProvider_non_object_raises(tmp_path):
    path = tmp_path / "list.json5"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(TypeError):
        FileProvider(path)


def test_defaultsProvider_requires_mapping():
    with pytest.raises(TypeError):
        DefaultsProvider(["not", "a", "mapping"])  # type: ignore[arg-type]
    provider = DefaultsProvider(DEFAULT_SETTINGS)
    snapshot = provider.to_dict()
    snapshot["resolver"]["maxConcurrency"] = 0
    assert provider.to_dict()["resolver"]["maxConcurrency"] == 16


def test_overrideProvider_copies_its_data():
    data = {"logging": {"devMode": False}}
    provider = OverrideProvider(data)
    data["logging"]["devMode"] = True
    assert provider.to_dict() == {"logging": {"devMode": False}}
    assert OverrideProvider().to_dict() == {}


def test_deepMerge_replaces_non_dicts():
    assert deepMerge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3}}) == {"a": {"b": 1, "c": 3}}
    assert deepMerge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}
