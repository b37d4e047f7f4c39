"""Unit tests for settings file I/O and typed loaders."""

import json
import logging

import pytest

import diffview.io.settings as settings


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


def _write(config_home, payload):
    path = config_home / "diffview" / "settings.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload, encoding="utf-8")
    return path


def test_config_path_under_xdg_config_home(config_home):
    assert settings.get_config_path() == config_home / "diffview" / "settings.json"


def test_missing_file_gives_defaults(config_home):
    assert settings.load_settings() == {}
    assert settings.load_commit_limit() == settings.DEFAULT_COMMIT_LIMIT
    assert settings.load_max_cached_diffs() is None
    assert settings.load_git_timeout() == settings.DEFAULT_GIT_TIMEOUT_SECONDS


def test_corrupt_file_logs_warning_and_gives_defaults(config_home, caplog):
    _write(config_home, "{not json")
    with caplog.at_level(logging.WARNING, logger="diffview.io.settings"):
        assert settings.load_settings() == {}
    assert any("unreadable settings" in r.getMessage().lower() for r in caplog.records)


def test_non_object_json_is_ignored(config_home):
    _write(config_home, "[1, 2, 3]")
    assert settings.load_settings() == {}


def test_save_and_load_roundtrip(config_home):
    settings.save_setting("commit_limit", 25)
    settings.save_setting("max_cached_diffs", 10)

    data = json.loads(settings.get_config_path().read_text(encoding="utf-8"))
    assert data == {"commit_limit": 25, "max_cached_diffs": 10}
    assert settings.load_commit_limit() == 25
    assert settings.load_max_cached_diffs() == 10


def test_save_leaves_no_temp_files(config_home):
    settings.save_settings({"a": 1})
    leftovers = list((config_home / "diffview").glob("*.tmp"))
    assert leftovers == []


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"commit_limit": "abc"}, settings.DEFAULT_COMMIT_LIMIT),
        ({"commit_limit": 0}, 1),
        ({"commit_limit": "50"}, 50),
    ],
)
def test_commit_limit_validation(config_home, raw, expected):
    _write(config_home, json.dumps(raw))
    assert settings.load_commit_limit() == expected


def test_invalid_git_timeout_falls_back(config_home):
    _write(config_home, json.dumps({"git_timeout_seconds": -3}))
    assert settings.load_git_timeout() == settings.DEFAULT_GIT_TIMEOUT_SECONDS


def test_invalid_cache_capacity_means_unbounded(config_home):
    _write(config_home, json.dumps({"max_cached_diffs": "lots"}))
    assert settings.load_max_cached_diffs() is None
