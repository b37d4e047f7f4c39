"""Pytest configuration and shared fixtures for diffview tests."""

import pytest


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolated_dirs(tmp_path_factory, monkeypatch):
    """Keep settings and log files out of the real home directory."""
    base = tmp_path_factory.mktemp("diffview-home")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(base / "config"))
    monkeypatch.setenv("DIFFVIEW_LOG_DIR", str(base / "logs"))
    monkeypatch.delenv("DIFFVIEW_LOG_LEVEL", raising=False)
    yield
