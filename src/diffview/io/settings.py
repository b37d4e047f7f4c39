"""Settings file I/O for diffview.

Manages a JSON settings file at XDG_CONFIG_HOME/diffview/settings.json.
Missing or unreadable files behave like an empty settings dict.

Import as: import diffview.io.settings
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_COMMIT_LIMIT = 200
DEFAULT_GIT_TIMEOUT_SECONDS = 30.0


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / diffview / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "diffview" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Atomic write of settings dict to JSON file.

    Creates parent directories if needed. Writes to temp file then renames
    to avoid partial writes on crash.
    """
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def load_setting(key: str, default=None):
    """Load a single setting by key. Returns default if absent."""
    return load_settings().get(key, default)


def save_setting(key: str, value) -> None:
    """Save a single setting by key (merge into existing settings)."""
    data = load_settings()
    data[key] = value
    save_settings(data)


def load_commit_limit() -> int:
    """Maximum number of commits listed in the commit pane."""
    try:
        return max(1, int(load_setting("commit_limit", DEFAULT_COMMIT_LIMIT)))
    except (TypeError, ValueError):
        return DEFAULT_COMMIT_LIMIT


def load_max_cached_diffs() -> Optional[int]:
    """Diff cache capacity, or None for unbounded."""
    raw = load_setting("max_cached_diffs")
    if raw is None:
        return None
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        return None


def load_git_timeout() -> float:
    """Seconds before a git subprocess is abandoned."""
    try:
        value = float(load_setting("git_timeout_seconds", DEFAULT_GIT_TIMEOUT_SECONDS))
    except (TypeError, ValueError):
        return DEFAULT_GIT_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_GIT_TIMEOUT_SECONDS
