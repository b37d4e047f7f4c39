"""Test harness for diffview.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, FakeDiffSource, RecordingSurface, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.builders import (
    FailingSurface,
    FakeDiffSource,
    RecordingSurface,
    make_commit,
    make_commits,
)

__all__ = [
    "run_app",
    "FailingSurface",
    "FakeDiffSource",
    "RecordingSurface",
    "make_commit",
    "make_commits",
]
