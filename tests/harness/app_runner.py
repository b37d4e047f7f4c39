"""App lifecycle management for Textual in-process tests.

State isolation: every call creates a fresh source and app.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from textual.pilot import Pilot

from diffview.tui.app import DiffViewApp
from tests.harness.builders import FakeDiffSource


@asynccontextmanager
async def run_app(
    *,
    commits: list,
    source=None,
    size: tuple[int, int] = (100, 20),
    max_cached_diffs: int | None = None,
) -> AsyncIterator[tuple[Pilot, DiffViewApp]]:
    """Create and run a DiffViewApp in test mode.

    Yields (pilot, app). Uses a FakeDiffSource when no source is given.
    """
    source = source if source is not None else FakeDiffSource()
    app = DiffViewApp(commits, source, max_cached_diffs=max_cached_diffs)

    async with app.run_test(size=size) as pilot:
        # Ensure on_mount processing (initial selection) has completed
        await pilot.pause()
        yield pilot, app
