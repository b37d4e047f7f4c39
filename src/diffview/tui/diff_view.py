"""Diff view coordinator: active commit, diff cache, cursor state and painting.

One lock guards every field. Rendering, focus changes, commit selection and
key handling each hold it for their whole duration, so they never interleave.
The diff source is called with the lock held: a slow diff blocks rendering and
input until it returns.

// [LAW:single-enforcer] Cache and ViewPosition are mutated only through this class.
"""

from __future__ import annotations

import logging
import threading

import diffview.tui.diff_keys
from diffview.core.diff_cache import Diff, DiffCache, describe_commit
from diffview.core.protocols import CommitKey, DiffSource, RenderSurface, UpdateDisplay
from diffview.core.view_position import ViewDimension, ViewPosition

logger = logging.getLogger(__name__)

# Top border carries the title, bottom border the footer.
CHROME_ROWS = 2


def _noop() -> None:
    pass


class DiffView:
    """Shows the diff of the most recently selected commit."""

    def __init__(
        self,
        source: DiffSource,
        update_display: UpdateDisplay | None = None,
        max_cached_diffs: int | None = None,
    ) -> None:
        self._cache = DiffCache(source, max_entries=max_cached_diffs)
        self._update_display = update_display or _noop
        self._active_commit: CommitKey | None = None
        self._view_pos = ViewPosition()
        self._view_dimension = ViewDimension()
        self._active = False
        self._lock = threading.Lock()

    # ─── Read-only accessors ─────────────────────────────────────────────

    @property
    def active_commit(self) -> CommitKey | None:
        with self._lock:
            return self._active_commit

    @property
    def active(self) -> bool:
        with self._lock:
            return self._active

    @property
    def cache(self) -> DiffCache:
        return self._cache

    def position(self) -> ViewPosition:
        """Snapshot of the cursor/scroll state in effect."""
        with self._lock:
            return self._view_pos.copy()

    def line_count(self) -> int:
        with self._lock:
            return self._line_count()

    # ─── Lock-held helpers ───────────────────────────────────────────────

    def _active_diff(self) -> Diff | None:
        if self._active_commit is None:
            return None
        return self._cache.get(self._active_commit)

    def _line_count(self) -> int:
        diff = self._active_diff()
        return 0 if diff is None else diff.line_count

    # ─── Events ──────────────────────────────────────────────────────────

    def on_commit_select(self, commit: CommitKey) -> None:
        """Make commit the active one, computing its diff on first use.

        Raises whatever the diff source raises; in that case the previously
        active commit stays active.
        """
        with self._lock:
            previous = self._active_diff()
            if previous is not None:
                previous.view_pos = self._view_pos

            diff = self._cache.get_or_create(commit)

            self._active_commit = commit
            self._view_pos = diff.view_pos
            logger.debug("DiffView showing commit %s", describe_commit(commit))
            self._update_display()

    def on_active_change(self, active: bool) -> None:
        logger.debug("DiffView active: %s", active)
        with self._lock:
            self._active = active

    def handle(self, key: str) -> bool:
        """Run the handler bound to key. Returns False for unbound keys."""
        logger.debug("DiffView handling key %s", key)
        handler = diffview.tui.diff_keys.lookup(key)
        if handler is None:
            return False

        with self._lock:
            if handler(self):
                self._update_display()
        return True

    # ─── Painting ────────────────────────────────────────────────────────

    def render(self, surface: RenderSurface) -> None:
        """Paint the visible window of the active diff onto surface.

        Surface errors propagate and abort the rest of the frame.
        """
        with self._lock:
            self._view_dimension = surface.view_dimensions()

            diff = self._active_diff()
            if diff is None:
                return

            rows = max(0, self._view_dimension.rows - CHROME_ROWS)
            view_pos = self._view_pos
            view_pos.determine_view_start_row(rows)

            line_num = diff.line_count
            line_index = view_pos.view_start_row_index
            start_column = view_pos.view_start_column

            row_index = 0
            while row_index < rows and line_index < line_num:
                surface.set_row(row_index + 1, start_column, diff.lines[line_index].line)
                row_index += 1
                line_index += 1

            if line_num > 0 and rows > 0:
                selected_row = view_pos.active_row_index - view_pos.view_start_row_index + 1
                surface.set_selected_row(selected_row, self._active)

            surface.draw_border()
            surface.set_title("Diff for commit {}".format(self._active_commit))

            current_line = view_pos.active_row_index + 1 if line_num > 0 else 0
            surface.set_footer("Line {} of {}".format(current_line, line_num))
