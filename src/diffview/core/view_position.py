"""Cursor and viewport arithmetic for the diff view.

Pure data + arithmetic. No I/O, no locking; the owning DiffView serializes access.

// [LAW:one-source-of-truth] Cursor/scroll clamping rules live here only.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ViewDimension:
    """Size of a render surface in character cells."""

    rows: int = 0
    cols: int = 0


@dataclass
class ViewPosition:
    """Cursor row, first visible row and first visible column of a viewport."""

    active_row_index: int = 0
    view_start_row_index: int = 0
    view_start_column: int = 0

    def copy(self) -> "ViewPosition":
        return replace(self)

    def determine_view_start_row(self, visible_rows: int) -> None:
        """Scroll just enough that the active row is inside the visible window.

        Idempotent: calling it twice with the same row count changes nothing
        the second time.
        """
        if self.active_row_index < self.view_start_row_index:
            self.view_start_row_index = self.active_row_index
        elif self.active_row_index >= self.view_start_row_index + visible_rows:
            # visible_rows <= 0 degenerates to "start at the active row"
            self.view_start_row_index = self.active_row_index - max(visible_rows, 1) + 1

    def move_line_down(self, line_count: int) -> bool:
        if self.active_row_index + 1 < line_count:
            self.active_row_index += 1
            return True
        return False

    def move_line_up(self) -> bool:
        if self.active_row_index > 0:
            self.active_row_index -= 1
            return True
        return False

    def move_page_right(self, page_width: int) -> bool:
        # No upper bound: the column may run past the longest line.
        self.view_start_column += page_width
        return True

    def move_page_left(self, page_width: int) -> bool:
        column = max(0, self.view_start_column - page_width)
        if column == self.view_start_column:
            return False
        self.view_start_column = column
        return True
