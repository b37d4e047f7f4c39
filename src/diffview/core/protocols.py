"""Contracts for the collaborators the diff view consumes.

This module has no dependencies on other project modules besides the
ViewDimension value type. Implementations satisfy the protocols structurally;
they don't need to inherit from them.
"""

from typing import Callable, Hashable, Protocol

from diffview.core.view_position import ViewDimension


# Any hashable object works as a commit. Equality is expected to be identity.
CommitKey = Hashable

UpdateDisplay = Callable[[], None]


class DiffSource(Protocol):
    """Produces the raw diff text for a commit.

    compute_diff() raises on failure; the caller never memoizes failures.
    """

    def compute_diff(self, commit: CommitKey) -> str:
        ...


class RenderSurface(Protocol):
    """A bordered, titled rectangle of text rows.

    Row 0 and the last row belong to the border; content rows are 1-based.
    Every method may raise, and callers let the exception propagate.
    """

    def view_dimensions(self) -> ViewDimension:
        ...

    def set_row(self, row: int, start_column: int, text: str) -> None:
        ...

    def set_selected_row(self, row: int, active: bool) -> None:
        ...

    def draw_border(self) -> None:
        ...

    def set_title(self, text: str) -> None:
        ...

    def set_footer(self, text: str) -> None:
        ...
