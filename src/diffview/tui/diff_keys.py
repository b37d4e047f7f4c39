"""Key dispatch for the diff view.

All handlers take the DiffView as their only argument and run with its lock
already held. Each returns True when it changed what should be on screen.
Handlers never raise.

// [LAW:one-source-of-truth] Key→action mapping for the diff view.
// [LAW:dataflow-not-control-flow] Dispatch is a table lookup, not a branch chain.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from diffview.tui.diff_view import DiffView

logger = logging.getLogger(__name__)


def move_down_line(view: "DiffView") -> bool:
    if view._view_pos.move_line_down(view._line_count()):
        logger.debug("Moving down one line in diff view")
        return True
    return False


def move_up_line(view: "DiffView") -> bool:
    if view._view_pos.move_line_up():
        logger.debug("Moving up one line in diff view")
        return True
    return False


def scroll_right(view: "DiffView") -> bool:
    view_pos = view._view_pos
    view_pos.move_page_right(view._view_dimension.cols)
    logger.debug("Scrolling right. View starts at column %d", view_pos.view_start_column)
    return True


def scroll_left(view: "DiffView") -> bool:
    view_pos = view._view_pos
    if view_pos.move_page_left(view._view_dimension.cols):
        logger.debug("Scrolling left. View starts at column %d", view_pos.view_start_column)
        return True
    return False


DiffViewHandler = Callable[["DiffView"], bool]

DIFF_VIEW_KEYMAP: dict[str, DiffViewHandler] = {
    "up": move_up_line,
    "down": move_down_line,
    "right": scroll_right,
    "left": scroll_left,
    # vi-style aliases
    "k": move_up_line,
    "j": move_down_line,
    "l": scroll_right,
    "h": scroll_left,
}


def lookup(key: str) -> DiffViewHandler | None:
    return DIFF_VIEW_KEYMAP.get(key)
