"""Textual widget hosting a DiffView.

The widget is the host side of the diff view's collaborators: it supplies the
render surface, turns key and focus events into DiffView calls, and answers
the view's update requests with Widget.refresh(), which coalesces repaints.
"""

from __future__ import annotations

import logging

from rich.text import Text
from textual.widget import Widget

from diffview.core.errors import DiffViewError
from diffview.core.protocols import CommitKey, DiffSource
from diffview.tui.diff_view import DiffView
from diffview.tui.surface import TextSurface

logger = logging.getLogger(__name__)


class DiffPane(Widget, can_focus=True):
    """Bordered, scrollable diff of the selected commit."""

    DEFAULT_CSS = """
    DiffPane {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(
        self,
        source: DiffSource,
        *,
        max_cached_diffs: int | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.diff_view = DiffView(
            source,
            update_display=self._request_refresh,
            max_cached_diffs=max_cached_diffs,
        )
        self.last_surface: TextSurface | None = None

    def _request_refresh(self) -> None:
        if self.is_mounted:
            self.refresh()

    def select_commit(self, commit: CommitKey) -> None:
        """Show commit. Diff source errors propagate to the caller."""
        self.diff_view.on_commit_select(commit)

    def render(self) -> Text:
        surface = TextSurface(self.size.width, self.size.height)
        try:
            self.diff_view.render(surface)
        except DiffViewError as exc:
            logger.exception("Diff view render failed")
            return Text("{}: {}".format(type(exc).__name__, exc), style="bold red")
        self.last_surface = surface
        return surface.to_text()

    def on_key(self, event) -> None:
        if self.diff_view.handle(event.key):
            event.stop()
            event.prevent_default()

    def on_focus(self, event) -> None:
        self.diff_view.on_active_change(True)
        self.refresh()

    def on_blur(self, event) -> None:
        self.diff_view.on_active_change(False)
        self.refresh()
