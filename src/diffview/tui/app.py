"""Textual application: a commit list beside the diff pane.

Highlighting a commit in the list selects it in the diff pane. This is the
outer error boundary for selection: diff source failures are logged and shown
as a notification, and the pane keeps showing the previous commit.
"""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from diffview.core.errors import DiffSourceError
from diffview.core.protocols import DiffSource
from diffview.io.git_source import Commit
from diffview.tui.diff_pane import DiffPane

logger = logging.getLogger(__name__)


class DiffViewApp(App):
    """Browse commits and their diffs."""

    TITLE = "diffview"

    CSS = """
    #commits {
        width: 40%;
        height: 1fr;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        commits: list[Commit],
        source: DiffSource,
        *,
        max_cached_diffs: int | None = None,
    ) -> None:
        super().__init__()
        self._commits = list(commits)
        self._source = source
        self._max_cached_diffs = max_cached_diffs

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield OptionList(
                *(
                    Option("{} {}".format(commit.short_id, commit.summary), id=commit.sha)
                    for commit in self._commits
                ),
                id="commits",
            )
            yield DiffPane(self._source, max_cached_diffs=self._max_cached_diffs, id="diff")

    def on_mount(self) -> None:
        if not self._commits:
            self.notify("No commits to show", severity="warning")
            return
        self.query_one("#commits", OptionList).highlighted = 0
        self.select_commit(self._commits[0])

    @property
    def diff_pane(self) -> DiffPane:
        return self.query_one("#diff", DiffPane)

    def select_commit(self, commit: Commit) -> bool:
        """Show commit in the diff pane. Returns False if its diff failed to load."""
        try:
            self.diff_pane.select_commit(commit)
        except DiffSourceError as e:
            logger.warning("%s", e)
            self.notify(str(e), title="git", severity="error")
            return False
        return True

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        index = event.option_index
        if 0 <= index < len(self._commits):
            self.select_commit(self._commits[index])
