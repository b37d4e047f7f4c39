"""Shared builders: commits, fake diff sources and recording surfaces."""

import itertools

from diffview.core.errors import DiffSourceError, SurfaceError
from diffview.core.view_position import ViewDimension
from diffview.io.git_source import Commit

_sha_counter = itertools.count(1)

SCENARIO_DIFF = "@@ -1,3 +1,3 @@\n-old\n+new\n"


def make_commit(sha=None, summary="test commit"):
    """Create a Commit with a unique 40-char sha unless one is given."""
    if sha is None:
        sha = "{:040x}".format(next(_sha_counter))
    return Commit(sha=sha, summary=summary)


def make_commits(n):
    return [make_commit(summary="commit {}".format(i)) for i in range(n)]


def numbered_diff(n, prefix="line"):
    """Diff text with n lines: 'line 0' .. 'line n-1'."""
    return "".join("{} {}\n".format(prefix, i) for i in range(n))


class FakeDiffSource:
    """DiffSource returning canned text and recording every call.

    Args:
        diffs: sha -> raw diff text. Unknown shas get `default`.
        default: Text returned for commits not in `diffs`.
        fail_times: sha -> number of leading calls that raise DiffSourceError.
    """

    def __init__(self, diffs=None, default=SCENARIO_DIFF, fail_times=None):
        self.diffs = dict(diffs or {})
        self.default = default
        self.fail_times = dict(fail_times or {})
        self.calls = []

    def compute_diff(self, commit):
        self.calls.append(commit)
        remaining = self.fail_times.get(commit.sha, 0)
        if remaining > 0:
            self.fail_times[commit.sha] = remaining - 1
            raise DiffSourceError(commit.sha, "simulated failure")
        return self.diffs.get(commit.sha, self.default)

    def call_count(self, commit):
        return sum(1 for c in self.calls if c is commit)


class RecordingSurface:
    """RenderSurface that records everything written to it."""

    def __init__(self, rows=10, cols=80):
        self.dimension = ViewDimension(rows=rows, cols=cols)
        self.rows = {}
        self.selected = None
        self.border_drawn = False
        self.title = None
        self.footer = None
        self.calls = []

    def view_dimensions(self):
        return self.dimension

    def set_row(self, row, start_column, text):
        self.calls.append("set_row")
        self.rows[row] = (start_column, text)

    def set_selected_row(self, row, active):
        self.calls.append("set_selected_row")
        self.selected = (row, active)

    def draw_border(self):
        self.calls.append("draw_border")
        self.border_drawn = True

    def set_title(self, text):
        self.calls.append("set_title")
        self.title = text

    def set_footer(self, text):
        self.calls.append("set_footer")
        self.footer = text

    def texts(self):
        """Row texts in row order."""
        return [self.rows[row][1] for row in sorted(self.rows)]


class FailingSurface(RecordingSurface):
    """RecordingSurface whose `fail_on` method raises SurfaceError."""

    def __init__(self, fail_on, rows=10, cols=80):
        super().__init__(rows=rows, cols=cols)
        self.fail_on = fail_on

    def _maybe_fail(self, name):
        if name == self.fail_on:
            raise SurfaceError("simulated {} failure".format(name))

    def set_row(self, row, start_column, text):
        self._maybe_fail("set_row")
        super().set_row(row, start_column, text)

    def set_selected_row(self, row, active):
        self._maybe_fail("set_selected_row")
        super().set_selected_row(row, active)

    def set_title(self, text):
        self._maybe_fail("set_title")
        super().set_title(text)

    def set_footer(self, text):
        self._maybe_fail("set_footer")
        super().set_footer(text)
