"""Memoized, line-split diffs keyed by commit identity.

Each entry also carries the ViewPosition to restore the next time its commit
becomes active. Failed computations are never cached.

// [LAW:single-enforcer] Only get_or_create() calls the diff source.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass, field

from diffview.core.protocols import CommitKey, DiffSource
from diffview.core.view_position import ViewPosition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffLine:
    line: str


@dataclass
class Diff:
    lines: list[DiffLine]
    view_pos: ViewPosition = field(default_factory=ViewPosition)

    @property
    def line_count(self) -> int:
        return len(self.lines)


def split_diff_lines(raw: str) -> list[DiffLine]:
    """Split raw diff text on newlines, keeping blank lines.

    Only "\\n" ends a line. Form feeds and other characters that
    str.splitlines() would treat as breaks stay inside the line. A trailing
    newline terminates the last line rather than opening a new one, and one
    trailing carriage return is dropped from each line.
    """
    parts = raw.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [DiffLine(part[:-1] if part.endswith("\r") else part) for part in parts]


def describe_commit(commit: CommitKey) -> str:
    return str(getattr(commit, "short_id", commit))


class DiffCache:
    """Commit -> Diff memo.

    Unbounded by default: every visited commit stays resident for the lifetime
    of the cache. With max_entries set, least recently used diffs are dropped;
    their view positions are kept so a recomputed diff reopens where it was left.
    """

    def __init__(self, source: DiffSource, max_entries: int | None = None) -> None:
        self._source = source
        self._max_entries = None if max_entries is None else max(1, int(max_entries))
        self._entries: OrderedDict[CommitKey, Diff] = OrderedDict()
        self._evicted_positions: dict[CommitKey, ViewPosition] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, commit: CommitKey) -> bool:
        return commit in self._entries

    def get(self, commit: CommitKey) -> Diff | None:
        return self._entries.get(commit)

    def get_or_create(self, commit: CommitKey) -> Diff:
        diff = self._entries.get(commit)
        if diff is not None:
            self._entries.move_to_end(commit)
            logger.debug("Diff cache hit for commit %s", describe_commit(commit))
            return diff

        logger.debug("Diff cache miss for commit %s", describe_commit(commit))
        raw = self._source.compute_diff(commit)

        view_pos = self._evicted_positions.pop(commit, None) or ViewPosition()
        diff = Diff(lines=split_diff_lines(raw), view_pos=view_pos)
        self._entries[commit] = diff
        self._enforce_max_entries()
        return diff

    def _enforce_max_entries(self) -> None:
        if self._max_entries is None:
            return
        while len(self._entries) > self._max_entries:
            commit, evicted = self._entries.popitem(last=False)
            self._evicted_positions[commit] = evicted.view_pos
            logger.debug("Evicted diff for commit %s", describe_commit(commit))
