"""Git-backed commit listing and diff computation.

All git access goes through _run_git(); failures surface as DiffSourceError
with git's stderr attached.

// [LAW:locality-or-seam] Subprocess handling is isolated here; the view only sees DiffSource.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from diffview.core.errors import DiffSourceError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0

# Unit separator keeps summaries with spaces/tabs intact.
_LOG_FORMAT = "%H%x1f%s"


@dataclass(frozen=True, eq=False)
class Commit:
    """A commit as listed by git log. Compared and hashed by identity."""

    sha: str
    summary: str = ""

    @property
    def short_id(self) -> str:
        return self.sha[:7]

    def __str__(self) -> str:
        return self.sha


def _run_git(repo_path: Path, args: list[str], timeout_seconds: float, what: str) -> str:
    """Run a git subcommand and return stdout, raising DiffSourceError on failure."""
    cmd = ["git", "-C", str(repo_path), *args]
    logger.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except FileNotFoundError as e:
        raise DiffSourceError(what, "git executable not found") from e
    except subprocess.TimeoutExpired as e:
        raise DiffSourceError(what, "git timed out after {:g}s".format(timeout_seconds)) from e
    except OSError as e:
        raise DiffSourceError(what, str(e)) from e

    if proc.returncode != 0:
        detail = proc.stderr.strip() or "git exited with status {}".format(proc.returncode)
        raise DiffSourceError(what, detail)
    return proc.stdout


class GitDiffSource:
    """DiffSource producing `git show` output for a commit."""

    def __init__(self, repo_path: Path | str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.repo_path = Path(repo_path)
        self.timeout_seconds = timeout_seconds

    def compute_diff(self, commit: Commit) -> str:
        logger.info("Computing diff for commit %s", commit.short_id)
        return _run_git(
            self.repo_path,
            ["show", "--no-color", "--no-ext-diff", "--patch-with-stat", commit.sha],
            self.timeout_seconds,
            commit.sha,
        )


def list_commits(
    repo_path: Path | str,
    limit: int = 200,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[Commit]:
    """Return up to limit commits reachable from HEAD, newest first."""
    out = _run_git(
        Path(repo_path),
        ["log", "--no-color", "--max-count={}".format(max(1, int(limit))), "--format=" + _LOG_FORMAT],
        timeout_seconds,
        "HEAD",
    )
    commits: list[Commit] = []
    for line in out.split("\n"):
        if not line:
            continue
        sha, _, summary = line.partition("\x1f")
        commits.append(Commit(sha=sha, summary=summary))
    return commits
