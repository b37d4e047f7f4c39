"""CLI entry point for diffview."""

import argparse
import logging
import sys

import diffview.io.logging_setup
import diffview.io.settings
from diffview.core.errors import DiffSourceError
from diffview.io.git_source import GitDiffSource, list_commits
from diffview.tui.app import DiffViewApp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse git commits and their diffs in the terminal")
    parser.add_argument(
        "repo",
        nargs="?",
        default=".",
        help="Path to the git repository (default: current directory)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Number of commits to list (default: settings commit_limit, else {})".format(
            diffview.io.settings.DEFAULT_COMMIT_LIMIT
        ),
    )
    parser.add_argument(
        "--max-cached-diffs",
        type=int,
        default=None,
        help="Keep at most N diffs in memory (default: unbounded)",
    )
    parser.add_argument(
        "--git-timeout",
        type=float,
        default=None,
        help="Seconds before a git command is abandoned (default: {:g})".format(
            diffview.io.settings.DEFAULT_GIT_TIMEOUT_SECONDS
        ),
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: DIFFVIEW_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Write the --limit, --max-cached-diffs and --git-timeout values given to the settings file",
    )
    return parser


def _persist_overrides(args) -> None:
    overrides = {
        "commit_limit": args.limit,
        "max_cached_diffs": args.max_cached_diffs,
        "git_timeout_seconds": args.git_timeout,
    }
    for key, value in overrides.items():
        if value is not None:
            diffview.io.settings.save_setting(key, value)
            logger.info("Saved setting %s = %r", key, value)


def main(argv=None):
    args = build_parser().parse_args(argv)

    # [LAW:single-enforcer] Runtime logger configuration is centralized in io.logging_setup.
    log_runtime = diffview.io.logging_setup.configure(level=args.log_level)
    logger.info("Logging to %s at %s", log_runtime.file_path, log_runtime.level_name)

    if args.save_settings:
        _persist_overrides(args)

    # CLI flags win over the settings file.
    limit = args.limit if args.limit is not None else diffview.io.settings.load_commit_limit()
    max_cached = (
        args.max_cached_diffs
        if args.max_cached_diffs is not None
        else diffview.io.settings.load_max_cached_diffs()
    )
    timeout = args.git_timeout if args.git_timeout is not None else diffview.io.settings.load_git_timeout()

    try:
        commits = list_commits(args.repo, limit=limit, timeout_seconds=timeout)
    except DiffSourceError as e:
        logger.error("Cannot read repository %s: %s", args.repo, e.detail)
        print("diffview: cannot read repository {}: {}".format(args.repo, e.detail), file=sys.stderr)
        return 1

    source = GitDiffSource(args.repo, timeout_seconds=timeout)
    app = DiffViewApp(commits, source, max_cached_diffs=max_cached)
    app.run()
    return 0
