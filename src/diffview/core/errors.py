"""Exception types raised by diffview components."""


class DiffViewError(Exception):
    """Base class for diffview errors."""


class DiffSourceError(DiffViewError):
    """The diff for a commit could not be computed."""

    def __init__(self, commit_id: str, detail: str) -> None:
        self.commit_id = commit_id
        self.detail = detail
        super().__init__("Unable to load diff for commit {}: {}".format(commit_id, detail))


class SurfaceError(DiffViewError):
    """A write fell outside the render surface."""
