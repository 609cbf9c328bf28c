"""Parsing of ``git status --porcelain=v1`` output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FileStatus(Enum):
    MODIFIED = "M"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNTRACKED = "?"

    @property
    def prefix(self) -> str:
        """The one-letter marker shown beside a file."""
        return self.value


@dataclass(frozen=True)
class GitFileEntry:
    status: FileStatus
    path: str


_INDEX_STATUS = {
    "M": FileStatus.MODIFIED,
    "A": FileStatus.ADDED,
    "D": FileStatus.DELETED,
    "R": FileStatus.RENAMED,
    "C": FileStatus.COPIED,
}

_WORKTREE_STATUS = {
    "M": FileStatus.MODIFIED,
    "D": FileStatus.DELETED,
}


def parse_status(output: str) -> tuple[list[GitFileEntry], list[GitFileEntry]]:
    """Split porcelain status output into ``(staged, unstaged)`` entries."""
    staged: list[GitFileEntry] = []
    unstaged: list[GitFileEntry] = []
    for raw_line in output.split("\n"):
        line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
        if len(line) < 3:
            continue
        x, y, raw_path = line[0], line[1], line[3:]
        path = raw_path.rsplit(" -> ", 1)[-1]

        index_status = _INDEX_STATUS.get(x)
        if index_status is not None:
            staged.append(GitFileEntry(index_status, path))

        if y == "?" and x == "?":
            worktree_status: FileStatus | None = FileStatus.UNTRACKED
        else:
            worktree_status = _WORKTREE_STATUS.get(y)
        if worktree_status is not None:
            unstaged.append(GitFileEntry(worktree_status, path))
    return staged, unstaged