"""Flattened directory listing for the file explorer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

HIDDEN_DIRS = frozenset({".git", "target", "node_modules"})


@dataclass(frozen=True)
class FileEntry:
    """One row of the file tree."""

    name: str
    path: Path
    is_dir: bool
    depth: int
    expanded: bool


def _sort_key(child: tuple[str, Path, bool]) -> tuple[bool, bool, str]:
    name, _path, is_dir = child
    # Directories first, then non-dotfiles before dotfiles, then case-insensitive name.
    return (not is_dir, name.startswith("."), name.lower())


def _children(directory: Path) -> list[tuple[str, Path, bool]]:
    try:
        names = os.listdir(directory)
    except OSError:
        return []
    children = []
    for name in names:
        path = directory / name
        is_dir = path.is_dir()
        if is_dir and name in HIDDEN_DIRS:
            continue
        children.append((name, path, is_dir))
    children.sort(key=_sort_key)
    return children


def _walk(directory: Path, depth: int, expanded_dirs: set[Path]) -> Iterator[FileEntry]:
    for name, path, is_dir in _children(directory):
        expanded = is_dir and path in expanded_dirs
        yield FileEntry(name=name, path=path, is_dir=is_dir, depth=depth, expanded=expanded)
        if expanded:
            yield from _walk(path, depth + 1, expanded_dirs)


def list_tree(root: str | os.PathLike | None, expanded_dirs: Iterable[str | os.PathLike] = ()) -> list[FileEntry]:
    """List ``root`` depth first, descending only into directories in ``expanded_dirs``.

    Unreadable directories and a missing root yield no entries.
    """
    if root is None:
        return []
    expanded = {Path(p) for p in expanded_dirs}
    return list(_walk(Path(root), 0, expanded))