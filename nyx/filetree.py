"""File explorer panel: a navigable, searchable directory tree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from nyx.events import InputFrame, Key, OpenFile
from nyx.tree_listing import FileEntry, list_tree

_COLLAPSED = "\u25b8 "
_EXPANDED = "\u25be "
_FILE = "  "
_NAV_LETTERS = frozenset("jkhl")


@dataclass(frozen=True)
class VisibleRow:
    """One row as the explorer shows it."""

    index: int
    label: str
    indent: int
    is_dir: bool
    selected: bool


class FiletreeModule:
    """Directory tree with vim-style navigation and incremental search."""

    def __init__(self, root: str | os.PathLike | None = None) -> None:
        self.root: Path | None = None if root is None else Path(root)
        self.entries: list[FileEntry] = []
        self.selected = 0
        self.expanded_dirs: set[Path] = set()
        self.searching = False
        self.search_query = ""
        self.filtered: list[int] = []
        self.filtered_selected = 0
        self.search_context: Path | None = None
        self.refresh()

    @property
    def filtering(self) -> bool:
        """True when a non-empty search is narrowing the list."""
        return self.searching and bool(self.search_query)

    @property
    def search_display(self) -> str | None:
        """The search bar text, or None when search is off."""
        return f"/{self.search_query}" if self.searching else None

    def refresh(self) -> None:
        """Re-read the tree from disk, keeping expansion and selection."""
        self.entries = list_tree(self.root, self.expanded_dirs)
        if self.entries and self.selected >= len(self.entries):
            self.selected = len(self.entries) - 1
        if self.filtering:
            self._update_filter()

    def _update_filter(self) -> None:
        query = self.search_query.lower()
        context_matches: list[int] = []
        other_matches: list[int] = []
        for index, entry in enumerate(self.entries):
            if query not in entry.name.lower():
                continue
            if self.search_context is not None and entry.path.is_relative_to(self.search_context):
                context_matches.append(index)
            else:
                other_matches.append(index)
        self.filtered = context_matches + other_matches

        if not self.filtered:
            self.filtered_selected = 0
        else:
            self.filtered_selected = min(self.filtered_selected, len(self.filtered) - 1)
            self.selected = self.filtered[self.filtered_selected]

    def clear_search(self) -> None:
        """Leave search mode and forget the query."""
        self.searching = False
        self.search_query = ""
        self.filtered = []
        self.filtered_selected = 0

    def set_search(self, query: str) -> None:
        """Enter search mode with ``query`` and select the first match."""
        self.searching = True
        self.search_query = query
        self.filtered_selected = 0
        self._update_filter()

    def set_search_context(self, path: str | os.PathLike) -> None:
        """Rank matches under ``path`` first in later searches."""
        self.search_context = Path(path)

    def move_up(self) -> None:
        if self.searching:
            if self.filtered_selected > 0:
                self.filtered_selected -= 1
                self.selected = self.filtered[self.filtered_selected]
        elif self.selected > 0:
            self.selected -= 1

    def move_down(self) -> None:
        if self.searching:
            if self.filtered_selected < len(self.filtered) - 1:
                self.filtered_selected += 1
                self.selected = self.filtered[self.filtered_selected]
        elif self.selected < len(self.entries) - 1:
            self.selected += 1

    def toggle_expand(self) -> None:
        """Expand or collapse the selected directory; files are left alone."""
        if self.selected >= len(self.entries):
            return
        entry = self.entries[self.selected]
        if not entry.is_dir:
            return
        if entry.path in self.expanded_dirs:
            self.expanded_dirs.remove(entry.path)
        else:
            self.expanded_dirs.add(entry.path)
        self.refresh()

    def _selected_entry(self) -> FileEntry | None:
        if self.selected < len(self.entries):
            return self.entries[self.selected]
        return None

    def handle_input(self, frame: InputFrame) -> OpenFile | None:
        """Apply one frame of input; return the file to open, if any."""
        action: OpenFile | None = None
        want_toggle = False
        search_text: str | None = None

        if frame.key_pressed(Key.ESCAPE):
            if self.searching:
                self.clear_search()
            return None
        if frame.key_pressed(Key.ARROW_DOWN):
            self.move_down()
            return None
        if frame.key_pressed(Key.ARROW_UP):
            self.move_up()
            return None

        if self.searching:
            if frame.key_pressed(Key.BACKSPACE):
                self.search_query = self.search_query[:-1]
                if not self.search_query:
                    self.clear_search()
                else:
                    self._update_filter()
                return None
            if frame.key_pressed(Key.ENTER):
                entry = self._selected_entry()
                if entry is not None:
                    if entry.is_dir:
                        self.search_context = entry.path
                        want_toggle = True
                    else:
                        action = OpenFile(str(entry.path))
                self.clear_search()
                if want_toggle:
                    self.toggle_expand()
                return action
            if frame.text:
                search_text = frame.text[-1]
        else:
            if frame.key_pressed(Key.J):
                self.move_down()
                return None
            if frame.key_pressed(Key.K):
                self.move_up()
                return None
            if frame.any_pressed(Key.ENTER, Key.L):
                entry = self._selected_entry()
                if entry is not None:
                    if entry.is_dir:
                        self.toggle_expand()
                    else:
                        action = OpenFile(str(entry.path))
                return action
            if frame.key_pressed(Key.H):
                entry = self._selected_entry()
                if entry is not None and entry.is_dir and entry.expanded:
                    self.toggle_expand()
                return None
            if frame.key_pressed(Key.SLASH):
                self.searching = True
                self.search_query = ""
                return None
            for text in frame.text:
                if len(text) == 1 and text in _NAV_LETTERS:
                    continue
                self.searching = True
                search_text = text

        if search_text is not None:
            self.search_query += search_text
            self.filtered_selected = 0
            self._update_filter()
        return action

    def click(self, index: int) -> OpenFile | None:
        """Act on a click on entry ``index``: expand a directory or open a file."""
        if not 0 <= index < len(self.entries):
            raise IndexError(f"no entry at index {index}")
        self.selected = index
        if self.searching and index in self.filtered:
            self.filtered_selected = self.filtered.index(index)

        entry = self.entries[index]
        if entry.is_dir:
            if self.searching:
                self.search_context = entry.path
                self.clear_search()
            self.toggle_expand()
            return None
        if self.searching:
            self.clear_search()
        return OpenFile(str(entry.path))

    def _display_name(self, entry: FileEntry) -> str:
        if self.root is not None:
            try:
                return str(entry.path.relative_to(self.root))
            except ValueError:
                pass
        return entry.name

    def visible_rows(self) -> list[VisibleRow]:
        """The rows to draw: matches as a flat list while filtering, else the whole tree."""
        filtering = self.filtering
        indices = self.filtered if filtering else range(len(self.entries))
        rows = []
        for index in indices:
            entry = self.entries[index]
            if filtering:
                prefix = _COLLAPSED if entry.is_dir else _FILE
                label = prefix + self._display_name(entry)
                indent = 0
            else:
                if entry.is_dir:
                    prefix = _EXPANDED if entry.expanded else _COLLAPSED
                else:
                    prefix = _FILE
                label = prefix + entry.name
                indent = entry.depth
            rows.append(
                VisibleRow(
                    index=index,
                    label=label,
                    indent=indent,
                    is_dir=entry.is_dir,
                    selected=index == self.selected,
                )
            )
        return rows