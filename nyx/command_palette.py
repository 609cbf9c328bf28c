"""Command palette: a filterable list of editor commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from nyx.events import InputFrame, Key


class PaletteAction(Enum):
    TOGGLE_FILETREE = auto()
    OPEN_SETTINGS = auto()
    OPEN_KEYBINDINGS = auto()
    OPEN_LSP_SERVERS = auto()


@dataclass(frozen=True)
class PaletteEntry:
    label: str
    description: str
    action: PaletteAction


_DEFAULT_COMMANDS = (
    PaletteEntry("Toggle File Explorer", "Show or hide the file tree panel", PaletteAction.TOGGLE_FILETREE),
    PaletteEntry("Open Settings", "Open the settings view", PaletteAction.OPEN_SETTINGS),
    PaletteEntry("Open Keybindings", "Show keyboard shortcuts", PaletteAction.OPEN_KEYBINDINGS),
    PaletteEntry("LSP Servers", "Manage language server configurations", PaletteAction.OPEN_LSP_SERVERS),
)


class CommandPalette:
    """Holds the filter text and selection of the command palette."""

    def __init__(self) -> None:
        self.filter = ""
        self.selected = 0
        self.commands: list[PaletteEntry] = list(_DEFAULT_COMMANDS)

    def reset(self) -> None:
        self.filter = ""
        self.selected = 0

    def filtered(self) -> list[PaletteEntry]:
        """Commands whose label or description contains the filter, case-insensitively."""
        if not self.filter:
            return list(self.commands)
        query = self.filter.lower()
        return [
            entry
            for entry in self.commands
            if query in entry.label.lower() or query in entry.description.lower()
        ]

    def handle_input(self, frame: InputFrame) -> tuple[bool, PaletteAction | None]:
        """Apply one frame of input; return ``(should_close, action)``."""
        if frame.key_pressed(Key.ESCAPE):
            return True, None
        if frame.any_pressed(Key.ARROW_DOWN, Key.J):
            if self.selected < len(self.filtered()) - 1:
                self.selected += 1
            return False, None
        if frame.any_pressed(Key.ARROW_UP, Key.K):
            if self.selected > 0:
                self.selected -= 1
            return False, None
        if frame.key_pressed(Key.ENTER):
            matches = self.filtered()
            action = matches[self.selected].action if self.selected < len(matches) else None
            return True, action
        if frame.key_pressed(Key.BACKSPACE):
            self.filter = self.filter[:-1]
            self.selected = 0
            return False, None
        if not (frame.modifiers.command or frame.modifiers.ctrl):
            for text in frame.text:
                self.filter += text
                self.selected = 0
        return False, None

    def prompt(self) -> str:
        """The line shown in the palette's search field."""
        return f"> {self.filter}" if self.filter else "Type a command..."