"""Keyboard input frames and the actions panels hand back to the application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class Key(Enum):
    ESCAPE = "Escape"
    ENTER = "Enter"
    BACKSPACE = "Backspace"
    TAB = "Tab"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    HOME = "Home"
    END = "End"
    DELETE = "Delete"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    INSERT = "Insert"
    SLASH = "Slash"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"


@dataclass(frozen=True)
class Modifiers:
    ctrl: bool = False
    command: bool = False
    shift: bool = False
    alt: bool = False


@dataclass
class InputFrame:
    """The keys pressed, text typed and text pasted during one frame."""

    keys: tuple[Key, ...] = ()
    text: tuple[str, ...] = ()
    paste: tuple[str, ...] = ()
    modifiers: Modifiers = field(default_factory=Modifiers)

    def __post_init__(self) -> None:
        self.keys = tuple(self.keys)
        self.text = (self.text,) if isinstance(self.text, str) else tuple(self.text)
        self.paste = (self.paste,) if isinstance(self.paste, str) else tuple(self.paste)

    def key_pressed(self, key: Key) -> bool:
        return key in self.keys

    def any_pressed(self, *args: Key) -> bool:
        return any(key in self.keys for key in _flatten(args))


def _flatten(keys: Iterable) -> Iterable[Key]:
    for key in keys:
        if isinstance(key, Key):
            yield key
        else:
            yield from key


@dataclass(frozen=True)
class OpenFile:
    path: str


@dataclass(frozen=True)
class ViewDiff:
    path: str
    staged: bool