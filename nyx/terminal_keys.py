"""Translate keyboard input into the bytes a terminal expects."""

from __future__ import annotations

from nyx.events import InputFrame, Key, Modifiers

DEFAULT_PALETTE = {
    "foreground": "#CDD6F4",
    "background": "#1E1E2E",
    "black": "#45475A",
    "red": "#F38BA8",
    "green": "#A6E3A1",
    "yellow": "#F9E2AF",
    "blue": "#89B4FA",
    "magenta": "#F5C2E7",
    "cyan": "#94E2D5",
    "white": "#BAC2DE",
    "bright_black": "#585B70",
    "bright_red": "#F38BA8",
    "bright_green": "#A6E3A1",
    "bright_yellow": "#F9E2AF",
    "bright_blue": "#89B4FA",
    "bright_magenta": "#F5C2E7",
    "bright_cyan": "#94E2D5",
    "bright_white": "#A6ADC8",
}

_CTRL_BYTES = {
    Key.A: 0x01,
    Key.B: 0x02,
    Key.C: 0x03,
    Key.D: 0x04,
    Key.E: 0x05,
    Key.F: 0x06,
    Key.G: 0x07,
    Key.K: 0x0B,
    Key.N: 0x0E,
    Key.O: 0x0F,
    Key.P: 0x10,
    Key.Q: 0x11,
    Key.R: 0x12,
    Key.S: 0x13,
    Key.T: 0x14,
    Key.U: 0x15,
    Key.V: 0x16,
    Key.W: 0x17,
    Key.X: 0x18,
    Key.Y: 0x19,
    Key.Z: 0x1A,
}

_SPECIAL_BYTES = {
    Key.ENTER: b"\r",
    Key.BACKSPACE: b"\x7f",
    Key.TAB: b"\t",
    Key.ESCAPE: b"\x1b",
    Key.ARROW_UP: b"\x1b[A",
    Key.ARROW_DOWN: b"\x1b[B",
    Key.ARROW_RIGHT: b"\x1b[C",
    Key.ARROW_LEFT: b"\x1b[D",
    Key.HOME: b"\x1b[H",
    Key.END: b"\x1b[F",
    Key.DELETE: b"\x1b[3~",
    Key.PAGE_UP: b"\x1b[5~",
    Key.PAGE_DOWN: b"\x1b[6~",
    Key.INSERT: b"\x1b[2~",
}


def key_to_bytes(key: Key, modifiers: Modifiers) -> bytes | None:
    """Control bytes or escape sequence for a key, or None when it has none.

    Ordinary characters arrive as typed text and are not handled here.
    """
    if modifiers.ctrl:
        code = _CTRL_BYTES.get(key)
        return None if code is None else bytes([code])
    return _SPECIAL_BYTES.get(key)


def frame_to_bytes(frame: InputFrame) -> bytes:
    """Everything a frame of input writes to the terminal: keys, then text, then pastes."""
    chunks = [key_to_bytes(key, frame.modifiers) for key in frame.keys]
    out = b"".join(chunk for chunk in chunks if chunk is not None)
    out += "".join(frame.text).encode("utf-8")
    out += "".join(frame.paste).encode("utf-8")
    return out