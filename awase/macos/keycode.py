"""Mapping between macOS virtual keycodes and keys (ANSI layout)."""

from __future__ import annotations

from awase.keys import Key

_KEYCODES: dict[Key, int] = {
    # Letters
    Key.A: 0x00,
    Key.B: 0x0B,
    Key.C: 0x08,
    Key.D: 0x02,
    Key.E: 0x0E,
    Key.F: 0x03,
    Key.G: 0x05,
    Key.H: 0x04,
    Key.I: 0x22,
    Key.J: 0x26,
    Key.K: 0x28,
    Key.L: 0x25,
    Key.M: 0x2E,
    Key.N: 0x2D,
    Key.O: 0x1F,
    Key.P: 0x23,
    Key.Q: 0x0C,
    Key.R: 0x0F,
    Key.S: 0x01,
    Key.T: 0x11,
    Key.U: 0x20,
    Key.V: 0x09,
    Key.W: 0x0D,
    Key.X: 0x07,
    Key.Y: 0x10,
    Key.Z: 0x06,
    # Numbers (top row)
    Key.NUM0: 0x1D,
    Key.NUM1: 0x12,
    Key.NUM2: 0x13,
    Key.NUM3: 0x14,
    Key.NUM4: 0x15,
    Key.NUM5: 0x17,
    Key.NUM6: 0x16,
    Key.NUM7: 0x1A,
    Key.NUM8: 0x1C,
    Key.NUM9: 0x19,
    # Function keys
    Key.F1: 0x7A,
    Key.F2: 0x78,
    Key.F3: 0x63,
    Key.F4: 0x76,
    Key.F5: 0x60,
    Key.F6: 0x61,
    Key.F7: 0x62,
    Key.F8: 0x64,
    Key.F9: 0x65,
    Key.F10: 0x6D,
    Key.F11: 0x67,
    Key.F12: 0x6F,
    Key.F13: 0x69,
    Key.F14: 0x6B,
    Key.F15: 0x71,
    Key.F16: 0x6A,
    Key.F17: 0x40,
    Key.F18: 0x4F,
    Key.F19: 0x50,
    Key.F20: 0x5A,
    # Whitespace / control
    Key.SPACE: 0x31,
    Key.RETURN: 0x24,
    Key.ESCAPE: 0x35,
    Key.TAB: 0x30,
    Key.BACKSPACE: 0x33,
    Key.DELETE: 0x75,  # forward delete
    # Navigation
    Key.UP: 0x7E,
    Key.DOWN: 0x7D,
    Key.LEFT: 0x7B,
    Key.RIGHT: 0x7C,
    Key.HOME: 0x73,
    Key.END: 0x77,
    Key.PAGE_UP: 0x74,
    Key.PAGE_DOWN: 0x79,
    # Punctuation / symbols
    Key.GRAVE: 0x32,
    Key.MINUS: 0x1B,
    Key.EQUAL: 0x18,
    Key.LEFT_BRACKET: 0x21,
    Key.RIGHT_BRACKET: 0x1E,
    Key.BACKSLASH: 0x2A,
    Key.SEMICOLON: 0x29,
    Key.QUOTE: 0x27,
    Key.COMMA: 0x2B,
    Key.PERIOD: 0x2F,
    Key.SLASH: 0x2C,
    # Numpad
    Key.NUMPAD0: 0x52,
    Key.NUMPAD1: 0x53,
    Key.NUMPAD2: 0x54,
    Key.NUMPAD3: 0x55,
    Key.NUMPAD4: 0x56,
    Key.NUMPAD5: 0x57,
    Key.NUMPAD6: 0x58,
    Key.NUMPAD7: 0x59,
    Key.NUMPAD8: 0x5B,
    Key.NUMPAD9: 0x5C,
    Key.NUMPAD_ADD: 0x45,
    Key.NUMPAD_SUBTRACT: 0x4E,
    Key.NUMPAD_MULTIPLY: 0x43,
    Key.NUMPAD_DIVIDE: 0x4B,
    Key.NUMPAD_DECIMAL: 0x41,
    Key.NUMPAD_ENTER: 0x4C,
    # Media / special
    Key.VOLUME_UP: 0x48,
    Key.VOLUME_DOWN: 0x49,
    Key.MUTE: 0x4A,
    Key.CAPS_LOCK: 0x39,
    Key.INSERT: 0x72,  # Help/Insert
}

_KEYS_BY_CODE: dict[int, Key] = {code: key for key, code in _KEYCODES.items()}


def key_to_keycode(key: Key) -> int | None:
    """The macOS virtual keycode of ``key``, or None if it has none."""
    return _KEYCODES.get(key)


def keycode_to_key(keycode: int) -> Key | None:
    """The key for a macOS virtual keycode, or None if none maps to it."""
    return _KEYS_BY_CODE.get(keycode)