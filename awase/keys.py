"""Keyboard keys, their canonical names and the aliases accepted when parsing."""

from __future__ import annotations

from enum import Enum

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class Key(Enum):
    """A keyboard key. The value is the key's serialized name."""

    # Letters
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

    # Numbers
    NUM0 = "Num0"
    NUM1 = "Num1"
    NUM2 = "Num2"
    NUM3 = "Num3"
    NUM4 = "Num4"
    NUM5 = "Num5"
    NUM6 = "Num6"
    NUM7 = "Num7"
    NUM8 = "Num8"
    NUM9 = "Num9"

    # Function keys
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"

    # Whitespace / control
    SPACE = "Space"
    RETURN = "Return"
    ESCAPE = "Escape"
    TAB = "Tab"
    BACKSPACE = "Backspace"
    DELETE = "Delete"

    # Navigation
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"

    # Punctuation / symbols
    GRAVE = "Grave"
    MINUS = "Minus"
    EQUAL = "Equal"
    LEFT_BRACKET = "LeftBracket"
    RIGHT_BRACKET = "RightBracket"
    BACKSLASH = "Backslash"
    SEMICOLON = "Semicolon"
    QUOTE = "Quote"
    COMMA = "Comma"
    PERIOD = "Period"
    SLASH = "Slash"

    # Numpad
    NUMPAD0 = "Numpad0"
    NUMPAD1 = "Numpad1"
    NUMPAD2 = "Numpad2"
    NUMPAD3 = "Numpad3"
    NUMPAD4 = "Numpad4"
    NUMPAD5 = "Numpad5"
    NUMPAD6 = "Numpad6"
    NUMPAD7 = "Numpad7"
    NUMPAD8 = "Numpad8"
    NUMPAD9 = "Numpad9"
    NUMPAD_ADD = "NumpadAdd"
    NUMPAD_SUBTRACT = "NumpadSubtract"
    NUMPAD_MULTIPLY = "NumpadMultiply"
    NUMPAD_DIVIDE = "NumpadDivide"
    NUMPAD_DECIMAL = "NumpadDecimal"
    NUMPAD_ENTER = "NumpadEnter"

    # Media / special
    VOLUME_UP = "VolumeUp"
    VOLUME_DOWN = "VolumeDown"
    MUTE = "Mute"
    BRIGHTNESS_UP = "BrightnessUp"
    BRIGHTNESS_DOWN = "BrightnessDown"
    PLAY_PAUSE = "PlayPause"
    NEXT_TRACK = "NextTrack"
    PREVIOUS_TRACK = "PreviousTrack"
    PRINT_SCREEN = "PrintScreen"
    INSERT = "Insert"
    PAUSE = "Pause"
    CAPS_LOCK = "CapsLock"
    NUM_LOCK = "NumLock"
    SCROLL_LOCK = "ScrollLock"

    # Mouse buttons
    MOUSE_LEFT = "MouseLeft"
    MOUSE_RIGHT = "MouseRight"
    MOUSE_MIDDLE = "MouseMiddle"
    MOUSE_BUTTON4 = "MouseButton4"
    MOUSE_BUTTON5 = "MouseButton5"

    @classmethod
    def parse(cls, text: str) -> Key | None:
        """Look up a key by name or alias, ignoring ASCII case; None if unknown."""
        return _BY_NAME.get(_ascii_lower(text))

    def __str__(self) -> str:
        return _DISPLAY[self]


_DIGITS = {getattr(Key, f"NUM{d}"): str(d) for d in range(10)}

_DISPLAY: dict[Key, str] = {
    key: _DIGITS.get(key, key.value.lower()) for key in Key
}

_ALIASES: dict[Key, tuple[str, ...]] = {
    Key.RETURN: ("enter",),
    Key.ESCAPE: ("esc",),
    Key.BACKSPACE: ("bs",),
    Key.DELETE: ("del",),
    Key.PAGE_UP: ("page_up", "pgup"),
    Key.PAGE_DOWN: ("page_down", "pgdn"),
    Key.GRAVE: ("`", "backtick"),
    Key.MINUS: ("-",),
    Key.EQUAL: ("equals", "="),
    Key.LEFT_BRACKET: ("left_bracket", "["),
    Key.RIGHT_BRACKET: ("right_bracket", "]"),
    Key.BACKSLASH: ("\\",),
    Key.SEMICOLON: (";",),
    Key.QUOTE: ("'",),
    Key.COMMA: (",",),
    Key.PERIOD: (".",),
    Key.SLASH: ("/",),
    **{getattr(Key, f"NUMPAD{d}"): (f"kp{d}",) for d in range(10)},
    Key.NUMPAD_ADD: ("kp_add", "kp+"),
    Key.NUMPAD_SUBTRACT: ("kp_subtract", "kp-"),
    Key.NUMPAD_MULTIPLY: ("kp_multiply", "kp*"),
    Key.NUMPAD_DIVIDE: ("kp_divide", "kp/"),
    Key.NUMPAD_DECIMAL: ("kp_decimal", "kp."),
    Key.NUMPAD_ENTER: ("kp_enter",),
    Key.VOLUME_UP: ("volume_up",),
    Key.VOLUME_DOWN: ("volume_down",),
    Key.BRIGHTNESS_UP: ("brightness_up",),
    Key.BRIGHTNESS_DOWN: ("brightness_down",),
    Key.PLAY_PAUSE: ("play_pause", "play"),
    Key.NEXT_TRACK: ("next_track", "next"),
    Key.PREVIOUS_TRACK: ("previous_track", "prev", "previous"),
    Key.PRINT_SCREEN: ("print_screen", "prtsc"),
    Key.INSERT: ("ins",),
    Key.PAUSE: ("break",),
    Key.CAPS_LOCK: ("caps_lock", "caps"),
    Key.NUM_LOCK: ("num_lock",),
    Key.SCROLL_LOCK: ("scroll_lock",),
    Key.MOUSE_LEFT: ("mouse_left", "mouse1"),
    Key.MOUSE_RIGHT: ("mouse_right", "mouse2"),
    Key.MOUSE_MIDDLE: ("mouse_middle", "mouse3"),
    Key.MOUSE_BUTTON4: ("mouse_button4", "mouse4"),
    Key.MOUSE_BUTTON5: ("mouse_button5", "mouse5"),
}

_BY_NAME: dict[str, Key] = {name: key for key, name in _DISPLAY.items()}
_BY_NAME.update(
    (alias, key) for key, aliases in _ALIASES.items() for alias in aliases
)