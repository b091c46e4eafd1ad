"""Modifier flags and hotkeys, with parsing in plus and skhd formats."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from awase.errors import InvalidHotkeyError
from awase.keys import Key

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_MAX_BITS = 0xFF


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


@dataclass(frozen=True)
class Modifiers:
    """A set of modifier keys stored as a bitmask."""

    value: int = 0

    NONE: ClassVar[Modifiers]
    CMD: ClassVar[Modifiers]
    CTRL: ClassVar[Modifiers]
    ALT: ClassVar[Modifiers]
    SHIFT: ClassVar[Modifiers]
    FN: ClassVar[Modifiers]
    CAPS_LOCK: ClassVar[Modifiers]
    HYPER: ClassVar[Modifiers]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("modifier bits must be an integer")
        if not 0 <= self.value <= _MAX_BITS:
            raise ValueError(f"modifier bits out of range: {self.value}")

    def contains(self, other: Modifiers) -> bool:
        """True if every flag of ``other`` is set in this set."""
        return (self.value & other.value) == other.value

    def is_empty(self) -> bool:
        """True if no modifier flag is set."""
        return self.value == 0

    def bits(self) -> int:
        """The raw bitmask."""
        return self.value

    @classmethod
    def from_bits(cls, bits: int) -> Modifiers:
        """Build a modifier set from a raw bitmask."""
        return cls(bits)

    def __or__(self, other: Modifiers) -> Modifiers:
        if not isinstance(other, Modifiers):
            return NotImplemented
        return Modifiers(self.value | other.value)

    def __and__(self, other: Modifiers) -> Modifiers:
        if not isinstance(other, Modifiers):
            return NotImplemented
        return Modifiers(self.value & other.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return "+".join(name for flag, name in _DISPLAY_ORDER if self.contains(flag))


Modifiers.NONE = Modifiers(0)
Modifiers.CMD = Modifiers(1 << 0)
Modifiers.CTRL = Modifiers(1 << 1)
Modifiers.ALT = Modifiers(1 << 2)
Modifiers.SHIFT = Modifiers(1 << 3)
Modifiers.FN = Modifiers(1 << 4)
Modifiers.CAPS_LOCK = Modifiers(1 << 5)
Modifiers.HYPER = Modifiers(0b0000_1111)

_DISPLAY_ORDER: tuple[tuple[Modifiers, str], ...] = (
    (Modifiers.CMD, "cmd"),
    (Modifiers.CTRL, "ctrl"),
    (Modifiers.ALT, "alt"),
    (Modifiers.SHIFT, "shift"),
    (Modifiers.FN, "fn"),
    (Modifiers.CAPS_LOCK, "caps_lock"),
)

_MODIFIER_NAMES: dict[str, Modifiers] = {
    **dict.fromkeys(("cmd", "command", "super", "meta", "lcmd", "rcmd"), Modifiers.CMD),
    **dict.fromkeys(("ctrl", "control", "lctrl", "rctrl"), Modifiers.CTRL),
    **dict.fromkeys(("alt", "option", "opt", "lalt", "ralt"), Modifiers.ALT),
    **dict.fromkeys(("shift", "lshift", "rshift"), Modifiers.SHIFT),
    "fn": Modifiers.FN,
    "hyper": Modifiers.HYPER,
    "caps_lock": Modifiers.CAPS_LOCK,
    "capslock": Modifiers.CAPS_LOCK,
}


def _parse_modifier(text: str) -> Modifiers | None:
    return _MODIFIER_NAMES.get(_ascii_lower(text))


def _parse_key(text: str) -> Key:
    key = Key.parse(text)
    if key is None:
        raise InvalidHotkeyError(f"unknown key: {text}")
    return key


@dataclass(frozen=True)
class Hotkey:
    """A combination of modifier keys and a single key."""

    modifiers: Modifiers
    key: Key

    @classmethod
    def parse(cls, text: str) -> Hotkey:
        """Parse ``"cmd+space"`` or skhd-style ``"ctrl + alt - space"``.

        Names are case-insensitive. Raises InvalidHotkeyError on bad input.
        """
        trimmed = text.strip()
        if not trimmed:
            raise InvalidHotkeyError("empty hotkey string")
        if " - " in trimmed:
            return cls._parse_skhd(trimmed)
        return cls._parse_plus(trimmed)

    @classmethod
    def _parse_plus(cls, text: str) -> Hotkey:
        parts = [part.strip() for part in text.split("+")]
        modifiers = Modifiers.NONE
        key_part: str | None = None

        for part in parts:
            modifier = _parse_modifier(part)
            if modifier is not None:
                modifiers |= modifier
            elif key_part is not None:
                raise InvalidHotkeyError(f"multiple keys in hotkey: {text}")
            else:
                key_part = part

        # A lone token such as "capslock" is both a modifier and a key.
        if key_part is None and len(parts) == 1 and Key.parse(parts[0]) is not None:
            key_part = parts[0]
            modifiers = Modifiers.NONE

        if key_part is None:
            raise InvalidHotkeyError(f"no key found in hotkey: {text}")

        return cls(modifiers, _parse_key(key_part))

    @classmethod
    def _parse_skhd(cls, text: str) -> Hotkey:
        modifier_str, key_str = (part.strip() for part in text.split(" - ", 1))
        if not key_str:
            raise InvalidHotkeyError(f"no key after ' - ' in: {text}")

        modifiers = Modifiers.NONE
        for chunk in modifier_str.split("+"):
            for part in chunk.split():
                modifier = _parse_modifier(part)
                if modifier is None:
                    raise InvalidHotkeyError(
                        f"unknown modifier '{part}' in skhd format: {text}"
                    )
                modifiers |= modifier

        return cls(modifiers, _parse_key(key_str))

    def display(self) -> str:
        """Human-readable form, e.g. ``"cmd+space"``, accepted by ``parse``."""
        if self.modifiers.is_empty():
            return str(self.key)
        return f"{self.modifiers}+{self.key}"

    def __str__(self) -> str:
        return self.display()

    def to_dict(self) -> dict[str, Any]:
        """Serialized form: ``{"modifiers": <bits>, "key": <name>}``."""
        return {"modifiers": self.modifiers.bits(), "key": self.key.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Hotkey:
        """Build a hotkey from its serialized form."""
        if not isinstance(data, Mapping):
            raise ValueError("a hotkey is a mapping")
        try:
            bits = data["modifiers"]
            key_name = data["key"]
        except KeyError as missing:
            raise ValueError(f"missing hotkey field: {missing.args[0]}") from None
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise ValueError("hotkey modifiers must be an integer")
        try:
            modifiers = Modifiers.from_bits(bits)
        except ValueError as exc:
            raise ValueError(str(exc)) from None
        try:
            key = Key(key_name)
        except ValueError:
            raise ValueError(f"unknown key variant: {key_name!r}") from None
        return cls(modifiers, key)