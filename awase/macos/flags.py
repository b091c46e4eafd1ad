"""Conversion between macOS CGEventFlags bitmasks and modifier sets.

CGEventFlags bit layout:
  Cmd:   0x0010_0000 (device flags: left 0x08, right 0x10)
  Shift: 0x0002_0000 (device flags: left 0x02, right 0x04)
  Alt:   0x0008_0000 (device flags: left 0x20, right 0x40)
  Ctrl:  0x0004_0000 (device flags: left 0x01, right 0x2000)
  Fn:    0x0080_0000
"""

from __future__ import annotations

from awase.hotkey import Modifiers

# (modifier, main flag, left device flag, right device flag)
_MODIFIER_MASKS: tuple[tuple[Modifiers, int, int, int], ...] = (
    (Modifiers.CMD, 0x0010_0000, 0x0000_0008, 0x0000_0010),
    (Modifiers.SHIFT, 0x0002_0000, 0x0000_0002, 0x0000_0004),
    (Modifiers.ALT, 0x0008_0000, 0x0000_0020, 0x0000_0040),
    (Modifiers.CTRL, 0x0004_0000, 0x0000_0001, 0x0000_2000),
    (Modifiers.FN, 0x0080_0000, 0x0080_0000, 0x0080_0000),
)


def cg_flags_to_modifiers(flags: int) -> Modifiers:
    """Modifiers set in a raw CGEventFlags bitmask.

    A modifier counts as set if its main flag or either of its left/right
    device-dependent flags is present.
    """
    out = Modifiers.NONE
    for modifier, *masks in _MODIFIER_MASKS:
        if any(mask and (flags & mask) == mask for mask in masks):
            out |= modifier
    return out


def modifiers_to_cg_flags(modifiers: Modifiers) -> int:
    """A raw CGEventFlags bitmask using the main flag of each modifier."""
    flags = 0
    for modifier, main, _left, _right in _MODIFIER_MASKS:
        if modifiers.contains(modifier):
            flags |= main
    return flags