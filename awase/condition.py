"""Conditions that decide when a binding is active."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_FIELDS = ("app", "app_exclude", "title", "display")


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _pattern_matches(pattern: str, value: str) -> bool:
    """Pipe-separated alternatives, each a case-insensitive substring."""
    haystack = _ascii_lower(value)
    return any(_ascii_lower(alt.strip()) in haystack for alt in pattern.split("|"))


@dataclass
class MatchContext:
    """The current system state that conditions are checked against."""

    focused_app_bundle_id: str | None = None
    focused_window_title: str | None = None
    display_index: int = 0


@dataclass(frozen=True)
class Condition:
    """When a binding is active.

    ``None`` fields match anything; the fields that are set must all match.
    """

    app: str | None = None
    app_exclude: str | None = None
    title: str | None = None
    display: int | None = None

    def matches(self, ctx: MatchContext) -> bool:
        """True if every specified condition holds in ``ctx``."""
        bundle_id = ctx.focused_app_bundle_id

        if self.app is not None:
            if bundle_id is None or not _pattern_matches(self.app, bundle_id):
                return False

        if self.app_exclude is not None and bundle_id is not None:
            if _pattern_matches(self.app_exclude, bundle_id):
                return False

        if self.title is not None:
            title = ctx.focused_window_title
            if title is None or not _pattern_matches(self.title, title):
                return False

        if self.display is not None and ctx.display_index != self.display:
            return False

        return True

    def to_dict(self) -> dict[str, Any]:
        """Serialized form, leaving out fields that are not set."""
        return {
            name: getattr(self, name)
            for name in _FIELDS
            if getattr(self, name) is not None
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Condition:
        """Build a condition from its serialized form; absent fields are None."""
        if not isinstance(data, Mapping):
            raise ValueError("a condition is a mapping")
        values = {name: data.get(name) for name in _FIELDS}
        for name in ("app", "app_exclude", "title"):
            if values[name] is not None and not isinstance(values[name], str):
                raise ValueError(f"condition field {name!r} must be a string")
        display = values["display"]
        if display is not None and (
            isinstance(display, bool) or not isinstance(display, int) or display < 0
        ):
            raise ValueError("condition field 'display' must be a non-negative integer")
        return cls(**values)