"""Key remaps: one key event rewritten as another before binding lookup."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from awase.condition import Condition
from awase.hotkey import Hotkey


@dataclass(frozen=True)
class KeyRemap:
    """Turns the hotkey ``from_`` into ``to``, optionally under a condition."""

    from_: Hotkey
    to: Hotkey
    condition: Condition | None = None

    def with_condition(self, condition: Condition) -> KeyRemap:
        """A copy that applies only when ``condition`` matches."""
        return replace(self, condition=condition)

    def to_dict(self) -> dict[str, Any]:
        """Serialized form; the condition is left out when not set."""
        data: dict[str, Any] = {"from": self.from_.to_dict(), "to": self.to.to_dict()}
        if self.condition is not None:
            data["condition"] = self.condition.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KeyRemap:
        """Build a remap from its serialized form."""
        if not isinstance(data, Mapping):
            raise ValueError("a remap is a mapping")
        for name in ("from", "to"):
            if name not in data:
                raise ValueError(f"missing remap field: {name}")
        raw_condition = data.get("condition")
        condition = None if raw_condition is None else Condition.from_dict(raw_condition)
        return cls(
            from_=Hotkey.from_dict(data["from"]),
            to=Hotkey.from_dict(data["to"]),
            condition=condition,
        )