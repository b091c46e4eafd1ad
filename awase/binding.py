"""Keybindings: a hotkey, the action it triggers and when it applies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from awase.action import Action
from awase.condition import Condition, MatchContext
from awase.hotkey import Hotkey


@dataclass(frozen=True)
class Binding:
    """A hotkey bound to an action, with a consume flag and optional condition."""

    hotkey: Hotkey
    action: Action
    consume: bool = True
    condition: Condition | None = None

    def with_consume(self, consume: bool) -> Binding:
        """A copy with the consume flag set."""
        return replace(self, consume=consume)

    def with_condition(self, condition: Condition) -> Binding:
        """A copy that applies only when ``condition`` matches."""
        return replace(self, condition=condition)

    def matches_context(self, ctx: MatchContext) -> bool:
        """True if the binding's condition holds; no condition always holds."""
        return self.condition is None or self.condition.matches(ctx)

    def to_dict(self) -> dict[str, Any]:
        """Serialized form; the condition is left out when not set."""
        data: dict[str, Any] = {
            "hotkey": self.hotkey.to_dict(),
            "action": self.action.to_dict(),
            "consume": self.consume,
        }
        if self.condition is not None:
            data["condition"] = self.condition.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Binding:
        """Build a binding; ``consume`` defaults to True, ``condition`` to None."""
        if not isinstance(data, Mapping):
            raise ValueError("a binding is a mapping")
        for name in ("hotkey", "action"):
            if name not in data:
                raise ValueError(f"missing binding field: {name}")
        consume = data.get("consume", True)
        if not isinstance(consume, bool):
            raise ValueError("binding field 'consume' must be a boolean")
        raw_condition = data.get("condition")
        condition = None if raw_condition is None else Condition.from_dict(raw_condition)
        return cls(
            hotkey=Hotkey.from_dict(data["hotkey"]),
            action=Action.from_dict(data["action"]),
            consume=consume,
            condition=condition,
        )