"""Actions performed when a hotkey fires."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ActionKind(Enum):
    """The kind of an action; the value is its serialized tag."""

    COMMAND = "Command"
    MODE_SWITCH = "ModeSwitch"
    EXEC = "Exec"
    SCRIPT = "Script"
    CHAIN = "Chain"


ActionValue = Union[str, "tuple[Action, ...]"]


@dataclass(frozen=True)
class Action:
    """An action: a named command, mode switch, shell command, script or chain."""

    kind: ActionKind
    value: ActionValue

    def __post_init__(self) -> None:
        if self.kind is ActionKind.CHAIN:
            if isinstance(self.value, str):
                raise TypeError("a chain action holds a sequence of actions")
            actions = tuple(self.value)
            if not all(isinstance(a, Action) for a in actions):
                raise TypeError("a chain action holds only actions")
            object.__setattr__(self, "value", actions)
        elif not isinstance(self.value, str):
            raise TypeError(f"a {self.kind.value} action holds a string")

    @classmethod
    def command(cls, name: str) -> Action:
        """A named command that the consumer interprets."""
        return cls(ActionKind.COMMAND, name)

    @classmethod
    def mode_switch(cls, mode: str) -> Action:
        """Switch to another keybinding mode."""
        return cls(ActionKind.MODE_SWITCH, mode)

    @classmethod
    def exec(cls, cmd: str) -> Action:
        """Run a shell command."""
        return cls(ActionKind.EXEC, cmd)

    @classmethod
    def script(cls, code: str) -> Action:
        """Evaluate a script."""
        return cls(ActionKind.SCRIPT, code)

    @classmethod
    def chain(cls, actions: Iterable[Action]) -> Action:
        """Several actions performed in sequence."""
        return cls(ActionKind.CHAIN, tuple(actions))

    def is_mode_switch(self) -> bool:
        """True if this is a mode switch action."""
        return self.kind is ActionKind.MODE_SWITCH

    def to_dict(self) -> dict[str, Any]:
        """Externally tagged form, e.g. {"Command": "name"}."""
        if self.kind is ActionKind.CHAIN:
            return {self.kind.value: [a.to_dict() for a in self.value]}
        return {self.kind.value: self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Action:
        """Build an action from its externally tagged form."""
        if not isinstance(data, Mapping) or len(data) != 1:
            raise ValueError("an action is a mapping with exactly one tag")
        ((tag, payload),) = data.items()
        try:
            kind = ActionKind(tag)
        except ValueError:
            raise ValueError(f"unknown action variant: {tag!r}") from None
        if kind is ActionKind.CHAIN:
            if not isinstance(payload, list):
                raise ValueError("a Chain action expects a list")
            return cls.chain(cls.from_dict(item) for item in payload)
        if not isinstance(payload, str):
            raise ValueError(f"a {tag} action expects a string")
        return cls(kind, payload)