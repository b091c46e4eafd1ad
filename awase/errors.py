"""Exceptions raised by the hotkey system."""

from __future__ import annotations

from typing import Any


class AwaseError(Exception):
    """Base class for every error raised by this package."""


class InvalidHotkeyError(AwaseError, ValueError):
    """The hotkey string could not be parsed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid hotkey: {reason}")
        self.reason = reason


class AlreadyRegisteredError(AwaseError):
    """A hotkey with this ID is already registered."""

    def __init__(self, hotkey_id: int) -> None:
        super().__init__(f"hotkey already registered: id={hotkey_id}")
        self.hotkey_id = hotkey_id


class ModeNotFoundError(AwaseError, LookupError):
    """The requested mode does not exist."""

    def __init__(self, mode: str) -> None:
        super().__init__(f"mode not found: {mode}")
        self.mode = mode


class DuplicateBindingError(AwaseError):
    """A duplicate binding was detected in the same mode."""

    def __init__(self, mode: str, hotkey: Any) -> None:
        super().__init__(f"duplicate binding for {hotkey} in mode '{mode}'")
        self.mode = mode
        self.hotkey = str(hotkey)


class PermissionDeniedError(AwaseError, PermissionError):
    """Accessibility or input monitoring permissions were not granted."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"permission denied: {reason}")
        self.reason = reason

    def __str__(self) -> str:
        return str(self.args[0])


class PlatformError(AwaseError):
    """A platform-specific error."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"platform error: {reason}")
        self.reason = reason