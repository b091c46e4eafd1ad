"""Registration of global hotkeys by ID."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from awase.errors import AlreadyRegisteredError
from awase.hotkey import Hotkey

_log = logging.getLogger(__name__)


class HotkeyManager(ABC):
    """Registers and unregisters global hotkeys, tracked by an integer ID."""

    @abstractmethod
    def register(self, id: int, hotkey: Hotkey) -> None:  # noqa: A002
        """Register ``hotkey`` under ``id``; raise AlreadyRegisteredError if taken."""

    @abstractmethod
    def unregister(self, id: int) -> None:  # noqa: A002
        """Unregister the hotkey registered under ``id``."""


class NoopManager(HotkeyManager):
    """A manager with no side effects beyond tracking IDs."""

    def __init__(self) -> None:
        self._registered: set[int] = set()

    def __contains__(self, id: object) -> bool:  # noqa: A002
        return id in self._registered

    def __len__(self) -> int:
        return len(self._registered)

    def register(self, id: int, hotkey: Hotkey) -> None:  # noqa: A002
        if id in self._registered:
            raise AlreadyRegisteredError(id)
        self._registered.add(id)
        _log.debug("noop: registered hotkey id=%s", id)

    def unregister(self, id: int) -> None:  # noqa: A002
        self._registered.discard(id)
        _log.debug("noop: unregistered hotkey id=%s", id)