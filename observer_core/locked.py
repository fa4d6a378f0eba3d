"""Event manager variant that can be shared between threads."""

from __future__ import annotations

import threading
from typing import Any, Iterable

from .config import EventManagerSettings
from .filters import TypeFilter
from .manager import EventManager

__all__ = ["LockedEventManager"]


class LockedEventManager(EventManager):
    """EventManager whose registrations are guarded by a re-entrant lock.

    ``notify`` only holds the lock while copying the observer order;
    observers run unlocked and may attach or detach from their ``update``.
    """

    def __init__(
        self,
        subject: Any,
        observers: Iterable[Any] = (),
        *,
        settings: EventManagerSettings | None = None,
    ) -> None:
        self._lock = threading.RLock()
        super().__init__(subject, observers, settings=settings)

    def attach(self, observer: Any, priority: int | None = None) -> None:
        with self._lock:
            super().attach(observer, priority)

    def detach(self, observer: Any) -> Any | None:
        with self._lock:
            return super().detach(observer)

    def detach_all(self, observer: Any) -> list[Any]:
        with self._lock:
            return super().detach_all(observer)

    def get_attached(self, type_filter: TypeFilter | None = None) -> list[Any]:
        with self._lock:
            return super().get_attached(type_filter)

    def has_observer(self, observer: Any) -> bool:
        with self._lock:
            return super().has_observer(observer)

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()

    def __contains__(self, observer: object) -> bool:
        with self._lock:
            return super().__contains__(observer)
