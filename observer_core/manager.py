"""Priority-ordered observer registry bound to a single subject."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .config import EventManagerSettings
from .errors import InvalidObserverError
from .filters import TypeFilter, is_type_filter, matches_type

__all__ = ["EventManager"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Registration:
    priority: int
    order: int
    observer: Any


def _sort_key(item: _Registration) -> tuple[int, int]:
    return (-item.priority, item.order)


class EventManager:
    """Attach observers to a subject and notify them in priority order.

    Higher priorities run first; observers sharing a priority run in the
    order they were attached. Each observer instance is attached at most
    once. ``notify`` works on a snapshot of the order taken when it starts,
    so observers that attach or detach during a pass only affect later
    passes.
    """

    def __init__(
        self,
        subject: Any,
        observers: Iterable[Any] = (),
        *,
        settings: EventManagerSettings | None = None,
    ) -> None:
        self._subject = subject
        self._settings = settings or EventManagerSettings()
        self._registrations: list[_Registration] = []
        self._sequence = 0
        for observer in observers:
            self.attach(observer)

    @property
    def subject(self) -> Any:
        return self._subject

    @property
    def settings(self) -> EventManagerSettings:
        return self._settings

    def get_subject(self) -> Any:
        """Return the subject this manager reports events for."""
        return self._subject

    def attach(self, observer: Any, priority: int | None = None) -> None:
        """Attach ``observer``; a no-op when it is already attached."""

        if not callable(getattr(observer, "update", None)):
            raise InvalidObserverError(
                f"{type(observer).__name__} does not provide a callable update()"
            )
        if priority is None:
            priority = self._settings.default_priority
        elif isinstance(priority, bool) or not isinstance(priority, int):
            raise TypeError("priority must be an integer")

        if self._find(observer) is not None:
            logger.debug("observer %r already attached, skipping", observer)
            return

        order = self._sequence
        self._sequence = order + 1
        self._registrations.append(
            _Registration(priority=priority, order=order, observer=observer)
        )
        self._registrations.sort(key=_sort_key)
        logger.debug("attached %r with priority %s", observer, priority)

    def detach(self, observer: Any) -> Any | None:
        """Detach ``observer`` by identity and return it, or ``None``."""

        index = self._find(observer)
        if index is None:
            return None
        del self._registrations[index]
        logger.debug("detached %r", observer)
        return observer

    def detach_all(self, observer: Any) -> list[Any]:
        """Detach every observer sharing the concrete class of ``observer``.

        ``observer`` is only used as a template; it does not need to be
        attached. A class or type name is accepted as well. Removed
        observers are returned in the order they would have been notified.
        """

        type_filter = observer if is_type_filter(observer) else type(observer)
        removed: list[Any] = []
        kept: list[_Registration] = []
        for registration in self._registrations:
            if matches_type(registration.observer, type_filter):
                removed.append(registration.observer)
            else:
                kept.append(registration)
        self._registrations = kept
        if removed:
            logger.debug("detached %d observer(s) matching %r", len(removed), type_filter)
        return removed

    def get_attached(self, type_filter: TypeFilter | None = None) -> list[Any]:
        """Return attached observers in notification order.

        With ``type_filter`` (a class or type name), only observers whose
        concrete class matches are returned.
        """

        if type_filter is None:
            return [registration.observer for registration in self._registrations]
        return [
            registration.observer
            for registration in self._registrations
            if matches_type(registration.observer, type_filter)
        ]

    def has_observer(self, observer: Any) -> bool:
        """Check for an attached instance, or for any observer of a type."""

        if is_type_filter(observer):
            return bool(self.get_attached(observer))
        return self._find(observer) is not None

    def notify(
        self,
        event: str,
        context: Any = None,
        halt_on_first: bool = False,
    ) -> list[bool]:
        """Send ``event`` to every attached observer and collect results.

        When ``halt_on_first`` is set, iteration stops at the first observer
        returning a truthy value and ``[True]`` is returned. Exceptions raised
        by observers propagate and end the pass.
        """

        observers = self._snapshot()
        logger.debug("notifying %d observer(s) of %r", len(observers), event)
        results: list[bool] = []
        for observer in observers:
            if self._settings.log_dispatch:
                logger.debug("dispatching %r to %r", event, observer)
            try:
                result = bool(observer.update(self._subject, event, context))
            except Exception:
                logger.debug("observer %r failed while handling %r", observer, event)
                raise
            if halt_on_first and result:
                logger.debug("%r handled by %r, halting", event, observer)
                return [result]
            results.append(result)
        return results

    def _snapshot(self) -> list[Any]:
        return self.get_attached()

    def _find(self, observer: Any) -> int | None:
        for index, registration in enumerate(self._registrations):
            if registration.observer is observer:
                return index
        return None

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, observer: object) -> bool:
        return self._find(observer) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._snapshot())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(subject={self._subject!r}, observers={len(self)})"
