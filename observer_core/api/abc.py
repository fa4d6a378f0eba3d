"""Capability interfaces for subjects and observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from observer_core.config import EventManagerSettings
    from observer_core.manager import EventManager


@runtime_checkable
class Observer(Protocol):
    """Anything that can receive ``update(subject, event, context)``."""

    def update(self, subject: Any, event: str, context: Any = None) -> bool: ...


class AbstractObserver(ABC):
    """Base class for observers.

    ``update`` returns ``True`` when the observer fully handled the event,
    which stops ``notify(..., halt_on_first=True)``.
    """

    @abstractmethod
    def update(self, subject: Any, event: str, context: Any = None) -> bool:
        """React to ``event`` raised by ``subject``."""


class AbstractSubject(ABC):
    """Base class for subjects that own their event manager.

    The manager is created on first access and bound to ``self``.
    """

    _event_manager: "EventManager | None" = None
    event_settings: "EventManagerSettings | None" = None

    @property
    def event_manager(self) -> "EventManager":
        if self._event_manager is None:
            from observer_core.manager import EventManager

            self._event_manager = EventManager(self, settings=self.event_settings)
        return self._event_manager

    def get_event_manager(self) -> "EventManager":
        return self.event_manager

    def dispatch(
        self,
        event: str,
        context: Any = None,
        halt_on_first: bool = False,
    ) -> list[bool]:
        """Notify this subject's observers of ``event``."""

        return self.event_manager.notify(event, context, halt_on_first)
