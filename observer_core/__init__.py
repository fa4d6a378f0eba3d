"""Priority-ordered observer registry for in-process event dispatch."""

from .api import AbstractObserver, AbstractSubject, Observer
from .config import EventManagerSettings, default_config_path
from .errors import ConfigError, InvalidObserverError, ObserverCoreError
from .filters import matches_type, type_name
from .locked import LockedEventManager
from .manager import EventManager

__all__ = [
    "AbstractObserver",
    "AbstractSubject",
    "Observer",
    "EventManager",
    "LockedEventManager",
    "EventManagerSettings",
    "default_config_path",
    "ObserverCoreError",
    "InvalidObserverError",
    "ConfigError",
    "matches_type",
    "type_name",
]
