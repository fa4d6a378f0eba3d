"""Error types raised by the observer core."""


class ObserverCoreError(Exception):
    """Base type for observer core failures."""


class InvalidObserverError(ObserverCoreError, TypeError):
    """Raised when an object without a callable ``update`` is attached."""


class ConfigError(ObserverCoreError):
    """Raised when event manager settings cannot be loaded or validated."""
