"""Public interfaces for observer core integrations."""

from .abc import AbstractObserver, AbstractSubject, Observer

__all__ = ["AbstractObserver", "AbstractSubject", "Observer"]
