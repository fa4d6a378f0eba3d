"""Concrete-type identifiers used to filter attached observers."""

from __future__ import annotations

from typing import Any, Type, Union

TypeFilter = Union[Type[Any], str]

__all__ = ["TypeFilter", "type_name", "is_type_filter", "matches_type"]


def type_name(cls: Type[Any]) -> str:
    """Return the ``module.QualName`` identifier for ``cls``."""

    return f"{cls.__module__}.{cls.__qualname__}"


def is_type_filter(value: Any) -> bool:
    return isinstance(value, (type, str))


def matches_type(observer: Any, type_filter: TypeFilter) -> bool:
    """Check whether the concrete class of ``observer`` is ``type_filter``.

    Classes are compared by identity, so subclasses never match their
    parents. Strings match either the fully qualified name or the bare
    ``__qualname__``.
    """

    cls = type(observer)
    if isinstance(type_filter, type):
        return cls is type_filter
    return type_filter in (type_name(cls), cls.__qualname__)
