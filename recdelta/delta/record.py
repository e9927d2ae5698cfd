"""Base class and decorator for delta-aware dataclass records."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Self, TypeVar, overload

from recdelta.delta.engine import delta as _delta
from recdelta.delta.engine import equals as _equals
from recdelta.delta.fields import record_fields, same_value
from recdelta.models.changes import ChangeSet

T = TypeVar("T", bound=type)


class DeltaRecord:
    """Mixin making a dataclass record Comparable and Delta-capable.

    ``==``, :meth:`equals` and :meth:`delta` all go through the per-field
    comparators, so declare subclasses with :func:`delta_record` (or
    ``@dataclass(eq=False)``) to keep the generated ``__eq__`` out of the way.
    """

    __slots__ = ()

    def equals(self, other: Self) -> bool:
        return _equals(self, other)

    def delta(self, other: Self) -> ChangeSet | None:
        """Changes that turn ``self`` into ``other``."""
        return _delta(self, other)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _equals(self, other)

    def __hash__(self) -> int:
        specs = record_fields(type(self))
        if any(spec.comparator is not same_value for spec in specs):
            raise TypeError(f"unhashable record type: '{type(self).__qualname__}' uses custom field comparators")
        return hash((type(self), *(getattr(self, spec.name) for spec in specs)))


@overload
def delta_record(cls: T, /) -> T: ...


@overload
def delta_record(cls: None = None, /, **kwargs: Any) -> Callable[[T], T]: ...


def delta_record(cls: Any = None, /, **kwargs: Any) -> Any:
    """Turn a DeltaRecord subclass into a frozen dataclass whose equality uses its comparators."""
    kwargs.setdefault("frozen", True)
    kwargs["eq"] = False

    def wrap(klass: T) -> T:
        if not issubclass(klass, DeltaRecord):
            raise TypeError(f"{klass.__qualname__} must subclass DeltaRecord")
        record_type = dataclasses.dataclass(klass, **kwargs)
        if not kwargs["frozen"]:
            # mutable records follow the dataclass rule: eq without frozen means unhashable
            record_type.__hash__ = None  # type: ignore[assignment]
        return record_type  # type: ignore[return-value]

    if cls is None:
        return wrap
    return wrap(cls)
