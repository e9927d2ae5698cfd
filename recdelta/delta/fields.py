"""Per-field comparators for dataclass records.

Every declared field of a record carries an equality function.  Whole-record
equality and change-set construction both read these comparators, so the two
can never disagree about whether a field changed.

A comparator is attached with :func:`delta_field`::

    @dataclass(frozen=True)
    class Contact(DeltaRecord):
        first_name: str
        email_address: str = delta_field(compare_with=casefolded)

Fields declared with ``compare=False`` are not part of the record's identity
and are skipped entirely.
"""

from __future__ import annotations

import dataclasses
import weakref
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from recdelta.errors import NotARecordError

Comparator = Callable[[Any, Any], bool]

COMPARATOR_KEY = "recdelta.compare_with"


@dataclass(frozen=True)
class FieldSpec:
    """A record field together with the equality used to compare it."""

    name: str
    comparator: Comparator

    def differs(self, old: object, new: object) -> bool:
        old_value = getattr(old, self.name)
        new_value = getattr(new, self.name)
        # a value always equals itself, even one like NaN whose == says otherwise
        if old_value is new_value:
            return False
        return not self.comparator(old_value, new_value)


def same_value(old: Any, new: Any) -> bool:
    """Default comparator: identity or ==, matching how containers compare items."""
    return old is new or old == new


def delta_field(*, compare_with: Comparator | None = None, **kwargs: Any) -> Any:
    """Declare a dataclass field with a custom per-field comparator.

    Accepts every keyword :func:`dataclasses.field` accepts.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if compare_with is not None:
        metadata[COMPARATOR_KEY] = compare_with
    return dataclasses.field(metadata=metadata, **kwargs)


def ensure_record(value: object) -> None:
    """Raise NotARecordError unless ``value`` is a dataclass instance."""
    if not dataclasses.is_dataclass(value) or isinstance(value, type):
        raise NotARecordError(value)


# keyed weakly so record types created at runtime can still be collected
_field_cache: weakref.WeakKeyDictionary[type, tuple[FieldSpec, ...]] = weakref.WeakKeyDictionary()


def record_fields(record_type: type) -> tuple[FieldSpec, ...]:
    """Return the comparable fields of ``record_type`` in declaration order."""
    specs = _field_cache.get(record_type)
    if specs is not None:
        return specs
    if not dataclasses.is_dataclass(record_type):
        raise NotARecordError(record_type)
    specs = tuple(
        FieldSpec(name=f.name, comparator=f.metadata.get(COMPARATOR_KEY, same_value))
        for f in dataclasses.fields(record_type)
        if f.compare
    )
    return _field_cache.setdefault(record_type, specs)


# ---------------------------------------------------------------------------
# Ready-made comparators
# ---------------------------------------------------------------------------


def casefolded(old: str | None, new: str | None) -> bool:
    """Case-insensitive string equality; None only equals None."""
    if old is None or new is None:
        return old is new
    return old.casefold() == new.casefold()


def unordered_by(key: Callable[[Any], Any]) -> Comparator:
    """Compare two sequences as equal when they hold the same items in any order.

    Both sides are sorted by ``key`` before an element-wise comparison, so
    items sharing a key must still appear in the same relative order.
    """

    def compare(old: Iterable[Any], new: Iterable[Any]) -> bool:
        return sorted(old, key=key) == sorted(new, key=key)

    compare.__qualname__ = f"unordered_by({getattr(key, '__name__', key)!r})"
    return compare
