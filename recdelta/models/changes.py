"""Change-set data structures produced by the delta engine."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from recdelta.errors import ChangeSetError


@dataclass(frozen=True)
class FieldChange:
    """One field whose value differs between two records of the same type."""

    field_name: str
    old_value: Any
    new_value: Any

    def inverted(self) -> FieldChange:
        """Return the change as seen when comparing new against old."""
        return FieldChange(field_name=self.field_name, old_value=self.new_value, new_value=self.old_value)

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field_name, "old": self.old_value, "new": self.new_value}


@dataclass(frozen=True)
class ChangeSet:
    """Ordered field-level differences between two records.

    Entries follow the record's field declaration order.  A ChangeSet is
    never empty: "no difference" is expressed by the engine returning
    ``None``.  Field names are unique and every entry carries old and new
    values that its field comparator judged different.
    """

    changes: tuple[FieldChange, ...]
    record_type: str = ""
    _index: dict[str, FieldChange] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._populate(self.changes, check_values=True)

    def _populate(self, changes: Iterable[FieldChange], check_values: bool) -> None:
        changes = tuple(changes)
        if not changes:
            raise ChangeSetError("A ChangeSet must contain at least one FieldChange")

        index: dict[str, FieldChange] = {}
        for change in changes:
            if change.field_name in index:
                raise ChangeSetError(
                    f"Duplicate entry for field '{change.field_name}'", field_name=change.field_name
                )
            if check_values and (change.old_value is change.new_value or change.old_value == change.new_value):
                raise ChangeSetError(
                    f"Field '{change.field_name}' has equal old and new values", field_name=change.field_name
                )
            index[change.field_name] = change

        # frozen dataclass: normalise the sequence and build the lookup once
        object.__setattr__(self, "changes", changes)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_changes(cls, changes: Iterable[FieldChange], record_type: str = "") -> ChangeSet | None:
        """Build a ChangeSet, or return None when there are no changes."""
        collected = tuple(changes)
        if not collected:
            return None
        return cls(changes=collected, record_type=record_type)

    @classmethod
    def _from_comparison(cls, changes: Iterable[FieldChange], record_type: str = "") -> ChangeSet | None:
        """Build a ChangeSet from changes a field comparator already judged different.

        Skips the ``==`` check on values: a comparator stricter than ``==``
        (type-strict, identity) may report values that compare equal.
        """
        collected = tuple(changes)
        if not collected:
            return None
        change_set = cls.__new__(cls)
        object.__setattr__(change_set, "record_type", record_type)
        change_set._populate(collected, check_values=False)
        return change_set

    def __iter__(self) -> Iterator[FieldChange]:
        return iter(self.changes)

    def __len__(self) -> int:
        return len(self.changes)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._index

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(change.field_name for change in self.changes)

    def get(self, field_name: str) -> FieldChange | None:
        """Return the change for ``field_name``, or None if it did not change."""
        return self._index.get(field_name)

    def inverted(self) -> ChangeSet:
        """Return the change-set for the reverse comparison (old and new swapped)."""
        inverted = ChangeSet._from_comparison((c.inverted() for c in self.changes), record_type=self.record_type)
        assert inverted is not None
        return inverted

    def to_list(self) -> list[dict[str, Any]]:
        return [c.to_dict() for c in self.changes]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary with a stable key and entry order for serialization."""
        return {
            "record_type": self.record_type,
            "change_count": len(self.changes),
            "changes": self.to_list(),
        }
