"""Delta engine: field-level comparison of two records of the same type.

For each declared field the engine compares old and new with that field's
comparator and collects a FieldChange for every field that differs.  An
empty result means "no difference" and is returned as ``None``; otherwise
the caller receives a fresh ChangeSet in field declaration order.

The engine holds no mutable state, performs no I/O and never retains or
mutates its inputs, so a single instance can be shared across threads.
"""

from __future__ import annotations

from typing import Any, TypeVar

from recdelta.delta.fields import FieldSpec, ensure_record, record_fields
from recdelta.errors import RecordTypeMismatchError
from recdelta.models.changes import ChangeSet, FieldChange
from recdelta.models.config import DeltaConfig
from recdelta.observability.logging import get_logger

_logger = get_logger("delta.engine")

R = TypeVar("R")


def _preview(value: Any, limit: int) -> str:
    text = repr(value)
    if len(text) <= limit:
        return text
    if limit <= len("..."):
        return text[: max(limit, 0)]
    return text[: limit - 3] + "..."


class DeltaEngine:
    """Computes change-sets between two records of one dataclass type."""

    def __init__(self, config: DeltaConfig | None = None) -> None:
        self.config = config or DeltaConfig()

    def equals(self, old: R, new: R) -> bool:
        """Whole-record equality, stopping at the first differing field."""
        specs = self._fields_for(old, new)
        return not any(spec.differs(old, new) for spec in specs)

    def delta(self, old: R, new: R) -> ChangeSet | None:
        """Return the fields that differ between ``old`` and ``new``, or None if none do."""
        specs = self._fields_for(old, new)
        record_type = type(old).__qualname__

        change_set = ChangeSet._from_comparison(
            (
                FieldChange(field_name=spec.name, old_value=getattr(old, spec.name), new_value=getattr(new, spec.name))
                for spec in specs
                if spec.differs(old, new)
            ),
            record_type=record_type,
        )

        if change_set is not None and self.config.log_changes:
            self._log_change_set(change_set)
        return change_set

    def _fields_for(self, old: object, new: object) -> tuple[FieldSpec, ...]:
        ensure_record(old)
        ensure_record(new)
        if type(old) is not type(new):
            raise RecordTypeMismatchError(type(old), type(new))
        return record_fields(type(old))

    def _log_change_set(self, change_set: ChangeSet) -> None:
        limit = self.config.max_logged_value_chars
        _logger.debug(
            "record_delta",
            record_type=change_set.record_type,
            changed_fields=list(change_set.field_names),
            changes=[
                {"field": c.field_name, "old": _preview(c.old_value, limit), "new": _preview(c.new_value, limit)}
                for c in change_set
            ],
        )


_default_engine = DeltaEngine()


def equals(old: R, new: R) -> bool:
    """Whole-record equality using the default engine."""
    return _default_engine.equals(old, new)


def delta(old: R, new: R) -> ChangeSet | None:
    """Compute the change-set between two records using the default engine."""
    return _default_engine.delta(old, new)
