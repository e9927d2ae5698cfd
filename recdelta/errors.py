"""Exception types raised by recdelta.

Comparing two well-formed records of the same type never fails.  These
errors only signal misuse: mixing record types, passing something that is
not a record, or hand-building a change-set that breaks its invariants.
"""

from __future__ import annotations


class RecDeltaError(Exception):
    """Base class for every recdelta error."""


class ChangeSetError(RecDeltaError, ValueError):
    """Raised when a ChangeSet would violate its invariants."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class NotARecordError(RecDeltaError, TypeError):
    """Raised when an operand is not a dataclass record."""

    def __init__(self, value: object) -> None:
        value_type = value if isinstance(value, type) else type(value)
        super().__init__(f"{value_type.__qualname__} is not a dataclass record")
        self.value_type = value_type


class RecordTypeMismatchError(RecDeltaError, TypeError):
    """Raised when old and new are instances of different record types."""

    def __init__(self, old_type: type, new_type: type) -> None:
        super().__init__(
            f"Cannot compare {old_type.__qualname__} with {new_type.__qualname__}: "
            "both records must be of the same type"
        )
        self.old_type = old_type
        self.new_type = new_type
