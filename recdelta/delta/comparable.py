"""Capability protocols implemented by delta-aware records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from recdelta.models.changes import ChangeSet


@runtime_checkable
class Comparable(Protocol):
    """A record supporting whole-value equality against its own type.

    ``equals`` must be reflexive, symmetric, transitive and free of side effects.
    """

    def equals(self, other: Self) -> bool: ...


@runtime_checkable
class Delta(Comparable, Protocol):
    """A Comparable record that can describe how it differs from another instance."""

    def delta(self, other: Self) -> ChangeSet | None: ...
