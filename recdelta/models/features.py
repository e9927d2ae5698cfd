"""Program feature records.

A program is a tree of features.  Ingestion produces flat
:class:`FeatureRecord` rows, one per feature, linked to their parent by id;
the assembled hierarchy is a :class:`Program` whose root :class:`Feature`
holds its subfeatures.  Reading either shape from text is left to the caller.
"""

from __future__ import annotations

from datetime import datetime
from operator import attrgetter

from recdelta.delta.fields import delta_field, unordered_by
from recdelta.delta.record import DeltaRecord, delta_record


@delta_record
class FeatureRecord(DeltaRecord):
    """One flat feature row as ingested, before the hierarchy is assembled."""

    id: str
    parent_id: str | None  # None for a program's root feature
    program_id: str
    progress_status: str  # e.g. "Complete", "In_Progress"
    assigned_team: str
    start_date: datetime
    end_date: datetime

    def is_root(self) -> bool:
        return self.parent_id is None


@delta_record
class Feature(DeltaRecord):
    """A feature and its subfeatures.

    Subfeature order carries no meaning: two features whose subfeatures hold
    the same items in a different order are equal.  A change anywhere below
    this feature is reported as a single ``subfeatures`` FieldChange.
    """

    id: str
    progress_status: str
    assigned_team: str
    start_date: datetime
    end_date: datetime
    subfeatures: tuple[Feature, ...] = delta_field(
        default=(),
        compare_with=unordered_by(attrgetter("start_date")),
    )

    def ordered_subfeatures(self) -> tuple[Feature, ...]:
        """Subfeatures sorted by start date."""
        return tuple(sorted(self.subfeatures, key=attrgetter("start_date")))


@delta_record
class Program(DeltaRecord):
    """A program identified by id, rooted at a single feature."""

    id: str
    root: Feature
