"""recdelta: field-level change-sets between two records of the same type.

Example::

    from recdelta import DeltaRecord, delta_record

    @delta_record
    class Contact(DeltaRecord):
        first_name: str
        email_address: str

    old = Contact("Susan", "susan@example.com")
    new = Contact("Susan", "susan.b@example.com")
    old.delta(new)  # ChangeSet with one email_address FieldChange
    old.delta(old)  # None
"""

from recdelta.config import load_config
from recdelta.delta import (
    Comparable,
    Delta,
    DeltaEngine,
    DeltaRecord,
    FieldSpec,
    casefolded,
    delta,
    delta_field,
    delta_record,
    equals,
    record_fields,
    same_value,
    unordered_by,
)
from recdelta.errors import ChangeSetError, NotARecordError, RecDeltaError, RecordTypeMismatchError
from recdelta.models.changes import ChangeSet, FieldChange
from recdelta.models.config import DeltaConfig
from recdelta.models.features import Feature, FeatureRecord, Program
from recdelta.observability.logging import get_logger, setup_logging

__version__ = "0.1.0"

__all__ = [
    "ChangeSet",
    "ChangeSetError",
    "Comparable",
    "Delta",
    "DeltaConfig",
    "DeltaEngine",
    "DeltaRecord",
    "Feature",
    "FeatureRecord",
    "FieldChange",
    "FieldSpec",
    "NotARecordError",
    "Program",
    "RecDeltaError",
    "RecordTypeMismatchError",
    "casefolded",
    "delta",
    "delta_field",
    "delta_record",
    "equals",
    "get_logger",
    "load_config",
    "record_fields",
    "same_value",
    "setup_logging",
    "unordered_by",
]
