"""Delta engine for recdelta.

Compares two records of the same dataclass type field by field and reports
which fields changed, with their old and new values.

Submodules:
    comparable  -- Comparable / Delta capability protocols.
    fields      -- Per-field comparators shared by equality and delta computation.
    engine      -- DeltaEngine and the module-level delta()/equals() shortcuts.
    record      -- DeltaRecord mixin and the delta_record decorator.
"""

from recdelta.delta.comparable import Comparable, Delta
from recdelta.delta.engine import DeltaEngine, delta, equals
from recdelta.delta.fields import FieldSpec, casefolded, delta_field, record_fields, same_value, unordered_by
from recdelta.delta.record import DeltaRecord, delta_record

__all__ = [
    "Comparable",
    "Delta",
    "DeltaEngine",
    "DeltaRecord",
    "FieldSpec",
    "casefolded",
    "delta",
    "delta_field",
    "delta_record",
    "equals",
    "record_fields",
    "same_value",
    "unordered_by",
]
