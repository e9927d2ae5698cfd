"""Core data structures for recdelta."""

from recdelta.models.changes import ChangeSet, FieldChange
from recdelta.models.config import DeltaConfig, LogConfig, RecDeltaConfig
from recdelta.models.features import Feature, FeatureRecord, Program

__all__ = [
    "ChangeSet",
    "DeltaConfig",
    "Feature",
    "FeatureRecord",
    "FieldChange",
    "LogConfig",
    "Program",
    "RecDeltaConfig",
]
