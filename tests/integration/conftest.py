"""Shared fixtures for recdelta integration tests.

Provides program feature trees modelled on a productivity-suite roadmap so
tests can exercise delta computation across flat rows, nested features and
whole programs.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from recdelta.models.features import Feature, FeatureRecord, Program

# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------


def ts(value: str) -> datetime:
    """Parse an RFC 3339 test timestamp."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


def make_feature(
    feature_id: str,
    start: str,
    end: str,
    progress_status: str = "Complete",
    assigned_team: str = "Team_B",
    subfeatures: tuple[Feature, ...] = (),
) -> Feature:
    """Create a Feature with sensible defaults for testing."""
    return Feature(
        id=feature_id,
        progress_status=progress_status,
        assigned_team=assigned_team,
        start_date=ts(start),
        end_date=ts(end),
        subfeatures=subfeatures,
    )


def make_feature_record(
    feature_id: str = "Email",
    parent_id: str | None = "Productivity_Suite",
    program_id: str = "program_1",
    progress_status: str = "Complete",
    assigned_team: str = "Team_B",
    start: str = "2023-01-01T00:00:00.000Z",
    end: str = "2023-06-30T00:00:00.000Z",
) -> FeatureRecord:
    """Create a FeatureRecord with sensible defaults for testing."""
    return FeatureRecord(
        id=feature_id,
        parent_id=parent_id,
        program_id=program_id,
        progress_status=progress_status,
        assigned_team=assigned_team,
        start_date=ts(start),
        end_date=ts(end),
    )


def _email() -> Feature:
    return make_feature(
        "Email",
        "2023-01-01T00:00:00.000Z",
        "2023-06-30T00:00:00.000Z",
        subfeatures=(
            make_feature("Email_Search", "2023-01-01T00:00:00.000Z", "2023-04-30T00:00:00.000Z"),
            make_feature("Email_Filters", "2023-05-01T00:00:00.000Z", "2023-06-30T00:00:00.000Z"),
        ),
    )


def _calendar() -> Feature:
    return make_feature(
        "Calendar",
        "2023-01-01T00:00:00.000Z",
        "2023-06-30T00:00:00.000Z",
        assigned_team="Team_C",
        subfeatures=(
            make_feature(
                "Calendar_Scheduling", "2023-01-01T00:00:00.000Z", "2023-04-30T00:00:00.000Z", assigned_team="Team_C"
            ),
            make_feature(
                "Calendar_Reminders", "2023-05-01T00:00:00.000Z", "2023-06-30T00:00:00.000Z", assigned_team="Team_C"
            ),
        ),
    )


def _task_manager() -> Feature:
    return make_feature(
        "Task_Manager",
        "2023-07-01T00:00:00.000Z",
        "2023-12-31T00:00:00.000Z",
        progress_status="In_Progress",
        assigned_team="Team_D",
        subfeatures=(
            make_feature(
                "Task_Manager_To_Do_List",
                "2023-07-01T00:00:00.000Z",
                "2023-09-30T00:00:00.000Z",
                assigned_team="Team_D",
            ),
            make_feature(
                "Task_Manager_Project_Management",
                "2023-10-01T00:00:00.000Z",
                "2023-12-31T00:00:00.000Z",
                progress_status="In_Progress",
                assigned_team="Team_D",
            ),
        ),
    )


def build_program(subfeatures: tuple[Feature, ...] | None = None) -> Program:
    """Build the productivity-suite program, optionally overriding the root's subfeatures."""
    if subfeatures is None:
        subfeatures = (_email(), _calendar(), _task_manager())
    return Program(
        id="program_1",
        root=make_feature(
            "Productivity_Suite",
            "2023-01-01T00:00:00.000Z",
            "2023-12-31T00:00:00.000Z",
            progress_status="In_Progress",
            assigned_team="Team_A",
            subfeatures=subfeatures,
        ),
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def program() -> Program:
    return build_program()


@pytest.fixture
def reordered_program() -> Program:
    """Same program with the root's subfeatures listed in a different order."""
    return build_program((_task_manager(), _email(), _calendar()))
