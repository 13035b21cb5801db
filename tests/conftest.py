"""Shared test fixtures for study_tracker.

This module provides pytest fixtures used across all tests.
"""

from collections.abc import Iterator
from datetime import date

import pytest

from study_tracker.config import StudyTrackerConfig
from study_tracker.logging import configure_logging
from study_tracker.models.task import TaskDTO
from study_tracker.orchestrator import StudyTracker
from study_tracker.services.interval_index import IntervalIndex
from study_tracker.services.subject_graph import SubjectGraph
from study_tracker.services.task_scheduler import TaskScheduler
from study_tracker.services.undo_log import UndoRedoLog

TODAY = date(2025, 1, 6)


@pytest.fixture
def today() -> date:
    """Fixed completion date used by the engine fixtures."""
    return TODAY


@pytest.fixture
def config() -> StudyTrackerConfig:
    """Create config with default values, independent of the environment."""
    return StudyTrackerConfig(
        review_priority=85,
        review_interval_days=3,
        review_title_prefix="Review: ",
        default_slots_per_day=3,
        first_task_id=1,
    )


@pytest.fixture
def tracker(config: StudyTrackerConfig) -> StudyTracker:
    """Create an empty engine with a fixed clock."""
    return StudyTracker(config, today=lambda: TODAY)


@pytest.fixture
def scheduler() -> TaskScheduler:
    """Create empty task scheduler."""
    return TaskScheduler()


@pytest.fixture
def graph() -> SubjectGraph:
    """Create empty subject graph."""
    return SubjectGraph()


@pytest.fixture
def interval_index() -> IntervalIndex:
    """Create empty interval index."""
    return IntervalIndex()


@pytest.fixture
def undo_log() -> UndoRedoLog:
    """Create empty undo/redo log."""
    return UndoRedoLog()


@pytest.fixture
def sample_task() -> TaskDTO:
    """Create sample TaskDTO."""
    return TaskDTO(
        task_id=1,
        title="Derivatives",
        subject="Calculus",
        priority=70,
        deadline=date(2025, 1, 20),
    )


@pytest.fixture
def sample_review_task() -> TaskDTO:
    """Create sample review TaskDTO."""
    return TaskDTO(
        task_id=2,
        title="Review: Derivatives",
        subject="Calculus",
        priority=85,
        deadline=date(2025, 1, 9),
        is_review=True,
    )


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Put the default console logging back after a test reconfigures it."""
    yield
    configure_logging()
