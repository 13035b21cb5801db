"""study_tracker - In-memory study planning engine.

This package provides tools for:
- Prioritizing pending study tasks with spaced-repetition reviews
- Logging finished study sessions and summarizing hours per subject
- Ordering subjects by their prerequisites
- Blocking off unavailable time without overlaps
- Undoing and redoing task and dependency changes

Example usage:
    from study_tracker import StudyTracker

    tracker = StudyTracker()
    tracker.submit_task("Limits", "Calculus", 80, "2025-03-01")
    tracker.add_dependency("Algebra", "Calculus")
    tracker.complete_top_task(1.5, notes="worked examples")
    plan = tracker.generate_weekly_plan(slots_per_day=2)
"""

__version__ = "0.1.0"

from study_tracker.config import StudyTrackerConfig
from study_tracker.errors import EmptyQueueError, StudyTrackerError
from study_tracker.models import (
    BlockOutcome,
    PlanSlotDTO,
    StudyLogDTO,
    StudyPathDTO,
    TaskDTO,
    TimeBlockDTO,
    TimeInterval,
)
from study_tracker.orchestrator import StudyTracker

__all__ = [  # noqa: RUF022
    # Facade
    "StudyTracker",
    "StudyTrackerConfig",
    # Errors
    "EmptyQueueError",
    "StudyTrackerError",
    # Models
    "BlockOutcome",
    "PlanSlotDTO",
    "StudyLogDTO",
    "StudyPathDTO",
    "TaskDTO",
    "TimeBlockDTO",
    "TimeInterval",
]
