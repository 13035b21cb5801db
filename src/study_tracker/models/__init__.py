"""Public DTO models for study_tracker.

This module exports all public data transfer objects.
"""

from study_tracker.models.action import (
    Action,
    DependencyAddedAction,
    TaskAddedAction,
    TaskCompletedAction,
)
from study_tracker.models.graph import StudyPathDTO
from study_tracker.models.log import StudyLogDTO
from study_tracker.models.requests import (
    CompletionRequest,
    DependencyRequest,
    PlanRequest,
    SessionEntry,
    TaskSubmission,
)
from study_tracker.models.schedule import (
    WEEKDAYS,
    BlockOutcome,
    PlanSlotDTO,
    TimeBlockDTO,
    TimeInterval,
)
from study_tracker.models.task import TaskDTO

__all__ = [
    "WEEKDAYS",
    "Action",
    "BlockOutcome",
    "CompletionRequest",
    "DependencyAddedAction",
    "DependencyRequest",
    "PlanRequest",
    "PlanSlotDTO",
    "SessionEntry",
    "StudyLogDTO",
    "StudyPathDTO",
    "TaskAddedAction",
    "TaskCompletedAction",
    "TaskDTO",
    "TaskSubmission",
    "TimeBlockDTO",
    "TimeInterval",
]
