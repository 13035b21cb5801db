"""Request boundary models for study_tracker.

These frozen Pydantic models validate raw caller input before the engine
touches any state. A transport adapter can build them straight from a
decoded request body; the engine builds them from keyword arguments.
"""

from datetime import date

from pydantic import BaseModel, Field

__all__ = [
    "CompletionRequest",
    "DependencyRequest",
    "PlanRequest",
    "SessionEntry",
    "TaskSubmission",
]


class TaskSubmission(BaseModel, frozen=True):
    """New task submitted by a caller.

    Attributes:
        title: Task title (non-empty)
        subject: Subject name (non-empty)
        priority: Integer priority score; strings and floats are rejected
        deadline: Due date, as a date or ISO ``YYYY-MM-DD`` string
    """

    title: str = Field(min_length=1)
    subject: str = Field(min_length=1)
    priority: int = Field(strict=True)
    deadline: date


class CompletionRequest(BaseModel, frozen=True):
    """Completion of the current top task."""

    duration_hours: float = Field(ge=0.0)
    notes: str = Field(default="")


class SessionEntry(BaseModel, frozen=True):
    """Study session logged directly by a caller."""

    subject: str = Field(min_length=1)
    duration_hours: float = Field(ge=0.0)
    description: str = Field(default="")


class DependencyRequest(BaseModel, frozen=True):
    """Prerequisite edge between two subjects."""

    prerequisite: str = Field(min_length=1)
    dependent: str = Field(min_length=1)


class PlanRequest(BaseModel, frozen=True):
    """Weekly plan request.

    ``slots_per_day`` must be an integer when given; None or a
    non-positive value means the configured default.
    """

    slots_per_day: int | None = Field(default=None, strict=True)
