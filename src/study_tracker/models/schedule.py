"""Scheduling models for study_tracker.

These models cover unavailable time blocks and the weekly plan report.
"""

from datetime import time
from enum import StrEnum

from pydantic import BaseModel, Field, model_validator

__all__ = [
    "WEEKDAYS",
    "BlockOutcome",
    "PlanSlotDTO",
    "TimeBlockDTO",
    "TimeInterval",
]

WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class BlockOutcome(StrEnum):
    """Result of adding an unavailable time block."""

    ACCEPTED = "accepted"
    """Block overlapped nothing and was stored"""

    CONFLICT = "conflict"
    """Block overlapped an existing block and was rejected"""


class TimeInterval(BaseModel, frozen=True):
    """Half-open time range [start, end).

    Accepts ``datetime.time`` values or ``"HH:MM"`` strings.
    Construction fails unless start is strictly before end.
    """

    start: time
    end: time

    @model_validator(mode="after")
    def _end_after_start(self) -> "TimeInterval":
        if self.end <= self.start:
            raise ValueError(f"End time must be after start: {self.start} - {self.end}")
        return self

    def overlaps(self, other: "TimeInterval") -> bool:
        """Check overlap; touching endpoints do not overlap."""
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"{self.start:%H:%M} - {self.end:%H:%M}"


class TimeBlockDTO(BaseModel, frozen=True):
    """Accepted unavailable time block.

    Attributes:
        block_id: Sequential block identifier
        start: Block start time
        end: Block end time
    """

    block_id: int = Field(ge=1)
    start: time
    end: time


class PlanSlotDTO(BaseModel, frozen=True):
    """One slot of a generated weekly plan.

    Attributes:
        slot: 1-based position within the day
        task_id: Planned task identifier
        title: Planned task title
        subject: Planned task subject
    """

    slot: int = Field(ge=1)
    task_id: int
    title: str
    subject: str
