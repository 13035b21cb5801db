"""Study log models for study_tracker."""

import datetime

from pydantic import BaseModel, Field

__all__ = [
    "StudyLogDTO",
]


class StudyLogDTO(BaseModel, frozen=True):
    """Record of a finished study session.

    Attributes:
        date: Day the session was logged
        subject: Subject studied
        duration_hours: Session length in hours (non-negative)
        description: Free-text description
    """

    date: datetime.date
    subject: str
    duration_hours: float = Field(ge=0.0)
    description: str = Field(default="")
