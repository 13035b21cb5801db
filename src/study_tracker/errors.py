"""Exceptions raised by study_tracker.

Input validation failures surface as ``pydantic.ValidationError`` from the
request and record models; the exceptions here cover engine state.
"""

__all__ = [
    "EmptyQueueError",
    "StudyTrackerError",
]


class StudyTrackerError(Exception):
    """Base exception for study tracker engine errors."""


class EmptyQueueError(StudyTrackerError, LookupError):
    """Raised when an operation needs a pending task and none exists."""

    def __init__(self, message: str = "The task queue is empty.") -> None:
        super().__init__(message)
