"""Task models for study_tracker.

These models represent pending units of study work.
"""

from datetime import date

from pydantic import BaseModel, Field

__all__ = [
    "TaskDTO",
]


class TaskDTO(BaseModel, frozen=True):
    """Pending unit of study work.

    Tasks are immutable once created. The scheduler hands out the
    identifier and never reuses it, so undo/redo can target the exact
    task that was added or completed.

    Attributes:
        task_id: Monotonically increasing identifier assigned by the scheduler
        title: Short task title
        subject: Name of the subject node this task belongs to
        priority: Priority score (higher = more urgent)
        deadline: Calendar date the task is due
        is_review: True if generated as a spaced-repetition follow-up
    """

    task_id: int = Field(ge=1, description="Scheduler-assigned identifier")
    title: str
    subject: str
    priority: int = Field(description="Higher is more urgent")
    deadline: date
    is_review: bool = Field(default=False)

    def base_title(self, review_prefix: str = "Review: ") -> str:
        """Title without one leading review prefix.

        Only review tasks are stripped, so a user task literally titled
        "Review: notes" keeps its prefix.
        """
        if self.is_review and self.title.startswith(review_prefix):
            return self.title[len(review_prefix) :]
        return self.title
