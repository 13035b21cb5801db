"""Reversible action records for study_tracker.

Each mutation that participates in undo/redo is captured as one of the
variants below. ``Action`` is a tagged union discriminated on ``kind``.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from study_tracker.models.log import StudyLogDTO
from study_tracker.models.task import TaskDTO

__all__ = [
    "Action",
    "DependencyAddedAction",
    "TaskAddedAction",
    "TaskCompletedAction",
]


class TaskAddedAction(BaseModel, frozen=True):
    """A task was submitted."""

    kind: Literal["task_added"] = "task_added"
    task: TaskDTO


class TaskCompletedAction(BaseModel, frozen=True):
    """The top task was completed.

    Attributes:
        task: The completed task, restored on undo
        review_task: Follow-up review spawned by the completion
        log_entry: Session log written by the completion
    """

    kind: Literal["task_completed"] = "task_completed"
    task: TaskDTO
    review_task: TaskDTO
    log_entry: StudyLogDTO


class DependencyAddedAction(BaseModel, frozen=True):
    """A prerequisite -> dependent edge was added."""

    kind: Literal["dependency_added"] = "dependency_added"
    prerequisite: str
    dependent: str


Action = Annotated[
    TaskAddedAction | TaskCompletedAction | DependencyAddedAction,
    Field(discriminator="kind"),
]
