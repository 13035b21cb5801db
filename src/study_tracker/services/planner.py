"""Plan derivation for study_tracker.

Pure functions computing follow-up reviews and the weekly plan from
pending tasks. Nothing here mutates scheduler state.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from study_tracker.models.schedule import WEEKDAYS, PlanSlotDTO
from study_tracker.models.task import TaskDTO

__all__ = [
    "ReviewPlan",
    "build_weekly_plan",
    "plan_review",
]


@dataclass(frozen=True)
class ReviewPlan:
    """Fields of the follow-up review for a completed task."""

    title: str
    subject: str
    priority: int
    deadline: date


def plan_review(
    completed: TaskDTO,
    today: date,
    priority: int = 85,
    interval_days: int = 3,
    prefix: str = "Review: ",
) -> ReviewPlan:
    """Describe the spaced-repetition review for a completed task.

    Completing a review yields another review of the same base title,
    so the prefix never accumulates.

    Args:
        completed: Task that was just completed
        today: Completion date
        priority: Priority of the review task
        interval_days: Days until the review is due
        prefix: Title prefix marking a review

    Returns:
        ReviewPlan for the scheduler to submit
    """
    return ReviewPlan(
        title=prefix + completed.base_title(prefix),
        subject=completed.subject,
        priority=priority,
        deadline=today + timedelta(days=interval_days),
    )


def build_weekly_plan(
    tasks: list[TaskDTO],
    slots_per_day: int,
) -> dict[str, list[PlanSlotDTO]]:
    """Fill Monday through Sunday by cycling through tasks.

    The cycle continues across day boundaries and wraps to the first task
    when the list runs out, so earlier slots always favour the tasks
    listed first.

    Args:
        tasks: Tasks ordered by descending priority
        slots_per_day: Slots per day (must be positive)

    Returns:
        Mapping of weekday name to its ordered slots
    """
    if slots_per_day <= 0:
        raise ValueError(f"slots_per_day must be positive, got {slots_per_day}")

    plan: dict[str, list[PlanSlotDTO]] = {day: [] for day in WEEKDAYS}
    if not tasks:
        return plan

    cursor = 0
    for day in WEEKDAYS:
        for slot in range(1, slots_per_day + 1):
            task = tasks[cursor % len(tasks)]
            plan[day].append(
                PlanSlotDTO(
                    slot=slot,
                    task_id=task.task_id,
                    title=task.title,
                    subject=task.subject,
                )
            )
            cursor += 1

    return plan
