"""StudyTracker engine facade.

This module provides the main entry point for the study_tracker package,
composing the task scheduler, subject graph, interval index and undo log
behind one serialized surface.
"""

import itertools
import threading
from collections.abc import Callable
from datetime import date, time

from study_tracker.config import StudyTrackerConfig
from study_tracker.logging import configure_logging, get_logger
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
from study_tracker.models.schedule import BlockOutcome, PlanSlotDTO, TimeBlockDTO, TimeInterval
from study_tracker.models.task import TaskDTO
from study_tracker.services.interval_index import IntervalIndex
from study_tracker.services.planner import build_weekly_plan, plan_review
from study_tracker.services.subject_graph import SubjectGraph
from study_tracker.services.task_scheduler import TaskScheduler
from study_tracker.services.undo_log import UndoRedoLog

__all__ = ["StudyTracker"]

logger = get_logger(__name__)

NOTHING_TO_UNDO = "Nothing to undo."
NOTHING_TO_REDO = "Nothing to redo."


class StudyTracker:
    """Single entry point of the study planning engine.

    Every public method runs under one re-entrant lock for its whole
    duration, reads included, so callers on different threads never
    observe each other's intermediate state. Returned values are frozen
    models or fresh containers.

    Invalid input raises ``pydantic.ValidationError`` before any state
    changes. Completing with nothing pending raises ``EmptyQueueError``.

    Example:
        tracker = StudyTracker()
        tracker.submit_task("Chapter 1", "Algebra", 90, "2025-03-01")
        tracker.add_dependency("Algebra", "Calculus")
        tracker.complete_top_task(1.5, notes="done")
        tracker.undo()
    """

    def __init__(
        self,
        config: StudyTrackerConfig | None = None,
        *,
        today: Callable[[], date] = date.today,
        setup_logging: bool = False,
    ) -> None:
        """Initialize an empty engine.

        Args:
            config: Engine settings (loaded from the environment if omitted)
            today: Returns the current date; injectable for tests
            setup_logging: Configure structlog from ``config.logging``
        """
        self._config = config or StudyTrackerConfig()
        self._today = today

        if setup_logging:
            configure_logging(
                level=self._config.logging.level,
                json_output=self._config.logging.json_output,
            )

        self._lock = threading.RLock()

        self._scheduler = TaskScheduler(first_id=self._config.first_task_id)
        self._graph = SubjectGraph()
        self._intervals = IntervalIndex()
        self._history = UndoRedoLog()

        self._logs: list[StudyLogDTO] = []
        self._block_ids: dict[TimeInterval, int] = {}
        self._next_block_id = itertools.count(1)

    # === TASKS ===

    def submit_task(
        self,
        title: str,
        subject: str,
        priority: int,
        deadline: date | str,
    ) -> TaskDTO:
        """Submit a new pending task and register its subject."""
        request = TaskSubmission(
            title=title,
            subject=subject,
            priority=priority,
            deadline=deadline,
        )
        with self._lock:
            task = self._scheduler.submit(
                request.title,
                request.subject,
                request.priority,
                request.deadline,
            )
            self._graph.add_subject(task.subject)
            self._history.record(TaskAddedAction(task=task))

        logger.info(
            "task_submitted",
            task_id=task.task_id,
            subject=task.subject,
            priority=task.priority,
        )
        return task

    def peek_top_task(self) -> TaskDTO | None:
        """Return the highest-priority pending task, or None."""
        with self._lock:
            return self._scheduler.peek_top()

    def list_tasks(self) -> list[TaskDTO]:
        """Return pending tasks by descending priority."""
        with self._lock:
            return self._scheduler.list_all()

    def complete_top_task(self, duration_hours: float, notes: str | None = None) -> TaskDTO:
        """Complete the top task.

        Logs one study session for the task and enqueues one follow-up
        review task.

        Args:
            duration_hours: Hours spent (non-negative)
            notes: Optional notes appended to the log description

        Returns:
            The completed task

        Raises:
            EmptyQueueError: If no task is pending
        """
        request = CompletionRequest(duration_hours=duration_hours, notes=notes or "")

        with self._lock:
            task = self._scheduler.complete_top()
            today = self._today()

            description = task.title
            if request.notes:
                description = f"{task.title}: {request.notes}"
            log_entry = StudyLogDTO(
                date=today,
                subject=task.subject,
                duration_hours=request.duration_hours,
                description=description,
            )
            self._logs.append(log_entry)

            review = plan_review(
                task,
                today,
                priority=self._config.review_priority,
                interval_days=self._config.review_interval_days,
                prefix=self._config.review_title_prefix,
            )
            review_task = self._scheduler.submit(
                review.title,
                review.subject,
                review.priority,
                review.deadline,
                is_review=True,
            )

            self._history.record(
                TaskCompletedAction(task=task, review_task=review_task, log_entry=log_entry)
            )

        logger.info(
            "task_completed",
            task_id=task.task_id,
            review_task_id=review_task.task_id,
            duration_hours=request.duration_hours,
        )
        return task

    # === STUDY LOGS ===

    def insert_log(
        self,
        subject: str,
        duration_hours: float,
        description: str | None = None,
    ) -> StudyLogDTO:
        """Log a study session directly."""
        entry = SessionEntry(
            subject=subject,
            duration_hours=duration_hours,
            description=description or "",
        )
        with self._lock:
            log_entry = StudyLogDTO(
                date=self._today(),
                subject=entry.subject,
                duration_hours=entry.duration_hours,
                description=entry.description,
            )
            self._logs.append(log_entry)
            self._graph.add_subject(entry.subject)

        logger.info("session_logged", subject=entry.subject, duration_hours=entry.duration_hours)
        return log_entry

    def list_logs(self) -> list[StudyLogDTO]:
        """Return all session logs in the order they were written."""
        with self._lock:
            return list(self._logs)

    def summarize_logs(self) -> dict[str, float]:
        """Return total logged hours per subject."""
        with self._lock:
            totals: dict[str, float] = {}
            for log_entry in self._logs:
                totals[log_entry.subject] = (
                    totals.get(log_entry.subject, 0.0) + log_entry.duration_hours
                )
            return totals

    # === SUBJECTS ===

    def add_dependency(self, prerequisite: str, dependent: str) -> None:
        """Require ``prerequisite`` to be studied before ``dependent``."""
        request = DependencyRequest(prerequisite=prerequisite, dependent=dependent)
        with self._lock:
            self._graph.add_dependency(request.prerequisite, request.dependent)
            self._history.record(
                DependencyAddedAction(
                    prerequisite=request.prerequisite,
                    dependent=request.dependent,
                )
            )

        logger.info(
            "dependency_added",
            prerequisite=request.prerequisite,
            dependent=request.dependent,
        )

    def study_path(self) -> StudyPathDTO:
        """Return subjects in prerequisite order.

        ``has_cycle`` is set when subjects exist but no order is possible.
        """
        with self._lock:
            subjects = self._graph.study_path()
            has_cycle = not subjects and len(self._graph) > 0

        if has_cycle:
            logger.warning("study_path_circular_dependency", subject_count=len(self._graph))
        return StudyPathDTO(subjects=subjects, has_cycle=has_cycle)

    def list_subjects(self) -> list[str]:
        """Return every known subject, sorted by name."""
        with self._lock:
            return sorted(self._graph.all_subjects())

    # === SCHEDULE ===

    def add_unavailable_block(self, start: time | str, end: time | str) -> BlockOutcome:
        """Block off a time range unless it overlaps an existing block.

        Raises:
            pydantic.ValidationError: If a time is malformed or end <= start
        """
        interval = TimeInterval(start=start, end=end)
        with self._lock:
            accepted = self._intervals.insert(interval)
            if accepted:
                self._block_ids[interval] = next(self._next_block_id)

        if not accepted:
            logger.info("block_conflict", interval=str(interval))
            return BlockOutcome.CONFLICT

        logger.info("block_added", interval=str(interval))
        return BlockOutcome.ACCEPTED

    def list_unavailable_blocks(self) -> list[TimeBlockDTO]:
        """Return accepted blocks ordered by start time."""
        with self._lock:
            return [
                TimeBlockDTO(
                    block_id=self._block_ids[interval],
                    start=interval.start,
                    end=interval.end,
                )
                for interval in self._intervals.intervals()
            ]

    def generate_weekly_plan(
        self,
        slots_per_day: int | None = None,
    ) -> dict[str, list[PlanSlotDTO]]:
        """Spread pending tasks over Monday to Sunday by priority.

        Args:
            slots_per_day: Slots per day; None or non-positive uses the
                configured default

        Returns:
            Mapping of weekday name to ordered slots

        Raises:
            ValidationError: If slots_per_day is not an integer
        """
        request = PlanRequest(slots_per_day=slots_per_day)
        slots = request.slots_per_day
        if slots is None or slots <= 0:
            slots = self._config.default_slots_per_day

        with self._lock:
            tasks = self._scheduler.list_all()

        return build_weekly_plan(tasks, slots)

    # === UNDO / REDO ===

    def undo(self) -> str:
        """Reverse the most recent recorded action.

        Returns:
            Description of the reversed effect, or "Nothing to undo."
        """
        with self._lock:
            action = self._history.undo()
            if action is None:
                return NOTHING_TO_UNDO
            message = self._reverse(action)

        logger.info("undo_applied", kind=action.kind)
        return message

    def redo(self) -> str:
        """Re-apply the most recently undone action.

        Returns:
            Description of the re-applied effect, or "Nothing to redo."
        """
        with self._lock:
            action = self._history.redo()
            if action is None:
                return NOTHING_TO_REDO
            message = self._reapply(action)

        logger.info("redo_applied", kind=action.kind)
        return message

    def _reverse(self, action: Action) -> str:
        if isinstance(action, TaskAddedAction):
            # The task may already be gone, e.g. completed since
            self._scheduler.remove(action.task)
            return "Undo: Task addition removed."

        if isinstance(action, TaskCompletedAction):
            self._scheduler.remove(action.review_task)
            self._discard_log(action.log_entry)
            self._scheduler.reinsert(action.task)
            return "Undo: Task completion reversed (task re-added, review and log retracted)."

        self._graph.remove_dependency(action.prerequisite, action.dependent)
        return "Undo: Dependency removed."

    def _reapply(self, action: Action) -> str:
        if isinstance(action, TaskAddedAction):
            self._scheduler.reinsert(action.task)
            return "Redo: Task added again."

        if isinstance(action, TaskCompletedAction):
            self._scheduler.remove(action.task)
            self._logs.append(action.log_entry)
            self._scheduler.reinsert(action.review_task)
            return "Redo: Task marked completed again."

        self._graph.add_dependency(action.prerequisite, action.dependent)
        return "Redo: Dependency added again."

    def _discard_log(self, log_entry: StudyLogDTO) -> None:
        for index in range(len(self._logs) - 1, -1, -1):
            if self._logs[index] == log_entry:
                del self._logs[index]
                return
