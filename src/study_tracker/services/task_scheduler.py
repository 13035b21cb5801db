"""Priority task scheduler for study_tracker.

This module provides the max-priority queue of pending study tasks.
"""

import heapq
import itertools
from datetime import date

from study_tracker.errors import EmptyQueueError
from study_tracker.logging import get_logger
from study_tracker.models.task import TaskDTO

__all__ = [
    "TaskScheduler",
]

logger = get_logger(__name__)

# Heap entries are (-priority, task_id, task); task_id is unique so the
# task itself is never compared.
_HeapEntry = tuple[int, int, TaskDTO]


class TaskScheduler:
    """Max-priority queue of pending tasks.

    Backed by a binary heap. The scheduler owns its id counter, so two
    schedulers never hand out colliding ids and tests can seed the first id.

    Among tasks with equal priority the lower ``task_id`` comes first.
    Callers should treat this tie-break as implementation-defined.

    Example:
        scheduler = TaskScheduler()
        task = scheduler.submit("Read ch. 3", "Algebra", 70, date(2025, 1, 10))
        top = scheduler.complete_top()
    """

    def __init__(self, first_id: int = 1) -> None:
        """Initialize an empty scheduler.

        Args:
            first_id: Identifier given to the first submitted task
        """
        self._heap: list[_HeapEntry] = []
        self._ids = itertools.count(first_id)

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, task: object) -> bool:
        if not isinstance(task, TaskDTO):
            return False
        return self._index_of(task.task_id) is not None

    def submit(
        self,
        title: str,
        subject: str,
        priority: int,
        deadline: date,
        is_review: bool = False,
    ) -> TaskDTO:
        """Create a task with the next identifier and enqueue it.

        Args:
            title: Task title
            subject: Subject name
            priority: Priority score (higher = more urgent)
            deadline: Due date
            is_review: True for spaced-repetition follow-ups

        Returns:
            The created task
        """
        task = TaskDTO(
            task_id=next(self._ids),
            title=title,
            subject=subject,
            priority=priority,
            deadline=deadline,
            is_review=is_review,
        )
        self._push(task)
        logger.debug("task_enqueued", task_id=task.task_id, priority=task.priority)
        return task

    def peek_top(self) -> TaskDTO | None:
        """Return the highest-priority task without removing it."""
        if not self._heap:
            return None
        return self._heap[0][2]

    def list_all(self) -> list[TaskDTO]:
        """Return all pending tasks by descending priority."""
        return [entry[2] for entry in sorted(self._heap)]

    def complete_top(self) -> TaskDTO:
        """Remove and return the highest-priority task.

        Raises:
            EmptyQueueError: If no task is pending
        """
        if not self._heap:
            raise EmptyQueueError()
        _, _, task = heapq.heappop(self._heap)
        logger.debug("task_dequeued", task_id=task.task_id)
        return task

    def reinsert(self, task: TaskDTO) -> None:
        """Put a previously removed task back, keeping its identifier."""
        if task in self:
            return
        self._push(task)

    def remove(self, task: TaskDTO) -> bool:
        """Remove the pending task with the same identifier.

        Returns:
            True if a task was removed, False if it was not pending
        """
        index = self._index_of(task.task_id)
        if index is None:
            return False
        last = self._heap.pop()
        if index < len(self._heap):
            self._heap[index] = last
            heapq.heapify(self._heap)
        logger.debug("task_removed", task_id=task.task_id)
        return True

    def _push(self, task: TaskDTO) -> None:
        heapq.heappush(self._heap, (-task.priority, task.task_id, task))

    def _index_of(self, task_id: int) -> int | None:
        for index, (_, entry_id, _) in enumerate(self._heap):
            if entry_id == task_id:
                return index
        return None
