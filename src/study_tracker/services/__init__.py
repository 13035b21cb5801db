"""Service layer for study_tracker.

This module exports the engine components composed by the facade.
"""

from study_tracker.services.interval_index import IntervalIndex
from study_tracker.services.planner import ReviewPlan, build_weekly_plan, plan_review
from study_tracker.services.subject_graph import SubjectGraph
from study_tracker.services.task_scheduler import TaskScheduler
from study_tracker.services.undo_log import UndoRedoLog

__all__ = [
    "IntervalIndex",
    "ReviewPlan",
    "SubjectGraph",
    "TaskScheduler",
    "UndoRedoLog",
    "build_weekly_plan",
    "plan_review",
]
