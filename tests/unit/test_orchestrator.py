"""Unit tests for the StudyTracker facade."""

import logging
from datetime import date, time, timedelta

import pytest
import structlog
from pydantic import ValidationError

from study_tracker import orchestrator
from study_tracker.config import LoggingSettings, StudyTrackerConfig
from study_tracker.errors import EmptyQueueError
from study_tracker.logging import configure_logging
from study_tracker.models.schedule import WEEKDAYS, BlockOutcome
from study_tracker.orchestrator import StudyTracker

DEADLINE = date(2025, 2, 1)


class TestTasks:
    """Tests for task submission and completion."""

    def test_submit_returns_task(self, tracker: StudyTracker) -> None:
        task = tracker.submit_task("Limits", "Calculus", 80, "2025-03-01")

        assert task.task_id == 1
        assert task.deadline == date(2025, 3, 1)
        assert task.is_review is False
        assert tracker.list_tasks() == [task]
        assert tracker.list_subjects() == ["Calculus"]

    def test_submit_invalid_input_leaves_state_untouched(self, tracker: StudyTracker) -> None:
        with pytest.raises(ValidationError):
            tracker.submit_task("Limits", "Calculus", "high", DEADLINE)  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            tracker.submit_task("Limits", "Calculus", 10, "not-a-date")

        assert tracker.list_tasks() == []
        assert tracker.list_subjects() == []
        assert tracker.undo() == "Nothing to undo."

    def test_peek_top(self, tracker: StudyTracker) -> None:
        assert tracker.peek_top_task() is None
        tracker.submit_task("low", "Math", 10, DEADLINE)
        high = tracker.submit_task("high", "Math", 90, DEADLINE)

        assert tracker.peek_top_task() == high
        assert len(tracker.list_tasks()) == 2

    def test_list_tasks_is_a_copy(self, tracker: StudyTracker) -> None:
        tracker.submit_task("A", "Math", 10, DEADLINE)
        tracker.list_tasks().clear()
        assert len(tracker.list_tasks()) == 1

    def test_complete_on_empty_raises(self, tracker: StudyTracker) -> None:
        with pytest.raises(EmptyQueueError):
            tracker.complete_top_task(1.0)
        assert tracker.list_logs() == []

    def test_complete_logs_session_and_enqueues_review(
        self,
        tracker: StudyTracker,
        today: date,
    ) -> None:
        tracker.submit_task("Derivatives", "Calculus", 70, DEADLINE)

        completed = tracker.complete_top_task(1.5, notes="chain rule")

        assert completed.title == "Derivatives"
        logs = tracker.list_logs()
        assert len(logs) == 1
        assert logs[0].date == today
        assert logs[0].subject == "Calculus"
        assert logs[0].duration_hours == 1.5
        assert logs[0].description == "Derivatives: chain rule"

        tasks = tracker.list_tasks()
        assert len(tasks) == 1
        review = tasks[0]
        assert review.title == "Review: Derivatives"
        assert review.subject == "Calculus"
        assert review.priority == 85
        assert review.deadline == today + timedelta(days=3)
        assert review.is_review is True
        assert review.task_id == 2

    def test_complete_without_notes_uses_title(self, tracker: StudyTracker) -> None:
        tracker.submit_task("Vectors", "Physics", 40, DEADLINE)
        tracker.complete_top_task(0)
        assert tracker.list_logs()[0].description == "Vectors"

    def test_completing_review_does_not_stack_prefix(self, tracker: StudyTracker) -> None:
        tracker.submit_task("Integrals", "Calculus", 10, DEADLINE)
        tracker.complete_top_task(1.0)
        review = tracker.complete_top_task(0.5)

        assert review.title == "Review: Integrals"
        assert [task.title for task in tracker.list_tasks()] == ["Review: Integrals"]

    def test_negative_duration_rejected(self, tracker: StudyTracker) -> None:
        tracker.submit_task("Integrals", "Calculus", 10, DEADLINE)
        with pytest.raises(ValidationError):
            tracker.complete_top_task(-1)
        assert len(tracker.list_tasks()) == 1


class TestLogs:
    """Tests for direct session logging and summaries."""

    def test_insert_log_registers_subject(self, tracker: StudyTracker, today: date) -> None:
        log = tracker.insert_log("Chemistry", 2.0, "lab report")

        assert log.date == today
        assert log.description == "lab report"
        assert tracker.list_subjects() == ["Chemistry"]

    def test_insert_log_invalid(self, tracker: StudyTracker) -> None:
        with pytest.raises(ValidationError):
            tracker.insert_log("Chemistry", "two")  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            tracker.insert_log("", 1.0)
        assert tracker.list_logs() == []

    def test_summarize_totals_per_subject(self, tracker: StudyTracker) -> None:
        tracker.insert_log("Chemistry", 2.0)
        tracker.insert_log("Biology", 1.0)
        tracker.insert_log("Chemistry", 0.5)
        tracker.submit_task("Cells", "Biology", 10, DEADLINE)
        tracker.complete_top_task(1.25)

        assert tracker.summarize_logs() == {"Chemistry": 2.5, "Biology": 2.25}

    def test_summarize_empty(self, tracker: StudyTracker) -> None:
        assert tracker.summarize_logs() == {}


class TestSubjects:
    """Tests for prerequisites and the study path."""

    def test_study_path_orders_prerequisites(self, tracker: StudyTracker) -> None:
        tracker.add_dependency("Calculus", "Physics")
        tracker.add_dependency("Algebra", "Calculus")

        path = tracker.study_path()
        assert path.subjects == ["Algebra", "Calculus", "Physics"]
        assert path.has_cycle is False

    def test_cycle_reported(self, tracker: StudyTracker) -> None:
        tracker.add_dependency("A", "B")
        tracker.add_dependency("B", "A")

        path = tracker.study_path()
        assert path.subjects == []
        assert path.has_cycle is True
        assert tracker.list_subjects() == ["A", "B"]

    def test_empty_graph_is_not_a_cycle(self, tracker: StudyTracker) -> None:
        path = tracker.study_path()
        assert path.subjects == []
        assert path.has_cycle is False

    def test_missing_field_rejected(self, tracker: StudyTracker) -> None:
        with pytest.raises(ValidationError):
            tracker.add_dependency("Algebra", None)  # type: ignore[arg-type]
        assert tracker.list_subjects() == []


class TestSchedule:
    """Tests for unavailable blocks and the weekly plan."""

    def test_conflicting_block_rejected(self, tracker: StudyTracker) -> None:
        assert tracker.add_unavailable_block("09:00", "10:00") == BlockOutcome.ACCEPTED
        assert tracker.add_unavailable_block("09:30", "10:30") == BlockOutcome.CONFLICT
        assert tracker.add_unavailable_block("10:00", "11:00") == BlockOutcome.ACCEPTED

    def test_invalid_block_raises(self, tracker: StudyTracker) -> None:
        with pytest.raises(ValidationError):
            tracker.add_unavailable_block("10:00", "10:00")
        with pytest.raises(ValidationError):
            tracker.add_unavailable_block("25:00", "26:00")
        assert tracker.list_unavailable_blocks() == []

    def test_list_blocks_sorted_with_ids(self, tracker: StudyTracker) -> None:
        tracker.add_unavailable_block("14:00", "15:00")
        tracker.add_unavailable_block("14:30", "16:00")
        tracker.add_unavailable_block(time(8), time(9))

        blocks = tracker.list_unavailable_blocks()
        assert [(block.block_id, block.start) for block in blocks] == [
            (2, time(8)),
            (1, time(14)),
        ]

    def test_weekly_plan_cycles_by_priority(self, tracker: StudyTracker) -> None:
        low = tracker.submit_task("low", "Math", 50, DEADLINE)
        high = tracker.submit_task("high", "Math", 90, DEADLINE)

        plan = tracker.generate_weekly_plan(slots_per_day=3)

        assert list(plan) == list(WEEKDAYS)
        flat = [slot.task_id for day in WEEKDAYS for slot in plan[day]]
        assert flat == [high.task_id, low.task_id] * 10 + [high.task_id]

    @pytest.mark.parametrize("slots", [None, 0, -4])
    def test_weekly_plan_default_slots(self, tracker: StudyTracker, slots: int | None) -> None:
        tracker.submit_task("only", "Math", 50, DEADLINE)

        plan = tracker.generate_weekly_plan(slots)

        assert all(len(plan[day]) == 3 for day in WEEKDAYS)

    @pytest.mark.parametrize("slots", ["3", 2.5])
    def test_weekly_plan_rejects_non_integer_slots(
        self,
        tracker: StudyTracker,
        slots: object,
    ) -> None:
        tracker.submit_task("only", "Math", 50, DEADLINE)

        with pytest.raises(ValidationError):
            tracker.generate_weekly_plan(slots)  # type: ignore[arg-type]

    def test_weekly_plan_empty(self, tracker: StudyTracker) -> None:
        plan = tracker.generate_weekly_plan(2)
        assert plan == {day: [] for day in WEEKDAYS}

    def test_weekly_plan_does_not_mutate(self, tracker: StudyTracker) -> None:
        tracker.submit_task("a", "Math", 50, DEADLINE)
        tracker.submit_task("b", "Math", 60, DEADLINE)
        before = tracker.list_tasks()

        tracker.generate_weekly_plan(5)

        assert tracker.list_tasks() == before


class TestUndoRedo:
    """Tests for undo and redo through the facade."""

    def test_nothing_to_undo_or_redo(self, tracker: StudyTracker) -> None:
        assert tracker.undo() == "Nothing to undo."
        assert tracker.redo() == "Nothing to redo."

    def test_undo_submission_then_redo(self, tracker: StudyTracker) -> None:
        keep = tracker.submit_task("keep", "Math", 10, DEADLINE)
        task = tracker.submit_task("undo me", "Math", 20, DEADLINE)

        assert tracker.undo() == "Undo: Task addition removed."
        assert tracker.list_tasks() == [keep]

        assert tracker.redo() == "Redo: Task added again."
        restored = tracker.peek_top_task()
        assert restored == task
        assert restored is not None and restored.task_id == task.task_id

    def test_undo_completion_then_submission_empties_queue(self, tracker: StudyTracker) -> None:
        tracker.submit_task("A", "Math", 10, DEADLINE)
        tracker.complete_top_task(1.0)

        assert tracker.undo().startswith("Undo: Task completion reversed")
        assert tracker.undo() == "Undo: Task addition removed."

        assert tracker.list_tasks() == []
        assert tracker.list_logs() == []
        assert tracker.undo() == "Nothing to undo."

    def test_undo_completion_restores_task_and_retracts_effects(
        self,
        tracker: StudyTracker,
    ) -> None:
        task = tracker.submit_task("Derivatives", "Calculus", 70, DEADLINE)
        tracker.complete_top_task(1.5)

        message = tracker.undo()

        assert message.startswith("Undo: Task completion reversed")
        assert tracker.list_tasks() == [task]
        assert tracker.list_logs() == []
        assert tracker.summarize_logs() == {}

    def test_redo_completion(self, tracker: StudyTracker) -> None:
        tracker.submit_task("Derivatives", "Calculus", 70, DEADLINE)
        tracker.complete_top_task(1.5)
        review = tracker.peek_top_task()
        tracker.undo()

        assert tracker.redo() == "Redo: Task marked completed again."
        assert tracker.list_tasks() == [review]
        assert tracker.summarize_logs() == {"Calculus": 1.5}

    def test_undo_dependency(self, tracker: StudyTracker) -> None:
        tracker.add_dependency("A", "B")
        tracker.add_dependency("B", "A")
        assert tracker.study_path().has_cycle

        assert tracker.undo() == "Undo: Dependency removed."
        assert tracker.study_path().subjects == ["A", "B"]

        assert tracker.redo() == "Redo: Dependency added again."
        assert tracker.study_path().has_cycle

    def test_new_action_discards_redo(self, tracker: StudyTracker) -> None:
        tracker.submit_task("A", "Math", 10, DEADLINE)
        tracker.undo()
        tracker.submit_task("B", "Math", 10, DEADLINE)

        assert tracker.redo() == "Nothing to redo."
        assert [task.title for task in tracker.list_tasks()] == ["B"]

    def test_ids_never_reused(self, tracker: StudyTracker) -> None:
        first = tracker.submit_task("A", "Math", 10, DEADLINE)
        tracker.undo()
        second = tracker.submit_task("B", "Math", 10, DEADLINE)
        assert second.task_id > first.task_id

    def test_logs_and_blocks_are_not_undoable(self, tracker: StudyTracker) -> None:
        tracker.insert_log("Math", 1.0)
        tracker.add_unavailable_block("09:00", "10:00")

        assert tracker.undo() == "Nothing to undo."
        assert len(tracker.list_logs()) == 1


class TestConfiguration:
    """Tests for config-driven behaviour."""

    def test_custom_review_policy(self, today: date) -> None:
        config = StudyTrackerConfig(
            review_priority=40,
            review_interval_days=7,
            first_task_id=500,
        )
        tracker = StudyTracker(config, today=lambda: today)
        tracker.submit_task("Sets", "Logic", 10, DEADLINE)
        tracker.complete_top_task(1.0)

        review = tracker.peek_top_task()
        assert review is not None
        assert review.task_id == 501
        assert review.priority == 40
        assert review.deadline == today + timedelta(days=7)

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STUDY_TRACKER_DEFAULT_SLOTS_PER_DAY", "5")
        monkeypatch.setenv("STUDY_TRACKER_REVIEW_PRIORITY", "99")

        config = StudyTrackerConfig()

        assert config.default_slots_per_day == 5
        assert config.review_priority == 99

    @pytest.mark.usefixtures("restore_logging")
    def test_setup_logging_uses_config(self) -> None:
        config = StudyTrackerConfig(logging=LoggingSettings(level="DEBUG", json_output=True))

        StudyTracker(config, setup_logging=True)

        assert logging.getLogger().level == logging.DEBUG
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    @pytest.mark.usefixtures("restore_logging")
    def test_setup_logging_applies_to_loggers_already_used(self) -> None:
        orchestrator.logger.info("before_reconfigure")

        configure_logging(json_output=True)

        bound = orchestrator.logger.bind()
        assert isinstance(bound._processors[-1], structlog.processors.JSONRenderer)
