"""Undo/redo history for study_tracker."""

from study_tracker.models.action import Action

__all__ = [
    "UndoRedoLog",
]


class UndoRedoLog:
    """Linear undo/redo history of recorded actions.

    The log never interprets actions; reversing or re-applying them is
    the caller's job. Recording a new action discards all redo history.
    """

    def __init__(self) -> None:
        self._undo: list[Action] = []
        self._redo: list[Action] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def record(self, action: Action) -> None:
        """Push a new forward action and clear the redo stack."""
        self._undo.append(action)
        self._redo.clear()

    def undo(self) -> Action | None:
        """Move the most recent action to the redo stack and return it."""
        if not self._undo:
            return None
        action = self._undo.pop()
        self._redo.append(action)
        return action

    def redo(self) -> Action | None:
        """Move the most recently undone action back and return it."""
        if not self._redo:
            return None
        action = self._redo.pop()
        self._undo.append(action)
        return action
