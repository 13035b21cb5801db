"""Subject dependency graph for study_tracker.

This module provides the prerequisite graph between subjects and the
study path computed from it.
"""

from collections import deque

from study_tracker.logging import get_logger

__all__ = [
    "SubjectGraph",
]

logger = get_logger(__name__)


class SubjectGraph:
    """Directed graph of subject prerequisites.

    Graph structure:
    - node per subject name
    - edge prerequisite -> dependent, at most one per ordered pair

    Self-loops are accepted; like any other cycle they make the study
    path empty.

    Example:
        graph = SubjectGraph()
        graph.add_dependency("Algebra", "Calculus")
        graph.study_path()  # ["Algebra", "Calculus"]
    """

    def __init__(self) -> None:
        # Insertion-ordered adjacency: subject -> subjects that depend on it
        self._adjacency: dict[str, list[str]] = {}

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency

    def add_subject(self, name: str) -> None:
        """Ensure a subject node exists."""
        if name not in self._adjacency:
            self._adjacency[name] = []
            logger.debug("subject_added", subject=name)

    def add_dependency(self, prerequisite: str, dependent: str) -> None:
        """Add the edge prerequisite -> dependent if not already present.

        Args:
            prerequisite: Subject to study first
            dependent: Subject that requires the prerequisite
        """
        self.add_subject(prerequisite)
        self.add_subject(dependent)
        edges = self._adjacency[prerequisite]
        if dependent not in edges:
            edges.append(dependent)
            logger.debug("dependency_added", prerequisite=prerequisite, dependent=dependent)

    def remove_dependency(self, prerequisite: str, dependent: str) -> None:
        """Remove the edge prerequisite -> dependent; absent edges are ignored.

        Subject nodes are kept.
        """
        edges = self._adjacency.get(prerequisite)
        if edges and dependent in edges:
            edges.remove(dependent)
            logger.debug("dependency_removed", prerequisite=prerequisite, dependent=dependent)

    def dependents_of(self, name: str) -> tuple[str, ...]:
        """Subjects that list ``name`` as a direct prerequisite."""
        return tuple(self._adjacency.get(name, ()))

    def all_subjects(self) -> frozenset[str]:
        """Read-only view of every known subject."""
        return frozenset(self._adjacency)

    def study_path(self) -> list[str]:
        """Compute a topological order using Kahn's algorithm.

        In-degrees are counted from all edges, zero in-degree subjects seed
        a FIFO queue, and each dequeued subject releases its dependents.

        Returns:
            Subjects in prerequisite order, or an empty list if the graph
            is empty or contains a cycle
        """
        if not self._adjacency:
            return []

        in_degree = dict.fromkeys(self._adjacency, 0)
        for dependents in self._adjacency.values():
            for dependent in dependents:
                in_degree[dependent] += 1

        queue = deque(name for name, degree in in_degree.items() if degree == 0)
        path: list[str] = []

        while queue:
            subject = queue.popleft()
            path.append(subject)
            for dependent in self._adjacency[subject]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    queue.append(dependent)

        if len(path) < len(self._adjacency):
            logger.debug(
                "study_path_cycle_detected",
                unresolved=len(self._adjacency) - len(path),
            )
            return []

        return path
