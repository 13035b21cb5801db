"""Subject graph models for study_tracker."""

from pydantic import BaseModel, Field

__all__ = [
    "StudyPathDTO",
]


class StudyPathDTO(BaseModel, frozen=True):
    """Ordered study path over all known subjects.

    An empty ``subjects`` list means either that no subjects exist yet or
    that the prerequisites contain a cycle; ``has_cycle`` tells them apart.

    Attributes:
        subjects: Subjects in prerequisite order
        has_cycle: True if subjects exist but no ordering is possible
    """

    subjects: list[str] = Field(default_factory=list)
    has_cycle: bool = Field(default=False)
