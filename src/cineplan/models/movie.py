"""Movie value object."""

from dataclasses import dataclass
from datetime import timedelta

from cineplan.exceptions import ConstructionError
from cineplan.utils.text import format_duration


@dataclass(frozen=True)
class Movie:
    """
    A film that can be scheduled.

    Two movies are equal when both title and duration match.
    """

    title: str
    duration: timedelta

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ConstructionError("Movie title must not be empty")
        if self.duration <= timedelta(0):
            raise ConstructionError("Movie duration must be positive")

    def __str__(self) -> str:
        return f"{self.title} ({format_duration(self.duration)})"
