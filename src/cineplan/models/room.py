"""Room value object."""

from dataclasses import dataclass

from cineplan.exceptions import ConstructionError


@dataclass(frozen=True)
class Room:
    """A screening room with a fixed number of seats, numbered from 1."""

    name: str
    capacity: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ConstructionError("Room name must not be empty")
        if self.capacity <= 0:
            raise ConstructionError("Room capacity must be a positive number")

    def __str__(self) -> str:
        return f"{self.name} (Capacity: {self.capacity})"
