"""In-memory registry of every show known to the process."""

import logging
import threading
import uuid
from datetime import date

from cineplan.exceptions import NullReferenceError
from cineplan.models.show import Show

logger = logging.getLogger(__name__)


class ShowStore:
    """
    Owns all Show entities for the lifetime of the process.

    Shows are appended in arrival order and never removed. Two shows with
    identical movie, room and time are two separate entries.
    """

    def __init__(self) -> None:
        self._shows: list[Show] = []
        self._lock = threading.Lock()

    def add(self, show: Show) -> None:
        """
        Register a show.

        Raises:
            NullReferenceError: If show is None
        """
        if show is None:
            raise NullReferenceError("show must not be None")
        with self._lock:
            self._shows.append(show)
        logger.info(f"Registered show {show.id.hex}: {show.movie.title} in {show.room.name}")

    def find(self, show_id: uuid.UUID) -> Show | None:
        """Return the show with this identifier, or None if there is none."""
        return next((show for show in self.all() if show.id == show_id), None)

    def all(self) -> list[Show]:
        """Return a snapshot of every show added so far."""
        with self._lock:
            return list(self._shows)

    def on_day(self, day: date) -> list[Show]:
        """Return the shows starting on the given day, earliest first."""
        return sorted(
            (show for show in self.all() if show.start.date() == day),
            key=lambda show: show.start,
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._shows)
