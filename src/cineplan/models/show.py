"""Show entity: a movie screened in a room at a fixed time."""

import logging
import threading
import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal, InvalidOperation

from cineplan.exceptions import ConstructionError
from cineplan.models.movie import Movie
from cineplan.models.room import Room

logger = logging.getLogger(__name__)


def _to_price(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        price = value
    else:
        try:
            # str() first so 9.99 does not become 9.9900000000000002131...
            price = Decimal(str(value))
        except InvalidOperation as e:
            raise ConstructionError(f"Invalid price: {value!r}") from e
    if not price.is_finite():
        raise ConstructionError(f"Invalid price: {value!r}")
    return price


class Show:
    """
    A scheduled screening.

    Movie, room, start time and price are fixed for the lifetime of the show.
    The only mutation is booking seats, which is all-or-nothing and never
    reversed.
    """

    def __init__(
        self,
        movie: Movie,
        room: Room,
        start: datetime,
        price: Decimal | int | float | str,
    ) -> None:
        if movie is None:
            raise ConstructionError("Show requires a movie")
        if room is None:
            raise ConstructionError("Show requires a room")
        if start.tzinfo is not None:
            raise ConstructionError("Show start must be a naive local datetime")

        price = _to_price(price)
        if price < 0:
            raise ConstructionError("Price can't be negative")

        self._id = uuid.uuid4()
        self._movie = movie
        self._room = room
        self._start = start
        self._price = price
        self._taken: set[int] = set()
        self._lock = threading.Lock()

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def movie(self) -> Movie:
        return self._movie

    @property
    def room(self) -> Room:
        return self._room

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        # Derived on every access so it can never drift from the movie duration
        return self._start + self._movie.duration

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def booked_seats(self) -> frozenset[int]:
        return frozenset(self._taken)

    @property
    def available_seats(self) -> int:
        return self._room.capacity - len(self._taken)

    def unavailable_seats(self, seat_numbers: Iterable[int]) -> list[int]:
        """
        Return the requested seat numbers that do not exist in this room.

        Args:
            seat_numbers: Seat numbers a caller intends to book

        Returns:
            Seats outside 1..capacity, in request order
        """
        return [s for s in seat_numbers if s < 1 or s > self._room.capacity]

    def try_book(self, seat_numbers: Sequence[int] | None) -> bool:
        """
        Reserve every requested seat, or none of them.

        The request fails when it is empty, when any seat is outside
        1..capacity, when any seat is already booked, or when the same seat
        appears twice in the request.

        Args:
            seat_numbers: Seat numbers to reserve

        Returns:
            True if all seats were booked, False if nothing changed
        """
        if not seat_numbers:
            logger.debug(f"Show {self._id.hex}: empty booking request rejected")
            return False

        seats = list(seat_numbers)

        with self._lock:
            requested: set[int] = set()
            for seat in seats:
                if seat < 1 or seat > self._room.capacity:
                    logger.debug(f"Show {self._id.hex}: seat {seat} out of range")
                    return False
                if seat in self._taken:
                    logger.debug(f"Show {self._id.hex}: seat {seat} already taken")
                    return False
                if seat in requested:
                    logger.debug(f"Show {self._id.hex}: seat {seat} repeated in request")
                    return False
                requested.add(seat)

            self._taken.update(requested)

        logger.info(
            f"Booked {len(seats)} seat(s) for {self._movie.title} at "
            f"{self._start:%Y-%m-%d %H:%M}: {', '.join(map(str, seats))}"
        )
        return True

    def __repr__(self) -> str:
        return (
            f"<Show(id={self._id.hex!r}, "
            f"movie={self._movie.title!r}, "
            f"room={self._room.name!r}, "
            f"start={self._start})>"
        )

    def __str__(self) -> str:
        return (
            f"[{self._id.hex}] {self._movie.title} | {self._room.name} | "
            f"{self._start:%Y-%m-%d %H:%M} - {self.end:%H:%M} | ${self._price:.2f} | "
            f"Seats: {self.available_seats}/{self._room.capacity} available"
        )
