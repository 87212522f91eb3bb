"""Pydantic schemas for show and booking data."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from cineplan.models import Show


class ShowCreate(BaseModel):
    """Request body for scheduling a show."""

    movie_title: str
    room_name: str
    start_time: datetime
    price: Decimal


class ShowResponse(BaseModel):
    """Scheduled show with its current seat availability."""

    id: str
    movie_title: str
    room_name: str
    start_time: datetime
    end_time: datetime
    price: float
    capacity: int
    available_seats: int

    @classmethod
    def from_show(cls, show: Show) -> "ShowResponse":
        return cls(
            id=show.id.hex,
            movie_title=show.movie.title,
            room_name=show.room.name,
            start_time=show.start,
            end_time=show.end,
            price=float(show.price),
            capacity=show.room.capacity,
            available_seats=show.available_seats,
        )


class BookingRequest(BaseModel):
    """Seats to reserve in a single all-or-nothing request."""

    seats: list[int] = Field(min_length=1)


class BookingResponse(BaseModel):
    """Result of a successful booking."""

    show_id: str
    booked: list[int]
    available_seats: int
    capacity: int
