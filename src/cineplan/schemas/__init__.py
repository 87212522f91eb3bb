"""Pydantic schemas for API requests and responses."""

from cineplan.schemas.marathon import MarathonResponse, MarathonStopResponse
from cineplan.schemas.movie import MovieCreate, MovieResponse
from cineplan.schemas.room import RoomCreate, RoomResponse
from cineplan.schemas.show import (
    BookingRequest,
    BookingResponse,
    ShowCreate,
    ShowResponse,
)

__all__ = [
    "RoomCreate",
    "RoomResponse",
    "MovieCreate",
    "MovieResponse",
    "ShowCreate",
    "ShowResponse",
    "BookingRequest",
    "BookingResponse",
    "MarathonStopResponse",
    "MarathonResponse",
]
