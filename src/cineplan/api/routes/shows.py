"""Show scheduling and seat booking endpoints."""

import logging
import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from cineplan.dependencies import get_cinema
from cineplan.exceptions import CatalogLookupError, ConstructionError
from cineplan.models import Show
from cineplan.schemas import BookingRequest, BookingResponse, ShowCreate, ShowResponse
from cineplan.services.cinema import CinemaContext

logger = logging.getLogger(__name__)
router = APIRouter()


def get_show_or_404(show_id: str, cinema: CinemaContext) -> Show:
    try:
        parsed = uuid.UUID(show_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Show not found") from None

    show = cinema.store.find(parsed)
    if show is None:
        raise HTTPException(status_code=404, detail="Show not found")
    return show


@router.post("/shows", response_model=ShowResponse, status_code=status.HTTP_201_CREATED)
async def create_show(
    request: ShowCreate,
    cinema: CinemaContext = Depends(get_cinema),
) -> ShowResponse:
    """
    Schedule a catalog movie in a catalog room.

    Start times are treated as local wall-clock times; any UTC offset sent by
    the client is dropped rather than converted.
    """
    start_time = request.start_time.replace(tzinfo=None)
    try:
        show = cinema.create_show(request.movie_title, request.room_name, start_time, request.price)
    except CatalogLookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ConstructionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return ShowResponse.from_show(show)


@router.get("/shows", response_model=list[ShowResponse])
async def get_shows(
    date_param: date = Query(..., alias="date", description="Day to list (YYYY-MM-DD)"),
    cinema: CinemaContext = Depends(get_cinema),
) -> list[ShowResponse]:
    """List the shows starting on a day, earliest first."""
    return [ShowResponse.from_show(show) for show in cinema.store.on_day(date_param)]


@router.get("/shows/{show_id}", response_model=ShowResponse)
async def get_show(
    show_id: str,
    cinema: CinemaContext = Depends(get_cinema),
) -> ShowResponse:
    return ShowResponse.from_show(get_show_or_404(show_id, cinema))


@router.post("/shows/{show_id}/bookings", response_model=BookingResponse)
async def book_seats(
    show_id: str,
    request: BookingRequest,
    cinema: CinemaContext = Depends(get_cinema),
) -> BookingResponse:
    """
    Book seats for a show.

    All requested seats are booked or none are. A conflict (seat out of
    range, already taken, or repeated in the request) returns 409.
    """
    show = get_show_or_404(show_id, cinema)

    invalid = show.unavailable_seats(request.seats)
    if invalid:
        raise HTTPException(
            status_code=409,
            detail=(
                f"Invalid seats: {', '.join(map(str, invalid))}. "
                f"Seats must be between 1 and {show.room.capacity}"
            ),
        )

    if not show.try_book(request.seats):
        logger.info(f"Booking conflict for show {show.id.hex}: {request.seats}")
        raise HTTPException(
            status_code=409,
            detail=(
                "Booking failed. Some seats may be taken. "
                f"Remaining: {show.available_seats}/{show.room.capacity}"
            ),
        )

    return BookingResponse(
        show_id=show.id.hex,
        booked=request.seats,
        available_seats=show.available_seats,
        capacity=show.room.capacity,
    )
