"""Room and movie catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from cineplan.dependencies import get_cinema
from cineplan.exceptions import ConstructionError
from cineplan.schemas import MovieCreate, MovieResponse, RoomCreate, RoomResponse
from cineplan.services.cinema import CinemaContext

router = APIRouter()


@router.post("/rooms", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def add_room(
    request: RoomCreate,
    cinema: CinemaContext = Depends(get_cinema),
) -> RoomResponse:
    """Add a room, replacing any existing room with the same name."""
    try:
        room = cinema.add_room(request.name, request.capacity)
    except ConstructionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return RoomResponse.model_validate(room)


@router.get("/rooms", response_model=list[RoomResponse])
async def get_rooms(cinema: CinemaContext = Depends(get_cinema)) -> list[RoomResponse]:
    return [
        RoomResponse.model_validate(room)
        for room in sorted(cinema.rooms.values(), key=lambda r: r.name)
    ]


@router.post("/movies", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
async def add_movie(
    request: MovieCreate,
    cinema: CinemaContext = Depends(get_cinema),
) -> MovieResponse:
    """Add a movie, replacing any existing movie with the same title."""
    try:
        movie = cinema.add_movie(request.title, request.duration)
    except ConstructionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return MovieResponse.from_movie(movie)


@router.get("/movies", response_model=list[MovieResponse])
async def get_movies(cinema: CinemaContext = Depends(get_cinema)) -> list[MovieResponse]:
    return [
        MovieResponse.from_movie(movie)
        for movie in sorted(cinema.movies.values(), key=lambda m: m.title)
    ]
