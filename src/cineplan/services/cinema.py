"""Catalog context: rooms, movies and shows owned by one caller."""

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal

from cineplan.exceptions import CatalogLookupError
from cineplan.models import Movie, Room, Show
from cineplan.services.marathon_planner import MarathonPlanner
from cineplan.services.show_store import ShowStore

logger = logging.getLogger(__name__)


def create_show(
    movie: Movie,
    room: Room,
    start_time: datetime,
    price: Decimal | int | float | str,
) -> Show:
    """
    Build a new show.

    Raises:
        ConstructionError: If movie or room is None, or price is negative
    """
    return Show(movie, room, start_time, price)


class CinemaContext:
    """
    Everything one cinema knows about at runtime.

    Created by the top-level caller (the web app lifespan or the console
    loop) and passed to the code that needs it. Rooms and movies are keyed by
    name; adding one with an existing name replaces it.
    """

    def __init__(
        self,
        store: ShowStore | None = None,
        planner: MarathonPlanner | None = None,
    ) -> None:
        self.rooms: dict[str, Room] = {}
        self.movies: dict[str, Movie] = {}
        self.store = store or ShowStore()
        self.planner = planner or MarathonPlanner()

    def add_room(self, name: str, capacity: int) -> Room:
        room = Room(name, capacity)
        if name in self.rooms:
            logger.warning(f"Room '{name}' already exists. Updating...")
        self.rooms[name] = room
        return room

    def add_movie(self, title: str, duration: timedelta) -> Movie:
        movie = Movie(title, duration)
        if title in self.movies:
            logger.warning(f"Movie '{title}' already exists. Updating...")
        self.movies[title] = movie
        return movie

    def create_show(
        self,
        movie_title: str,
        room_name: str,
        start_time: datetime,
        price: Decimal | int | float | str,
    ) -> Show:
        """
        Schedule a catalog movie in a catalog room and register the show.

        Args:
            movie_title: Title of a movie added with ``add_movie``
            room_name: Name of a room added with ``add_room``
            start_time: Naive start datetime
            price: Non-negative ticket price

        Returns:
            The registered show

        Raises:
            CatalogLookupError: If the movie or room is unknown
            ConstructionError: If the price is negative
        """
        movie = self.movies.get(movie_title)
        if movie is None:
            raise CatalogLookupError("movie", movie_title, list(self.movies))

        room = self.rooms.get(room_name)
        if room is None:
            raise CatalogLookupError("room", room_name, list(self.rooms))

        show = create_show(movie, room, start_time, price)
        self.store.add(show)
        return show

    def plan_marathon(self, day: date) -> list[Show]:
        return self.planner.plan(day, self.store.all())
