"""Core cinema entities."""

from cineplan.models.movie import Movie
from cineplan.models.room import Room
from cineplan.models.show import Show

__all__ = ["Movie", "Room", "Show"]
