"""CinePlan: show catalog, seat booking and marathon planning for a cinema."""

from cineplan.models import Movie, Room, Show
from cineplan.services.cinema import CinemaContext, create_show
from cineplan.services.marathon_planner import MarathonPlanner, plan_marathon
from cineplan.services.show_store import ShowStore

__all__ = [
    "CinemaContext",
    "MarathonPlanner",
    "Movie",
    "Room",
    "Show",
    "ShowStore",
    "create_show",
    "plan_marathon",
]
