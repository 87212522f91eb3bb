"""Shared test fixtures."""

from datetime import timedelta

import pytest
from fastapi import FastAPI

from cineplan.api.routes import catalog, health, marathon, shows
from cineplan.models import Movie, Room
from cineplan.services.cinema import CinemaContext


@pytest.fixture
def cinema() -> CinemaContext:
    return CinemaContext()


@pytest.fixture
def test_app(cinema: CinemaContext) -> FastAPI:
    """Minimal FastAPI app without the lifespan, sharing the ``cinema`` fixture."""
    app = FastAPI()
    app.state.cinema = cinema
    app.include_router(health.router)
    app.include_router(catalog.router, prefix="/api")
    app.include_router(shows.router, prefix="/api")
    app.include_router(marathon.router, prefix="/api")
    return app


@pytest.fixture
def hall_a() -> Room:
    return Room("Hall A", 100)


@pytest.fixture
def alpha() -> Movie:
    return Movie("Alpha", timedelta(hours=1))
