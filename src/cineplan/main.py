"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cineplan.api.routes import catalog, health, marathon, shows
from cineplan.config import settings
from cineplan.services.cinema import CinemaContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the context lives exactly as long as the app
    logging.basicConfig(level=settings.log_level.upper())
    app.state.cinema = CinemaContext()
    logger.info("Cinema context created")

    yield

    logger.info(f"Shutting down with {len(app.state.cinema.store)} show(s) in memory")


# Create FastAPI app
app = FastAPI(
    title="CinePlan API",
    description="Show catalog, seat booking and marathon planning for a single cinema",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(catalog.router, prefix="/api", tags=["catalog"])
app.include_router(shows.router, prefix="/api", tags=["shows"])
app.include_router(marathon.router, prefix="/api", tags=["marathon"])


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run("cineplan.main:app", host=settings.api_host, port=settings.api_port)
