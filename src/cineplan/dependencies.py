"""Request-scoped access to the cinema context held by the running app."""

from fastapi import Request

from cineplan.services.cinema import CinemaContext


def get_cinema(request: Request) -> CinemaContext:
    """
    Dependency for FastAPI to provide the cinema context.

    Usage:
        @router.get("/endpoint")
        async def endpoint(cinema: CinemaContext = Depends(get_cinema)):
            # Use cinema here
    """
    return request.app.state.cinema
