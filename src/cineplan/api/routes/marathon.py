"""Marathon plan endpoint."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from cineplan.dependencies import get_cinema
from cineplan.schemas import MarathonResponse, MarathonStopResponse, ShowResponse
from cineplan.services.cinema import CinemaContext

router = APIRouter()


@router.get("/marathon", response_model=MarathonResponse)
async def get_marathon(
    date_param: date = Query(..., alias="date", description="Day to plan (YYYY-MM-DD)"),
    cinema: CinemaContext = Depends(get_cinema),
) -> MarathonResponse:
    """
    Plan the largest number of non-overlapping shows on a day.

    An empty plan is a normal response, not an error.
    """
    plan = cinema.plan_marathon(date_param)
    summary = cinema.planner.summarize(date_param, plan)

    stops = [
        MarathonStopResponse(
            show=ShowResponse.from_show(stop.show),
            break_minutes=(
                int(stop.break_after.total_seconds()) // 60
                if stop.break_after is not None
                else None
            ),
        )
        for stop in summary.stops
    ]

    return MarathonResponse(
        date=date_param,
        shows=stops,
        movie_count=summary.movie_count,
        total_minutes=int(summary.total_time.total_seconds()) // 60,
        total_cost=float(summary.total_cost),
        average_price=(
            float(summary.average_price) if summary.average_price is not None else None
        ),
    )
