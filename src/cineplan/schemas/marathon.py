"""Pydantic schemas for marathon plans."""

from datetime import date

from pydantic import BaseModel

from cineplan.schemas.show import ShowResponse


class MarathonStopResponse(BaseModel):
    """A show in the plan and the gap before the next one."""

    show: ShowResponse
    break_minutes: int | None = None


class MarathonResponse(BaseModel):
    """Response for the marathon endpoint."""

    date: date
    shows: list[MarathonStopResponse]
    movie_count: int
    total_minutes: int
    total_cost: float
    average_price: float | None = None
