"""Pydantic schemas for movie data."""

from datetime import timedelta

from pydantic import BaseModel, Field

from cineplan.models import Movie


class MovieCreate(BaseModel):
    """Request body for adding or replacing a movie."""

    title: str = Field(min_length=1)
    duration_minutes: int = Field(gt=0)

    @property
    def duration(self) -> timedelta:
        return timedelta(minutes=self.duration_minutes)


class MovieResponse(BaseModel):
    """Movie response schema."""

    title: str
    duration_minutes: int

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(
            title=movie.title,
            duration_minutes=int(movie.duration.total_seconds()) // 60,
        )
