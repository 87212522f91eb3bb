"""Pydantic schemas for room data."""

from pydantic import BaseModel, ConfigDict, Field


class RoomCreate(BaseModel):
    """Request body for adding or replacing a room."""

    name: str = Field(min_length=1)
    capacity: int = Field(gt=0)


class RoomResponse(BaseModel):
    """Room response schema."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    capacity: int
