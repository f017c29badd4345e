"""Travel plan models - the user's trip parameters."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from backend.planner.models.common import Coordinate


class TravelDuration(str, Enum):
    """Preset trip lengths offered by the input form."""

    daytrip = "daytrip"
    one_night = "1night"
    two_nights = "2nights"
    custom = "custom"


class TravelPlan(BaseModel):
    """Current travel plan as collected from the user."""

    origin: Coordinate | None = None
    destination: Coordinate | None = None
    departure_date: date | None = None
    departure_time: str = Field("09:00", pattern=r"^\d{2}:\d{2}$")
    duration: int = Field(1, ge=1)  # days
    participants: int = Field(1, ge=1)
