"""Real-time transit feed models."""

from typing import Literal

from pydantic import BaseModel, Field


class BusArrival(BaseModel):
    """Predicted bus arrival at a stop."""

    bus_number: str
    remaining_time: int = Field(..., ge=0)  # seconds
    remaining_stops: int = Field(..., ge=0)
    bus_type: Literal["express", "regular", "local"]
    low_floor: bool
    station_name: str


class SubwayArrival(BaseModel):
    """Predicted subway arrival at a station."""

    line: str
    destination: str
    remaining_time: int = Field(..., ge=0)  # seconds
    train_type: Literal["express", "regular"]
    congestion: Literal["low", "medium", "high"]
    direction: Literal["up", "down"]
    station_name: str

