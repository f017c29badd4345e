"""Timeline models - route options with per-mode step details."""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from backend.planner.models.common import Coordinate, RouteType, TransitMode


class WalkDetails(BaseModel):
    """Walking step details."""

    type: Literal["walk"] = "walk"
    instruction: str


class BusDetails(BaseModel):
    """Bus step details."""

    type: Literal["bus"] = "bus"
    bus_number: str
    stops: int = Field(..., ge=0)
    fare: int = Field(..., ge=0)
    bus_type: Literal["express", "regular", "local"] = "regular"


class SubwayDetails(BaseModel):
    """Subway step details."""

    type: Literal["subway"] = "subway"
    line: str
    stops: int = Field(..., ge=0)
    fare: int = Field(..., ge=0)
    express: bool = False


class TrainDetails(BaseModel):
    """Intercity train step details."""

    type: Literal["train"] = "train"
    train_type: Literal["KTX", "ITX", "Mugunghwa"]
    train_number: str
    fare: int = Field(..., ge=0)
    seat_type: Literal["standard", "first"] = "standard"


StepDetails = Annotated[
    WalkDetails | BusDetails | SubwayDetails | TrainDetails,
    Field(discriminator="type"),
]


class StepEndpoint(BaseModel):
    """Named end of a timeline step."""

    name: str
    location: Coordinate


class TransitStep(BaseModel):
    """Single step on a route timeline."""

    mode: TransitMode
    from_endpoint: StepEndpoint
    to_endpoint: StepEndpoint
    duration: int = Field(..., ge=0)  # minutes
    distance: int = Field(..., ge=0)  # meters
    details: StepDetails


class RouteOption(BaseModel):
    """Route anchored to absolute departure/arrival times for timeline display."""

    id: str
    type: RouteType
    total_duration: int  # minutes
    total_cost: int  # KRW
    total_distance: int  # meters
    steps: list[TransitStep]
    departure_time: datetime
    arrival_time: datetime
