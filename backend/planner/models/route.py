"""Route models - synthesized alternatives and their legs."""

from pydantic import BaseModel, Field

from backend.planner.models.common import Coordinate, RouteType, TransitMode


class RouteLeg(BaseModel):
    """One uninterrupted segment of a route using a single mode.

    Zero-distance legs are legal (e.g. a final walk whose endpoints coincide).
    """

    mode: TransitMode
    from_location: Coordinate
    to_location: Coordinate
    duration: int = Field(..., ge=0)  # minutes
    distance: int = Field(..., ge=0)  # meters
    instruction: str
    line: str | None = None
    line_color: str | None = None


class Route(BaseModel):
    """One complete route alternative."""

    id: str
    type: RouteType
    name: str
    duration: int = Field(..., ge=0)  # minutes
    cost: int = Field(..., ge=0)  # KRW
    transfers: int = Field(..., ge=0)
    distance: int = Field(..., ge=0)  # meters
    color: str
    steps: list[RouteLeg] = Field(..., min_length=1)
