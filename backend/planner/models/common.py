"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Coordinate(BaseModel):
    """Geographic point (WGS84, decimal degrees) with optional display fields.

    Ranges are not validated: out-of-range input still produces structurally
    valid routes.
    """

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float
    address: str = ""
    name: str | None = None
    place_id: str | None = None

    @property
    def label(self) -> str:
        """Display label - name when present, otherwise address."""
        return self.name or self.address


class TransitMode(str, Enum):
    """Mode of a single route leg."""

    walk = "walk"
    bus = "bus"
    subway = "subway"
    train = "train"


class RouteType(str, Enum):
    """Route archetype - exactly one of each per generation call."""

    recommended = "recommended"
    fastest = "fastest"
    cheapest = "cheapest"


class Regime(str, Enum):
    """Distance bucket that selects the synthesis formulas."""

    short = "short"
    medium = "medium"
    long = "long"


# Canonical ids, stable across regenerations with different coordinates
ROUTE_ID_BY_TYPE: dict[RouteType, str] = {
    RouteType.recommended: "route-1",
    RouteType.fastest: "route-2",
    RouteType.cheapest: "route-3",
}

ROUTE_NAME_BY_TYPE: dict[RouteType, str] = {
    RouteType.recommended: "추천 경로",
    RouteType.fastest: "최단시간 경로",
    RouteType.cheapest: "최저비용 경로",
}

ROUTE_COLOR_BY_TYPE: dict[RouteType, str] = {
    RouteType.recommended: "#3B82F6",
    RouteType.fastest: "#EF4444",
    RouteType.cheapest: "#10B981",
}
