"""Models package - re-exports for convenience."""

from backend.planner.models.common import (
    ROUTE_ID_BY_TYPE,
    Coordinate,
    Regime,
    RouteType,
    TransitMode,
)
from backend.planner.models.cost import (
    AccommodationCost,
    ActivityCost,
    CostBreakdown,
    FoodCost,
    TransportationCost,
)
from backend.planner.models.route import Route, RouteLeg
from backend.planner.models.timeline import (
    BusDetails,
    RouteOption,
    StepEndpoint,
    SubwayDetails,
    TrainDetails,
    TransitStep,
    WalkDetails,
)
from backend.planner.models.transit import BusArrival, SubwayArrival
from backend.planner.models.travel import TravelDuration, TravelPlan

__all__ = [
    # Common
    "Coordinate",
    "TransitMode",
    "RouteType",
    "Regime",
    "ROUTE_ID_BY_TYPE",
    # Routes
    "Route",
    "RouteLeg",
    # Timeline
    "RouteOption",
    "TransitStep",
    "StepEndpoint",
    "WalkDetails",
    "BusDetails",
    "SubwayDetails",
    "TrainDetails",
    # Transit feed
    "BusArrival",
    "SubwayArrival",
    # Cost
    "CostBreakdown",
    "TransportationCost",
    "FoodCost",
    "ActivityCost",
    "AccommodationCost",
    # Travel
    "TravelPlan",
    "TravelDuration",
]
