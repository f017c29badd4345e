"""Project synthesized routes onto an absolute timeline."""

import math
from datetime import datetime, timedelta

from backend.planner.models.common import ROUTE_ID_BY_TYPE, TransitMode
from backend.planner.models.route import Route, RouteLeg
from backend.planner.models.timeline import (
    BusDetails,
    RouteOption,
    StepDetails,
    StepEndpoint,
    SubwayDetails,
    TrainDetails,
    TransitStep,
    WalkDetails,
)
from backend.planner.routing.distance import round_half_up

FLAT_TRANSIT_FARE = 1400
DEFAULT_SUBWAY_LINE = "2호선"
DEFAULT_BUS_NUMBER = "146"


def details_for_leg(leg: RouteLeg) -> StepDetails:
    """Typed details for a leg, keyed by its mode."""
    if leg.mode == TransitMode.subway:
        return SubwayDetails(
            line=leg.line or DEFAULT_SUBWAY_LINE,
            stops=math.ceil(leg.distance / 1000),
            fare=FLAT_TRANSIT_FARE,
            express=False,
        )
    if leg.mode == TransitMode.bus:
        return BusDetails(
            bus_number=leg.line or DEFAULT_BUS_NUMBER,
            stops=math.ceil(leg.distance / 1500),
            fare=FLAT_TRANSIT_FARE,
            bus_type="regular",
        )
    if leg.mode == TransitMode.train:
        # Train number is a placeholder until a timetable source exists
        return TrainDetails(
            train_type="KTX",
            train_number="KTX-101",
            fare=round_half_up(leg.distance / 100) * 100,
            seat_type="standard",
        )
    return WalkDetails(instruction=leg.instruction)


def step_for_leg(leg: RouteLeg) -> TransitStep:
    """Convert a route leg into a timeline step."""
    return TransitStep(
        mode=leg.mode,
        from_endpoint=StepEndpoint(name=leg.from_location.label, location=leg.from_location),
        to_endpoint=StepEndpoint(name=leg.to_location.label, location=leg.to_location),
        duration=leg.duration,
        distance=leg.distance,
        details=details_for_leg(leg),
    )


def project_route_options(routes: list[Route], now: datetime) -> list[RouteOption]:
    """Anchor routes at ``now`` for timeline display.

    Args:
        routes: Synthesized routes
        now: Departure instant shared by every option

    Returns:
        One RouteOption per route, ids remapped to the canonical route-N form
    """
    options = []
    for route in routes:
        options.append(
            RouteOption(
                id=ROUTE_ID_BY_TYPE[route.type],
                type=route.type,
                total_duration=route.duration,
                total_cost=route.cost,
                total_distance=route.distance,
                steps=[step_for_leg(leg) for leg in route.steps],
                departure_time=now,
                arrival_time=now + timedelta(minutes=route.duration),
            )
        )
    return options
