"""Route generation entry points."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from backend.planner.models.common import Coordinate, Regime
from backend.planner.models.route import Route
from backend.planner.models.timeline import RouteOption
from backend.planner.routing.distance import distance_km, round_half_up
from backend.planner.routing.regime import classify_regime
from backend.planner.routing.synthesis import (
    synthesize_long_distance,
    synthesize_medium_distance,
    synthesize_short_distance,
)
from backend.planner.routing.timeline import project_route_options
from backend.planner.utils.metrics import route_generations_total

logger = logging.getLogger(__name__)

Synthesizer = Callable[[Coordinate, Coordinate, float, int], list[Route]]

SYNTHESIZERS: dict[Regime, Synthesizer] = {
    Regime.short: synthesize_short_distance,
    Regime.medium: synthesize_medium_distance,
    Regime.long: synthesize_long_distance,
}


def generate_routes(origin: Coordinate, destination: Coordinate) -> list[Route]:
    """Generate recommended/fastest/cheapest routes between two points.

    Args:
        origin: Trip start
        destination: Trip end

    Returns:
        Exactly three routes, ids route-1..route-3 in that type order
    """
    km = distance_km(origin, destination)
    meters = round_half_up(km * 1000)
    regime = classify_regime(km)

    logger.info(
        f"Generating routes: {origin.label} -> {destination.label} ({km:.1f} km, {regime.value})",
        extra={
            "structured": {
                "origin": origin.label,
                "destination": destination.label,
                "distance_km": round(km, 3),
                "regime": regime.value,
            }
        },
    )
    route_generations_total.labels(regime=regime.value).inc()

    return SYNTHESIZERS[regime](origin, destination, km, meters)


def generate_route_options(
    origin: Coordinate,
    destination: Coordinate,
    now: datetime | None = None,
) -> list[RouteOption]:
    """Generate routes and anchor them on a timeline starting at ``now``.

    Args:
        origin: Trip start
        destination: Trip end
        now: Departure instant (default: current UTC time, captured once)

    Returns:
        Three RouteOption values sharing one departure time
    """
    departure = now if now is not None else datetime.now(UTC)
    return project_route_options(generate_routes(origin, destination), departure)
