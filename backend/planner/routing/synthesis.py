"""Per-regime route synthesis.

Each synthesizer returns ``[recommended, fastest, cheapest]`` for a trip.
Durations, fares and leg splits are fixed design formulas, not the result of
a search: the point is a plausible, stable set of alternatives that the UI
can draw and compare.

Leg endpoints are interpolated between origin and destination (longitude
wrapping at the antimeridian), so consecutive legs chain end-to-end and the
map has distinct points to draw.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from backend.planner.models.common import (
    ROUTE_COLOR_BY_TYPE,
    ROUTE_ID_BY_TYPE,
    ROUTE_NAME_BY_TYPE,
    Coordinate,
    RouteType,
    TransitMode,
)
from backend.planner.models.route import Route, RouteLeg
from backend.planner.routing.distance import round_half_up

# Line colors (Seoul Metro / bus livery)
KTX_COLOR = "#0052A4"
LINE_1_COLOR = "#0052A4"
LINE_2_COLOR = "#00A84D"
EXPRESS_BUS_COLOR = "#FF6B6B"
TRUNK_BUS_COLOR = "#33CC99"
BRANCH_BUS_COLOR = "#3D5BAB"

# Flat fares (KRW)
BUS_FARE = 1400
TRANSFER_SURCHARGE = 2800
EXPRESS_SURCHARGE = 4000


@dataclass(frozen=True)
class LegPlan:
    """Shape of one leg before it is placed on the map."""

    mode: TransitMode
    instruction: str
    share: float  # fraction of the route distance
    stop: str = ""  # name of the point the leg ends at; formatted with origin/destination
    line: str | None = None
    line_color: str | None = None


def split_total(total: int, ratios: Sequence[float]) -> list[int]:
    """Apportion an integer total by ratios.

    Every part but the last is ``round_half_up(total * ratio)``; the last part
    takes the remainder, floored at zero.
    """
    parts = [round_half_up(total * ratio) for ratio in ratios[:-1]]
    parts.append(max(0, total - sum(parts)))
    return parts


def waypoint(origin: Coordinate, destination: Coordinate, fraction: float, name: str) -> Coordinate:
    """Point at ``fraction`` of the way from origin to destination.

    Longitude takes the short way round, so trips across the antimeridian
    stay near it instead of sweeping through Greenwich.
    """
    d_lng = destination.lng - origin.lng
    if d_lng > 180:
        d_lng -= 360
    elif d_lng < -180:
        d_lng += 360

    lng = origin.lng + d_lng * fraction
    if lng > 180:
        lng -= 360
    elif lng < -180:
        lng += 360

    return Coordinate(
        lat=origin.lat + (destination.lat - origin.lat) * fraction,
        lng=lng,
        address=origin.address if fraction < 0.5 else destination.address,
        name=name,
    )


def build_route(
    route_type: RouteType,
    origin: Coordinate,
    destination: Coordinate,
    distance_m: int,
    plans: Sequence[LegPlan],
    leg_minutes: Sequence[int],
    *,
    duration: int,
    cost: int,
    transfers: int,
) -> Route:
    """Assemble a Route from leg plans and per-leg durations.

    The first leg starts at ``origin`` and the last ends at ``destination``;
    the passed endpoint objects are reused unchanged.
    """
    leg_meters = split_total(distance_m, [plan.share for plan in plans])
    origin_label = origin.label or "출발지"
    destination_label = destination.label or "도착지"

    steps: list[RouteLeg] = []
    start = origin
    travelled = 0.0
    for index, (plan, minutes, meters) in enumerate(zip(plans, leg_minutes, leg_meters)):
        travelled += plan.share
        if index == len(plans) - 1:
            end = destination
        else:
            stop_name = plan.stop.format(origin=origin_label, destination=destination_label)
            end = waypoint(origin, destination, travelled, stop_name)

        steps.append(
            RouteLeg(
                mode=plan.mode,
                from_location=start,
                to_location=end,
                duration=max(0, minutes),
                distance=meters,
                instruction=plan.instruction,
                line=plan.line,
                line_color=plan.line_color,
            )
        )
        start = end

    return Route(
        id=ROUTE_ID_BY_TYPE[route_type],
        type=route_type,
        name=ROUTE_NAME_BY_TYPE[route_type],
        duration=duration,
        cost=cost,
        transfers=transfers,
        distance=distance_m,
        color=ROUTE_COLOR_BY_TYPE[route_type],
        steps=steps,
    )


def synthesize_long_distance(
    origin: Coordinate,
    destination: Coordinate,
    distance_km: float,
    distance_m: int,
) -> list[Route]:
    """Train-centric routes for trips over 100 km."""
    train_minutes = round_half_up(distance_km / 3)  # ~200 km/h KTX average
    train_fare = round_half_up(distance_km * 50)

    recommended = build_route(
        RouteType.recommended,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "기차역까지 도보 이동", 0.01, "{origin} 기차역"),
            LegPlan(TransitMode.train, "KTX 탑승", 0.9, "{destination} 기차역", "KTX", KTX_COLOR),
            LegPlan(
                TransitMode.subway,
                "지하철 1호선 환승",
                0.08,
                "{destination} 지하철역",
                "1호선",
                LINE_1_COLOR,
            ),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.01),
        ],
        [10, train_minutes, 15, 5],
        duration=train_minutes + 30,
        cost=train_fare + TRANSFER_SURCHARGE,
        transfers=2,
    )

    fastest = build_route(
        RouteType.fastest,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "기차역까지 도보 이동", 0.01, "{origin} 기차역"),
            LegPlan(TransitMode.train, "KTX 직통 탑승", 0.98, "{destination} 기차역", "KTX", KTX_COLOR),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.01),
        ],
        [5, train_minutes - 5, 5],  # express is faster
        duration=train_minutes + 5,
        cost=train_fare + EXPRESS_SURCHARGE,
        transfers=1,
    )

    slow_train_minutes = train_minutes + 40
    cheapest = build_route(
        RouteType.cheapest,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "기차역까지 도보 이동", 0.01, "{origin} 기차역"),
            LegPlan(TransitMode.train, "ITX/무궁화호 탑승", 0.92, "{destination} 기차역", "ITX", KTX_COLOR),
            LegPlan(
                TransitMode.bus,
                "간선버스 환승",
                0.06,
                "{destination} 정류장",
                "간선버스",
                TRUNK_BUS_COLOR,
            ),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.01),
        ],
        [10, slow_train_minutes, 15, 5],
        duration=slow_train_minutes + 30,
        cost=round_half_up(train_fare * 0.6) + BUS_FARE,
        transfers=3,
    )

    return [recommended, fastest, cheapest]


def synthesize_medium_distance(
    origin: Coordinate,
    destination: Coordinate,
    distance_km: float,
    distance_m: int,
) -> list[Route]:
    """Subway/bus routes with transfers for trips of 10-100 km."""
    transit_minutes = round_half_up(distance_km * 2)  # ~30 km/h average

    recommended = build_route(
        RouteType.recommended,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "지하철역까지 도보 이동", 0.02, "{origin}역"),
            LegPlan(TransitMode.subway, "광역 지하철 1호선 탑승", 0.63, "환승역", "1호선", LINE_1_COLOR),
            LegPlan(TransitMode.subway, "2호선 환승", 0.33, "{destination}역", "2호선", LINE_2_COLOR),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.02),
        ],
        split_total(transit_minutes, [0.1, 0.55, 0.25, 0.1]),
        duration=transit_minutes,
        cost=2800,
        transfers=1,
    )

    fastest_minutes = round_half_up(transit_minutes * 0.8)
    fastest = build_route(
        RouteType.fastest,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "버스 정류장으로 이동", 0.02, "{origin} 정류장"),
            LegPlan(
                TransitMode.bus,
                "광역급행버스 탑승",
                0.75,
                "환승역",
                "광역급행",
                EXPRESS_BUS_COLOR,
            ),
            LegPlan(TransitMode.subway, "지하철 2호선 환승", 0.21, "{destination}역", "2호선", LINE_2_COLOR),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.02),
        ],
        split_total(fastest_minutes, [0.1, 0.6, 0.2, 0.1]),
        duration=fastest_minutes,
        cost=3500,
        transfers=2,
    )

    cheapest_minutes = round_half_up(transit_minutes * 1.3)
    cheapest = build_route(
        RouteType.cheapest,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "버스 정류장으로 이동", 0.03, "{origin} 정류장"),
            LegPlan(
                TransitMode.bus,
                "일반버스 직통",
                0.94,
                "{destination} 정류장",
                "간선버스",
                TRUNK_BUS_COLOR,
            ),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.03),
        ],
        split_total(cheapest_minutes, [0.1, 0.8, 0.1]),
        duration=cheapest_minutes,
        cost=BUS_FARE,
        transfers=0,
    )

    return [recommended, fastest, cheapest]


def synthesize_short_distance(
    origin: Coordinate,
    destination: Coordinate,
    distance_km: float,
    distance_m: int,
) -> list[Route]:
    """Local bus/subway routes for trips up to 10 km."""
    transit_minutes = round_half_up(distance_km * 3)  # ~20 km/h city transit

    recommended = build_route(
        RouteType.recommended,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "지하철역까지 도보 이동", 0.04, "{origin}역"),
            LegPlan(TransitMode.subway, "지하철 2호선 탑승", 0.66, "환승 정류장", "2호선", LINE_2_COLOR),
            LegPlan(TransitMode.bus, "146번 버스 환승", 0.26, "{destination} 정류장", "146", BRANCH_BUS_COLOR),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.04),
        ],
        split_total(transit_minutes, [0.15, 0.5, 0.2, 0.15]),
        duration=transit_minutes,
        cost=BUS_FARE,
        transfers=1,
    )

    fastest_minutes = round_half_up(transit_minutes * 0.7)
    fastest = build_route(
        RouteType.fastest,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "버스 정류장으로 이동", 0.03, "{origin} 정류장"),
            LegPlan(
                TransitMode.bus,
                "급행버스 직통",
                0.94,
                "{destination} 정류장",
                "광역급행",
                EXPRESS_BUS_COLOR,
            ),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.03),
        ],
        split_total(fastest_minutes, [0.15, 0.7, 0.15]),
        duration=fastest_minutes,
        cost=2500,
        transfers=0,
    )

    cheapest_minutes = round_half_up(transit_minutes * 1.2)
    cheapest = build_route(
        RouteType.cheapest,
        origin,
        destination,
        distance_m,
        [
            LegPlan(TransitMode.walk, "간선버스 정류장까지 도보 이동", 0.2, "{origin} 정류장"),
            LegPlan(
                TransitMode.bus,
                "간선버스 탑승",
                0.75,
                "{destination} 정류장",
                "간선버스",
                TRUNK_BUS_COLOR,
            ),
            LegPlan(TransitMode.walk, "목적지까지 도보 이동", 0.05),
        ],
        split_total(cheapest_minutes, [0.35, 0.55, 0.1]),
        duration=cheapest_minutes,
        cost=BUS_FARE,
        transfers=1,
    )

    return [recommended, fastest, cheapest]
