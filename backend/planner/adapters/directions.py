"""Route search - Kakao directions when keyed, synthesized routes otherwise."""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Any

import httpx

from backend.planner.config import Settings, get_settings
from backend.planner.models.common import ROUTE_ID_BY_TYPE, Coordinate, RouteType, TransitMode
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
from backend.planner.routing.generator import generate_route_options

logger = logging.getLogger(__name__)

ROUTE_TYPES_IN_ORDER = [RouteType.recommended, RouteType.fastest, RouteType.cheapest]


def _endpoint(name: str, lat: float, lng: float) -> StepEndpoint:
    return StepEndpoint(name=name, location=Coordinate(lat=lat, lng=lng, address=name, name=name))


def details_from_section(section: dict[str, Any]) -> StepDetails:
    """Map a directions section onto the typed details for its mode."""
    mode = section["mode"]
    if mode == TransitMode.bus.value:
        return BusDetails(
            bus_number=str(section.get("busNumber", "")),
            stops=int(section.get("stops", 0)),
            fare=int(section.get("fare", 0)),
            bus_type=section.get("busType", "regular"),
        )
    if mode == TransitMode.subway.value:
        return SubwayDetails(
            line=str(section.get("line", "")),
            stops=int(section.get("stops", 0)),
            fare=int(section.get("fare", 0)),
            express=bool(section.get("express", False)),
        )
    if mode == TransitMode.train.value:
        return TrainDetails(
            train_type=section.get("trainType", "KTX"),
            train_number=str(section.get("trainNumber", "")),
            fare=int(section.get("fare", 0)),
            seat_type=section.get("seatType", "standard"),
        )
    return WalkDetails(instruction=section.get("instruction", f"{section['endName']}까지 도보 이동"))


def route_option_from_payload(
    route: dict[str, Any],
    route_type: RouteType,
    departure_time: datetime,
) -> RouteOption:
    """Map one directions route (durations in seconds) to a RouteOption."""
    steps = [
        TransitStep(
            mode=TransitMode(section["mode"]),
            from_endpoint=_endpoint(section["startName"], section["startY"], section["startX"]),
            to_endpoint=_endpoint(section["endName"], section["endY"], section["endX"]),
            duration=round_half_up(section["duration"] / 60),
            distance=int(section["distance"]),
            details=details_from_section(section),
        )
        for section in route["sections"]
    ]

    return RouteOption(
        id=ROUTE_ID_BY_TYPE[route_type],
        type=route_type,
        total_duration=round_half_up(route["duration"] / 60),
        total_cost=int(route["fare"]["regular"]["totalFare"]),
        total_distance=int(route["distance"]),
        steps=steps,
        departure_time=departure_time,
        arrival_time=departure_time + timedelta(seconds=route["duration"]),
    )


async def search_route(
    origin: Coordinate,
    destination: Coordinate,
    departure_time: datetime,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[RouteOption]:
    """Search transit routes between two points.

    Args:
        origin: Trip start
        destination: Trip end
        departure_time: Departure instant for the timeline
        settings: Optional settings override (default: cached settings)
        client: Optional httpx client (for testing with mocks)

    Returns:
        Up to three RouteOption values, recommended first

    Raises:
        httpx.HTTPError: On network or HTTP errors
    """
    settings = settings or get_settings()

    if settings.use_mock_data:
        logger.info("Using synthesized route data")
        await asyncio.sleep(settings.mock_feed_delay_ms / 1000)
        return generate_route_options(origin, destination, now=departure_time)

    params = {
        "origin": f"{origin.lng},{origin.lat}",
        "destination": f"{destination.lng},{destination.lat}",
        "priority": "RECOMMEND",
    }

    close_client = False
    if client is None:
        client = httpx.AsyncClient(
            base_url=settings.kakao_base_url,
            timeout=settings.feed_timeout_seconds,
            headers={"Authorization": f"KakaoAK {settings.kakao_api_key}"},
        )
        close_client = True

    try:
        response = await client.get("/v2/local/search/address", params=params)
        response.raise_for_status()
        routes = response.json()["routes"]
    except httpx.HTTPError:
        logger.exception(f"Route search failed: {origin.label} -> {destination.label}")
        raise
    finally:
        if close_client:
            await client.aclose()

    return [
        route_option_from_payload(route, route_type, departure_time)
        for route, route_type in zip(routes, ROUTE_TYPES_IN_ORDER)
    ]
