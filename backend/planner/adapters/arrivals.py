"""Real-time bus/subway arrival feed (public-data API, fixtures when keyless)."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Literal, TypeVar

import httpx

from backend.planner.config import Settings, get_settings
from backend.planner.models.transit import BusArrival, SubwayArrival
from backend.planner.utils.metrics import arrival_feed_errors_total, arrival_feed_requests_total

logger = logging.getLogger(__name__)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

ArrivalT = TypeVar("ArrivalT", BusArrival, SubwayArrival)


def load_bus_arrival_fixtures() -> list[BusArrival]:
    """Mock bus arrivals."""
    with open(FIXTURES_DIR / "bus_arrivals.json", encoding="utf-8") as f:
        return [BusArrival(**item) for item in json.load(f)]


def load_subway_arrival_fixtures() -> list[SubwayArrival]:
    """Mock subway arrivals."""
    with open(FIXTURES_DIR / "subway_arrivals.json", encoding="utf-8") as f:
        return [SubwayArrival(**item) for item in json.load(f)]


def bus_arrival_from_item(item: dict[str, Any]) -> BusArrival:
    """Map a public-data bus arrival item."""
    return BusArrival(
        bus_number=item["busRouteAbrv"],
        remaining_time=int(item["traTime1"]) * 60,  # minutes -> seconds
        remaining_stops=int(item["stationCount1"]),
        bus_type="express" if item.get("routeType") == "3" else "regular",
        low_floor=item.get("busType1") == "1",
        station_name=item["stationNm"],
    )


def congestion_level(riders: int) -> Literal["low", "medium", "high"]:
    """Bucket a rider count into low / medium / high."""
    if riders < 30:
        return "low"
    if riders < 70:
        return "medium"
    return "high"


def subway_arrival_from_item(item: dict[str, Any]) -> SubwayArrival:
    """Map a public-data subway arrival item."""
    return SubwayArrival(
        line=f"{item['subwayId']}호선",
        destination=item["trainLineNm"],
        remaining_time=int(item["barvlDt"]),
        train_type="express" if item.get("btrainSttus") == "급행" else "regular",
        congestion=congestion_level(int(item.get("reride_Num", 0))),
        direction="up" if item.get("updnLine") == "상행" else "down",
        station_name=item["statnNm"],
    )


async def _get_public_data(
    path: str,
    station_id: str,
    kind: str,
    settings: Settings,
    client: httpx.AsyncClient | None,
) -> list[dict[str, Any]]:
    """GET an arrivals endpoint and return its items.

    Raises:
        httpx.HTTPError: On network or HTTP errors (logged, not retried)
    """
    params = {"serviceKey": settings.public_data_api_key, "stationId": station_id}

    close_client = False
    if client is None:
        client = httpx.AsyncClient(
            base_url=settings.public_data_base_url,
            timeout=settings.feed_timeout_seconds,
        )
        close_client = True

    try:
        response = await client.get(path, params=params)
        response.raise_for_status()
        return response.json()["items"]
    except httpx.HTTPError:
        arrival_feed_errors_total.labels(kind=kind).inc()
        logger.exception(
            f"{kind} arrival lookup failed for station {station_id}",
            extra={"structured": {"kind": kind, "station_id": station_id}},
        )
        raise
    finally:
        if close_client:
            await client.aclose()


async def fetch_bus_arrivals(
    station_id: str,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[BusArrival]:
    """Fetch real-time bus arrivals for a stop.

    Args:
        station_id: Public-data station identifier
        settings: Optional settings override (default: cached settings)
        client: Optional httpx client (for testing with mocks)

    Returns:
        Arrival predictions, fixture data when no API key is configured

    Raises:
        httpx.HTTPError: On network or HTTP errors
    """
    settings = settings or get_settings()

    if settings.use_mock_data:
        logger.info("Using mock bus arrival data")
        arrival_feed_requests_total.labels(kind="bus", source="mock").inc()
        await asyncio.sleep(settings.mock_feed_delay_ms / 1000)
        return load_bus_arrival_fixtures()

    arrival_feed_requests_total.labels(kind="bus", source="public_data").inc()
    items = await _get_public_data("/bus/arrival", station_id, "bus", settings, client)
    return [bus_arrival_from_item(item) for item in items]


async def fetch_subway_arrivals(
    station_id: str,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[SubwayArrival]:
    """Fetch real-time subway arrivals for a station.

    Args:
        station_id: Public-data station identifier
        settings: Optional settings override (default: cached settings)
        client: Optional httpx client (for testing with mocks)

    Returns:
        Arrival predictions, fixture data when no API key is configured

    Raises:
        httpx.HTTPError: On network or HTTP errors
    """
    settings = settings or get_settings()

    if settings.use_mock_data:
        logger.info("Using mock subway arrival data")
        arrival_feed_requests_total.labels(kind="subway", source="mock").inc()
        await asyncio.sleep(settings.mock_feed_delay_ms / 1000)
        return load_subway_arrival_fixtures()

    arrival_feed_requests_total.labels(kind="subway", source="public_data").inc()
    items = await _get_public_data("/subway/arrival", station_id, "subway", settings, client)
    return [subway_arrival_from_item(item) for item in items]


def simulate_realtime_update(arrivals: list[ArrivalT], elapsed_seconds: int = 30) -> list[ArrivalT]:
    """Count arrivals down by ``elapsed_seconds``, never below zero."""
    return [
        arrival.model_copy(update={"remaining_time": max(0, arrival.remaining_time - elapsed_seconds)})
        for arrival in arrivals
    ]
