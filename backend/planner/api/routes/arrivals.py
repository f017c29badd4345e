"""Real-time arrival endpoints."""

from typing import Annotated

import httpx
from fastapi import APIRouter, HTTPException, Query, status

from backend.planner.adapters.arrivals import fetch_bus_arrivals, fetch_subway_arrivals, simulate_realtime_update
from backend.planner.models.transit import BusArrival, SubwayArrival

router = APIRouter(prefix="/api/arrivals", tags=["arrivals"])

# Seconds since the client's last refresh; predictions are counted down by this much
ElapsedSeconds = Annotated[int, Query(ge=0)]


@router.get("/bus/{station_id}", response_model=list[BusArrival])
async def bus_arrivals(station_id: str, elapsed_seconds: ElapsedSeconds = 0) -> list[BusArrival]:
    """Bus arrival predictions for a stop."""
    try:
        arrivals = await fetch_bus_arrivals(station_id)
    except httpx.HTTPError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"bus arrival feed unavailable: {type(e).__name__}",
        ) from e
    return simulate_realtime_update(arrivals, elapsed_seconds) if elapsed_seconds else arrivals


@router.get("/subway/{station_id}", response_model=list[SubwayArrival])
async def subway_arrivals(station_id: str, elapsed_seconds: ElapsedSeconds = 0) -> list[SubwayArrival]:
    """Subway arrival predictions for a station."""
    try:
        arrivals = await fetch_subway_arrivals(station_id)
    except httpx.HTTPError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"subway arrival feed unavailable: {type(e).__name__}",
        ) from e
    return simulate_realtime_update(arrivals, elapsed_seconds) if elapsed_seconds else arrivals
