"""Route planning endpoints - synthesized routes, timelines and cost estimates."""

from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from backend.planner.adapters.directions import search_route
from backend.planner.cost.estimator import estimate_cost_breakdown
from backend.planner.models.common import Coordinate
from backend.planner.models.cost import CostBreakdown
from backend.planner.models.route import Route
from backend.planner.models.timeline import RouteOption
from backend.planner.routing.generator import generate_route_options, generate_routes

router = APIRouter(prefix="/api/routes", tags=["routes"])


class RouteRequest(BaseModel):
    """Origin/destination pair."""

    origin: Coordinate
    destination: Coordinate


class RouteOptionsRequest(RouteRequest):
    """Origin/destination pair with an optional departure instant."""

    departure_time: datetime | None = None


class CostRequest(BaseModel):
    """Cost estimate request for a selected route option."""

    route: RouteOption
    participants: int = Field(1, ge=1)
    duration_days: int = Field(1, ge=1)


@router.post("", response_model=list[Route])
async def create_routes(request: RouteRequest) -> list[Route]:
    """Generate recommended/fastest/cheapest routes."""
    return generate_routes(request.origin, request.destination)


@router.post("/options", response_model=list[RouteOption])
async def create_route_options(request: RouteOptionsRequest) -> list[RouteOption]:
    """Generate routes anchored on a timeline."""
    return generate_route_options(request.origin, request.destination, now=request.departure_time)


@router.post("/search", response_model=list[RouteOption])
async def route_search(request: RouteOptionsRequest) -> list[RouteOption]:
    """Search routes through the directions provider (synthesized without an API key)."""
    departure_time = request.departure_time or datetime.now(UTC)
    try:
        return await search_route(request.origin, request.destination, departure_time)
    except httpx.HTTPError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"directions provider unavailable: {type(e).__name__}",
        ) from e


@router.post("/cost", response_model=CostBreakdown)
async def create_cost_breakdown(request: CostRequest) -> CostBreakdown:
    """Estimate the categorized cost of a trip along a route option."""
    try:
        return estimate_cost_breakdown(
            request.route,
            participants=request.participants,
            duration_days=request.duration_days,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
