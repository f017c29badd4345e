"""Place lookup and recent-search endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from backend.planner.adapters.places import get_suggestions, search_place
from backend.planner.api.deps import get_store
from backend.planner.config import get_settings
from backend.planner.models.common import Coordinate
from backend.planner.storage.history import RecentSearches
from backend.planner.storage.store import KeyValueStore

router = APIRouter(prefix="/api/places", tags=["places"])


class RecentSearchRequest(BaseModel):
    """Address chosen by the user."""

    address: str


def get_recent_searches(store: Annotated[KeyValueStore, Depends(get_store)]) -> RecentSearches:
    return RecentSearches(store, limit=get_settings().recent_search_limit)


@router.get("/search", response_model=Coordinate)
async def place_search(q: Annotated[str, Query(min_length=1)]) -> Coordinate:
    """Resolve free text to a known place."""
    place = search_place(q)
    if place is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No place matches {q!r}")
    return place


@router.get("/suggestions")
async def place_suggestions(q: str = "") -> list[str]:
    """Autocomplete place names."""
    return get_suggestions(q)


@router.get("/recent")
async def list_recent_searches(
    recent: Annotated[RecentSearches, Depends(get_recent_searches)],
) -> list[str]:
    """Recently chosen addresses, most recent first."""
    return recent.entries()


@router.post("/recent")
async def add_recent_search(
    request: RecentSearchRequest,
    recent: Annotated[RecentSearches, Depends(get_recent_searches)],
) -> list[str]:
    """Record a chosen address."""
    return recent.add(request.address)
