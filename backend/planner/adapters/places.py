"""Fixture-based place lookup for major Korean cities and stations."""

import json
from pathlib import Path

from backend.planner.models.common import Coordinate

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


def load_places() -> dict[str, Coordinate]:
    """Load the place table from fixtures, keyed by place name."""
    fixtures_path = FIXTURES_DIR / "places.json"
    with open(fixtures_path, encoding="utf-8") as f:
        data = json.load(f)

    return {
        name: Coordinate(lat=entry["lat"], lng=entry["lng"], address=entry["address"], name=name)
        for name, entry in data.items()
    }


def search_place(query: str) -> Coordinate | None:
    """Resolve free text to a known place.

    Matching order: exact name (case-insensitive), then partial name match in
    either direction, then address containing the raw query.

    Args:
        query: Free-text place name

    Returns:
        Matching Coordinate, or None when nothing matches
    """
    if not query or not query.strip():
        return None

    places = load_places()
    normalized = query.strip().lower()

    for name, place in places.items():
        if name.lower() == normalized:
            return place

    for name, place in places.items():
        lowered = name.lower()
        if normalized in lowered or lowered in normalized:
            return place

    for place in places.values():
        if query in place.address:
            return place

    return None


def get_suggestions(query: str, limit: int = 5) -> list[str]:
    """Autocomplete place names containing the query."""
    if not query or not query.strip():
        return []

    normalized = query.strip().lower()
    suggestions = [name for name in load_places() if normalized in name.lower()]
    return suggestions[:limit]
