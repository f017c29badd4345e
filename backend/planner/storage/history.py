"""Recent location searches and the current travel plan, kept in a KeyValueStore."""

import json
import logging

from pydantic import ValidationError

from backend.planner.models.travel import TravelPlan
from backend.planner.storage.store import KeyValueStore

logger = logging.getLogger(__name__)

RECENT_SEARCHES_KEY = "recentLocationSearches"
TRAVEL_PLAN_KEY = "currentTravelPlan"


class RecentSearches:
    """Most-recent-first list of searched addresses, deduplicated and capped."""

    def __init__(self, store: KeyValueStore, key: str = RECENT_SEARCHES_KEY, limit: int = 5) -> None:
        self._store = store
        self._key = key
        self._limit = limit

    def entries(self) -> list[str]:
        """Stored searches, most recent first. Corrupt entries read as empty."""
        raw = self._store.get(self._key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Discarding unreadable recent searches under {self._key!r}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Discarding non-list recent searches under {self._key!r}")
            return []
        return [str(item) for item in data]

    def add(self, address: str) -> list[str]:
        """Record a search and return the updated list."""
        updated = [address, *(s for s in self.entries() if s != address)][: self._limit]
        self._store.set(self._key, json.dumps(updated, ensure_ascii=False))
        return updated


class TravelPlanStore:
    """Persists the plan handed from the input form to the map view."""

    def __init__(self, store: KeyValueStore, key: str = TRAVEL_PLAN_KEY) -> None:
        self._store = store
        self._key = key

    def save(self, plan: TravelPlan) -> None:
        self._store.set(self._key, plan.model_dump_json())

    def load(self) -> TravelPlan | None:
        """Stored plan, or None if absent or unreadable."""
        raw = self._store.get(self._key)
        if raw is None:
            return None

        try:
            return TravelPlan.model_validate_json(raw)
        except ValidationError:
            logger.warning(f"Discarding invalid travel plan under {self._key!r}")
            return None

    def clear(self) -> None:
        self._store.delete(self._key)
