"""Tests for client-state storage."""

import json
from datetime import date
from typing import get_type_hints
from unittest.mock import MagicMock

import pytest

from backend.planner.models.common import Coordinate
from backend.planner.models.travel import TravelPlan
from backend.planner.storage.history import RecentSearches, TravelPlanStore
from backend.planner.storage.store import InMemoryKeyValueStore, RedisKeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


def test_in_memory_store_round_trip(store: InMemoryKeyValueStore) -> None:
    """Test basic get/set/delete semantics."""
    assert store.get("k") is None

    store.set("k", "v")
    assert store.get("k") == "v"

    store.delete("k")
    store.delete("k")  # deleting twice is fine
    assert store.get("k") is None


def test_redis_store_namespaces_keys() -> None:
    """Test Redis store prefixes keys and delegates to the client."""
    client = MagicMock()
    client.get.return_value = "[]"
    redis_store = RedisKeyValueStore(client, namespace="test")

    redis_store.set("recentLocationSearches", "[]")
    value = redis_store.get("recentLocationSearches")
    redis_store.delete("recentLocationSearches")

    client.set.assert_called_once_with("test:recentLocationSearches", "[]")
    client.get.assert_called_once_with("test:recentLocationSearches")
    client.delete.assert_called_once_with("test:recentLocationSearches")
    assert value == "[]"


def test_redis_store_missing_key() -> None:
    """Test a missing Redis key reads as None."""
    client = MagicMock()
    client.get.return_value = None

    assert RedisKeyValueStore(client).get("absent") is None


def test_recent_searches_most_recent_first_and_deduplicated(store: InMemoryKeyValueStore) -> None:
    """Test re-searching an address moves it to the front."""
    recent = RecentSearches(store)

    recent.add("서울역")
    recent.add("강남역")
    updated = recent.add("서울역")

    assert updated == ["서울역", "강남역"]
    assert recent.entries() == ["서울역", "강남역"]


def test_recent_searches_are_capped(store: InMemoryKeyValueStore) -> None:
    """Test only the newest `limit` entries are kept."""
    recent = RecentSearches(store, limit=3)

    for address in ["a", "b", "c", "d", "e"]:
        recent.add(address)

    assert recent.entries() == ["e", "d", "c"]


def test_recent_searches_stored_as_json_under_known_key(store: InMemoryKeyValueStore) -> None:
    """Test the storage format matches the browser's local storage entry."""
    RecentSearches(store).add("부산광역시")

    assert json.loads(store.get("recentLocationSearches") or "") == ["부산광역시"]


def test_recent_searches_signatures_resolve() -> None:
    """Test method annotations refer to the builtin list type."""
    assert get_type_hints(RecentSearches.entries)["return"] == list[str]
    assert get_type_hints(RecentSearches.add)["return"] == list[str]


@pytest.mark.parametrize("raw", ["not json", '{"a": 1}'])
def test_recent_searches_ignore_corrupt_entries(store: InMemoryKeyValueStore, raw: str) -> None:
    """Test unreadable stored data reads as empty and is replaced on add."""
    store.set("recentLocationSearches", raw)
    recent = RecentSearches(store)

    assert recent.entries() == []
    assert recent.add("서울역") == ["서울역"]


def test_travel_plan_round_trip(store: InMemoryKeyValueStore) -> None:
    """Test a saved plan loads back equal."""
    plans = TravelPlanStore(store)
    plan = TravelPlan(
        origin=Coordinate(lat=37.5546788, lng=126.9709914, address="서울역", name="서울역"),
        destination=Coordinate(lat=35.1796, lng=129.0756, address="부산광역시"),
        departure_date=date(2024, 11, 9),
        departure_time="13:00",
        duration=2,
        participants=3,
    )

    assert plans.load() is None
    plans.save(plan)

    assert plans.load() == plan

    plans.clear()
    assert plans.load() is None


def test_travel_plan_invalid_payload_reads_as_none(store: InMemoryKeyValueStore) -> None:
    """Test a corrupt stored plan is discarded."""
    store.set("currentTravelPlan", '{"participants": 0}')

    assert TravelPlanStore(store).load() is None
