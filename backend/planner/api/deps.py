"""Shared FastAPI dependencies."""

from functools import lru_cache

from backend.planner.config import get_settings
from backend.planner.storage.store import InMemoryKeyValueStore, KeyValueStore, RedisKeyValueStore


@lru_cache
def get_store() -> KeyValueStore:
    """Process-wide key-value store (Redis when configured, else in-memory)."""
    settings = get_settings()
    if settings.redis_url:
        return RedisKeyValueStore.from_url(settings.redis_url)
    return InMemoryKeyValueStore()
