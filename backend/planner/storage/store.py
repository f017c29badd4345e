"""Key-value store interface and implementations for client-side state."""

from typing import Protocol

import redis


class KeyValueStore(Protocol):
    """String key-value store (browser local storage equivalent)."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key if present."""
        ...


class InMemoryKeyValueStore:
    """In-memory implementation of KeyValueStore."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class RedisKeyValueStore:
    """Redis-backed implementation of KeyValueStore."""

    def __init__(self, redis_client: redis.Redis, namespace: str = "planner") -> None:
        """Initialize store.

        Args:
            redis_client: Redis client created with decode_responses=True
            namespace: Prefix applied to every key
        """
        self._redis = redis_client
        self._namespace = namespace

    @classmethod
    def from_url(cls, url: str, namespace: str = "planner") -> "RedisKeyValueStore":
        client = redis.from_url(url, decode_responses=True)  # type: ignore[no-untyped-call]
        return cls(client, namespace=namespace)

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get(self, key: str) -> str | None:
        value = self._redis.get(self._key(key))
        return value if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        self._redis.set(self._key(key), value)

    def delete(self, key: str) -> None:
        self._redis.delete(self._key(key))
