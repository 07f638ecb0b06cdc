"""A hash map built on a fixed set of buckets with separate chaining."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterator, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

INITIAL_CAPACITY = 16


class HashMap(Generic[K, V]):
    """Map of keys to values stored in chained buckets."""

    def __init__(self) -> None:
        self._buckets: list[list[tuple[K, V]]] = [[] for _ in range(INITIAL_CAPACITY)]
        self._size = 0

    def _bucket(self, key: K) -> list[tuple[K, V]]:
        return self._buckets[hash(key) % len(self._buckets)]

    def insert(self, key: K, value: V) -> None:
        """Set ``key`` to ``value``, replacing any existing value."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (existing, value)
                return
        bucket.append((key, value))
        self._size += 1

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key``, or None if absent."""
        return next((value for existing, value in self._bucket(key) if existing == key), None)

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` and return its value, or None if absent."""
        bucket = self._bucket(key)
        for position, (existing, value) in enumerate(bucket):
            if existing == key:
                bucket[position] = bucket[-1]
                bucket.pop()
                self._size -= 1
                return value
        return None

    def is_empty(self) -> bool:
        return self._size == 0

    def contains_key(self, key: K) -> bool:
        return any(existing == key for existing, _ in self._bucket(key))

    def values(self) -> Iterator[V]:
        return (value for _, value in self.items())

    def items(self) -> Iterator[tuple[K, V]]:
        return (pair for bucket in self._buckets for pair in bucket)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self.items())

    def __getstate__(self) -> dict[str, Any]:
        # String hashes vary between processes, so store pairs and rehash on load.
        return {"items": list(self.items())}

    def __setstate__(self, state: dict[str, Any]) -> None:
        self.__init__()
        for key, value in state["items"]:
            self.insert(key, value)

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r})"