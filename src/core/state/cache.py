"""Keyed cache with explicit invalidation.

Values are only replaced by a successful load. A failed load leaves the
previous value, stale flag included, in place and re-raises.
"""

from typing import Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class RefreshCache(Generic[K, V]):
    def __init__(self, loader: Callable[[K], V]) -> None:
        self._loader = loader
        self._values: dict[K, V] = {}
        self._stale: set[K] = set()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def is_stale(self, key: K) -> bool:
        return key not in self._values or key in self._stale

    def peek(self, key: K) -> V | None:
        return self._values.get(key)

    def get(self, key: K) -> V:
        """Cached value, loading it first if missing or invalidated."""
        if self.is_stale(key):
            return self.refresh(key)
        return self._values[key]

    def refresh(self, key: K) -> V:
        value = self._loader(key)
        self._values[key] = value
        self._stale.discard(key)
        return value

    def set(self, key: K, value: V) -> None:
        """Replace a value in place after a confirmed remote write."""
        self._values[key] = value

    def invalidate(self, key: K) -> None:
        if key in self._values:
            self._stale.add(key)

    def invalidate_all(self) -> None:
        self._stale.update(self._values)
