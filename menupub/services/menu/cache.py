"""
Per-restaurant bundle cache.

The port only stores values with the time they were written; freshness is
decided by the caller (see `is_stale`). Menu data is stored as a JSON
array of `[category_id, bundle]` pairs so tab order survives the trip.
"""
import json
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol

from menupub.core.constants import MENU_CACHE_KEY_PREFIX, MENU_CACHE_TTL_MS
from menupub.schemas.menu import MenuBundle


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    timestamp: int  # epoch milliseconds


class CachePort(Protocol):
    def get(self, key: str) -> Optional[CacheEntry]: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...

    def clear(self) -> None: ...


class InMemoryCachePort:
    """Process-wide key/value store with write timestamps."""

    def __init__(self, clock: Callable[[], int] = now_ms):
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[CacheEntry]:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(value=value, timestamp=self._clock())

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def menu_cache_key(restaurant_id: Optional[str]) -> str:
    return f"{MENU_CACHE_KEY_PREFIX}{restaurant_id or 'default'}"


def is_stale(entry: CacheEntry, now: int, ttl_ms: int = MENU_CACHE_TTL_MS) -> bool:
    return now - entry.timestamp >= ttl_ms


def serialize_menu_data(menu_data: Dict[int, MenuBundle]) -> str:
    return json.dumps([
        [category_id, bundle.model_dump(mode="json")]
        for category_id, bundle in menu_data.items()
    ])


def deserialize_menu_data(raw: str) -> Dict[int, MenuBundle]:
    """Raises ValueError on anything that is not a list of pairs."""
    pairs = json.loads(raw)
    if not isinstance(pairs, list):
        raise ValueError("menu cache payload is not a list")

    menu_data: Dict[int, MenuBundle] = {}
    for pair in pairs:
        if not isinstance(pair, list) or len(pair) != 2:
            raise ValueError("menu cache entry is not a [category_id, bundle] pair")
        category_id, bundle = pair
        menu_data[int(category_id)] = MenuBundle.model_validate(bundle)
    return menu_data


# Shared by every request in this process
menu_cache = InMemoryCachePort()


def get_menu_cache() -> CachePort:
    return menu_cache
