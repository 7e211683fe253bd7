"""Simple in-memory cache with per-entry expiry."""

import time
from typing import Any, Callable, Hashable


class TTLCache:
    """Keyed cache whose entries expire ``ttl_seconds`` after being set."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entries: dict[Hashable, tuple[float, Any]] = {}

    def get(self, key: Hashable) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= self.clock():
            del self._entries[key]
            return None
        return value

    def set(self, key: Hashable, value: Any) -> None:
        self._entries[key] = (self.clock() + self.ttl_seconds, value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
