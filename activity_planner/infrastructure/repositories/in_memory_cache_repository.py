"""In-memory TTL cache repository implementation."""

import logging
import math
import re
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Tuple
from ...domain.repositories.cache_repository import CacheRepository

logger = logging.getLogger(__name__)


class InMemoryCacheRepository(CacheRepository):
    """Process-local cache whose entries expire after a time to live."""

    def __init__(self, default_ttl: int = 3600, clock: Callable[[], float] = time.monotonic):
        """
        Initialize repository.

        Args:
            default_ttl: Time to live in seconds for entries set without one
            clock: Monotonic time source in seconds
        """
        self.default_ttl = default_ttl
        self.clock = clock
        self._entries: Dict[str, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def _is_live(self, key: str, now: float) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        if entry[1] <= now:
            del self._entries[key]
            return False
        return True

    def get(self, key: str) -> Optional[Any]:
        """Return cached value or None."""
        with self._lock:
            if not self._is_live(key, self.clock()):
                return None
            return self._entries[key][0]

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Store value under key for ttl seconds, 0 meaning no expiry."""
        ttl = ttl if ttl is not None else self.default_ttl
        expires_at = self.clock() + ttl if ttl > 0 else math.inf
        with self._lock:
            self._entries[key] = (value, expires_at)
        logger.debug(f"Cached {key} for {ttl}s")
        return True

    def delete(self, key: str) -> int:
        with self._lock:
            return 1 if self._entries.pop(key, None) is not None else 0

    def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern, * matches any run of characters."""
        regex = re.compile("^" + re.escape(pattern).replace(r"\*", ".*") + "$")
        with self._lock:
            matched = [key for key in self._entries if regex.match(key)]
            for key in matched:
                del self._entries[key]
        return len(matched)

    def keys(self) -> List[str]:
        with self._lock:
            now = self.clock()
            return [key for key in list(self._entries) if self._is_live(key, now)]

    def has(self, key: str) -> bool:
        with self._lock:
            return self._is_live(key, self.clock())

    def flush(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.info("Cache flushed")
