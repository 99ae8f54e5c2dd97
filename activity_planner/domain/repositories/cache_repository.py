"""Cache repository interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class CacheRepository(ABC):
    """Abstract key-value cache with per-entry expiry."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if missing or expired."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """
        Store a value.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time to live in seconds (repository default when omitted,
                0 keeps the entry until deleted)

        Returns:
            True if the value was stored
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> int:
        """Delete a key, returning the number of deleted entries."""
        pass

    @abstractmethod
    def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a pattern where * is a wildcard."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """List live keys."""
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """Check whether a live entry exists for key."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Drop every entry."""
        pass
