# src/app/infra/cache/base.py
"""
Abstract base class for the key-value cache holding the recipe listing.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class ListingCache(ABC):
    """
    Abstract interface for blob caching.

    Implementations:
    - RedisListingCache: Redis via redis-py

    An absent key is reported as None; every other failure raises CacheError.
    """

    @abstractmethod
    def ping(self) -> None:
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Returns:
            The stored blob, or None if the key is absent
        """
        pass

    @abstractmethod
    def set(self, key: str, blob: str) -> None:
        """Store a blob with no expiration."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error."""
        pass
