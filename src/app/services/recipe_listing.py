# src/app/services/recipe_listing.py
"""
Cache-aside listing of all recipes.

The full listing lives under a single cache key with no expiration. Reads
fall back to the store on a miss and repopulate the key; every write evicts
the key so the next read is rebuilt from the store.

A read that started before a write can still repopulate the key with the
pre-write listing after that write's eviction has run. The stale entry then
survives until the next write.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Sequence
from uuid import UUID

from src.app.domain.errors import CacheError, SerializationError
from src.app.domain.models import Recipe
from src.app.infra.cache.base import ListingCache
from src.app.infra.db.base import RecipeRepository

logger = logging.getLogger(__name__)

DEFAULT_LISTING_KEY = "recipes"


def recipe_to_payload(recipe: Recipe) -> dict[str, Any]:
    return {
        "id": str(recipe.id),
        "name": recipe.name,
        "tags": list(recipe.tags),
        "ingredients": list(recipe.ingredients),
        "instructions": list(recipe.instructions),
        "publishedAt": recipe.published_at.isoformat(),
    }


def recipe_from_payload(payload: dict[str, Any]) -> Recipe:
    return Recipe(
        id=UUID(payload["id"]),
        name=payload["name"],
        tags=list(payload["tags"]),
        ingredients=list(payload["ingredients"]),
        instructions=list(payload["instructions"]),
        published_at=datetime.fromisoformat(payload["publishedAt"]),
    )


def encode_listing(recipes: Sequence[Recipe]) -> str:
    return json.dumps(
        [recipe_to_payload(recipe) for recipe in recipes],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def decode_listing(blob: str) -> list[Recipe]:
    try:
        payloads = json.loads(blob)
        if not isinstance(payloads, list):
            raise ValueError("listing is not a JSON array")
        return [recipe_from_payload(payload) for payload in payloads]
    except (KeyError, TypeError, ValueError) as error:
        raise SerializationError(str(error)) from error


class RecipeListing:
    """Answers "list all recipes" from the cache when it can."""

    def __init__(
        self,
        repository: RecipeRepository,
        cache: ListingCache,
        key: str = DEFAULT_LISTING_KEY,
    ):
        self._repo = repository
        self._cache = cache
        self.key = key

    def get_listing(self) -> list[Recipe]:
        """
        Return every recipe.

        Raises:
            CacheError: If the cache read fails for any reason other than a miss
            SerializationError: If the cached blob cannot be decoded
            RecipeStoreError: If the store read fails on a miss
        """
        blob = self._cache.get(self.key)
        if blob is not None:
            logger.info("recipes - cache hit")
            return decode_listing(blob)

        logger.info("recipes - cache miss, reading store")
        recipes = self._repo.find_all()

        try:
            self._cache.set(self.key, encode_listing(recipes))
        except CacheError as error:
            logger.warning("Could not repopulate recipe listing cache: %s", error)

        return recipes

    def invalidate_listing(self) -> None:
        """
        Evict the cached listing.

        Raises:
            CacheError: If the eviction fails; the caller's write stays committed
        """
        self._cache.delete(self.key)
        logger.debug("recipes - cache invalidated")
