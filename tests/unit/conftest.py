from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional, Sequence
from uuid import UUID, uuid4

import pytest

from src.app.domain.errors import CacheError, RecipeStoreError
from src.app.domain.models import Recipe, RecipeDraft
from src.app.infra.cache.base import ListingCache
from src.app.infra.db.base import RecipeRepository
from src.app.services.recipe_listing import RecipeListing
from src.app.services.recipe_service import RecipeService


class RecipeRepositoryStub(RecipeRepository):
    def __init__(self) -> None:
        self.recipes: dict[UUID, Recipe] = {}
        self.find_all_calls = 0
        self.fail_with: Optional[str] = None
        self._lock = threading.Lock()

    def _maybe_fail(self, operation: str) -> None:
        if self.fail_with:
            raise RecipeStoreError(operation, self.fail_with)

    def ping(self) -> None:
        self._maybe_fail("ping")

    def find_all(self) -> list[Recipe]:
        self._maybe_fail("find_all")
        self.find_all_calls += 1
        with self._lock:
            return [replace(recipe) for recipe in self.recipes.values()]

    def find_by_id(self, recipe_id: UUID) -> Optional[Recipe]:
        self._maybe_fail("find_by_id")
        recipe = self.recipes.get(recipe_id)
        return replace(recipe) if recipe else None

    def insert_one(self, recipe: Recipe) -> UUID:
        self._maybe_fail("insert_one")
        recipe_id = uuid4()
        with self._lock:
            self.recipes[recipe_id] = replace(recipe, id=recipe_id)
        return recipe_id

    def insert_many(self, recipes: Sequence[Recipe]) -> int:
        for recipe in recipes:
            self.insert_one(recipe)
        return len(recipes)

    def update_by_id(self, recipe_id: UUID, draft: RecipeDraft) -> int:
        self._maybe_fail("update_by_id")
        with self._lock:
            current = self.recipes.get(recipe_id)
            if current is None:
                return 0
            self.recipes[recipe_id] = replace(
                current,
                name=draft.name,
                tags=list(draft.tags),
                ingredients=list(draft.ingredients),
                instructions=list(draft.instructions),
            )
        return 1

    def delete_by_id(self, recipe_id: UUID) -> int:
        self._maybe_fail("delete_by_id")
        with self._lock:
            return 1 if self.recipes.pop(recipe_id, None) else 0


class ListingCacheStub(ListingCache):
    def __init__(self) -> None:
        self.entries: dict[str, str] = {}
        self.fail_on: set[str] = set()
        self.deleted_keys: list[str] = []

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_on:
            raise CacheError(operation, "connection refused")

    def ping(self) -> None:
        self._maybe_fail("ping")

    def get(self, key: str) -> Optional[str]:
        self._maybe_fail("get")
        return self.entries.get(key)

    def set(self, key: str, blob: str) -> None:
        self._maybe_fail("set")
        self.entries[key] = blob

    def delete(self, key: str) -> None:
        self._maybe_fail("delete")
        self.deleted_keys.append(key)
        self.entries.pop(key, None)


@pytest.fixture
def repository() -> RecipeRepositoryStub:
    return RecipeRepositoryStub()


@pytest.fixture
def cache() -> ListingCacheStub:
    return ListingCacheStub()


@pytest.fixture
def listing(repository: RecipeRepositoryStub, cache: ListingCacheStub) -> RecipeListing:
    return RecipeListing(repository, cache)


@pytest.fixture
def service(repository: RecipeRepositoryStub, listing: RecipeListing) -> RecipeService:
    return RecipeService(repository, listing)


@pytest.fixture
def soup_draft() -> RecipeDraft:
    return RecipeDraft(
        name="Soup",
        tags=["veg"],
        ingredients=["water", "salt"],
        instructions=["boil"],
    )
