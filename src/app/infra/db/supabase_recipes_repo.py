from __future__ import annotations

import logging
from typing import Any, Sequence
from uuid import UUID, uuid4

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from src.app.domain.errors import RecipeStoreError
from src.app.domain.models import Recipe, RecipeDraft, parse_timestamp
from src.app.infra.db.base import RecipeRepository

logger = logging.getLogger(__name__)

DEFAULT_TABLE_NAME = "recipes"

_STORE_ERRORS = (APIError, httpx.HTTPError, ConnectionError, TimeoutError)


def _str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected a list, got {type(value).__name__}")
    return [str(item) for item in value]


def _row_to_recipe(row: dict[str, Any]) -> Recipe:
    return Recipe(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        tags=_str_list(row.get("tags")),
        ingredients=_str_list(row.get("ingredients")),
        instructions=_str_list(row.get("instructions")),
        published_at=parse_timestamp(row["published_at"]),
    )


def _recipe_to_row(recipe: Recipe, recipe_id: UUID) -> dict[str, Any]:
    return {
        "id": str(recipe_id),
        "name": recipe.name,
        "tags": recipe.tags,
        "ingredients": recipe.ingredients,
        "instructions": recipe.instructions,
        "published_at": recipe.published_at.isoformat(),
    }


def _error_reason(error: Exception) -> str:
    if isinstance(error, APIError):
        return error.message or str(error)
    return str(error)


def create_supabase_client(url: str, key: str) -> Client:
    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY required")
    return create_client(url, key)


class SupabaseRecipeRepository(RecipeRepository):
    def __init__(self, client: Client, table_name: str = DEFAULT_TABLE_NAME):
        self._client = client
        self.table_name = table_name
        logger.info("SupabaseRecipeRepository initialized: table=%s", table_name)

    def _table(self):
        return self._client.table(self.table_name)

    def ping(self) -> None:
        try:
            self._table().select("id").limit(1).execute()
        except _STORE_ERRORS as error:
            logger.error("Recipe store unreachable: %s", error)
            raise RecipeStoreError("ping", _error_reason(error)) from error

    def find_all(self) -> list[Recipe]:
        try:
            result = self._table().select("*").execute()
        except _STORE_ERRORS as error:
            logger.error("Error listing recipes: %s", error)
            raise RecipeStoreError("find_all", _error_reason(error)) from error

        recipes: list[Recipe] = []
        for row in result.data or []:
            try:
                recipes.append(_row_to_recipe(row))
            except (KeyError, TypeError, ValueError) as error:
                logger.warning("Cannot decode recipe row %s: %s", row.get("id"), error)
        return recipes

    def find_by_id(self, recipe_id: UUID) -> Recipe | None:
        try:
            result = self._table().select("*").eq("id", str(recipe_id)).limit(1).execute()
        except _STORE_ERRORS as error:
            logger.error("Error getting recipe %s: %s", recipe_id, error)
            raise RecipeStoreError("find_by_id", _error_reason(error)) from error

        if not result.data:
            return None

        try:
            return _row_to_recipe(result.data[0])
        except (KeyError, TypeError, ValueError) as error:
            raise RecipeStoreError("find_by_id", f"undecodable row: {error}") from error

    def insert_one(self, recipe: Recipe) -> UUID:
        recipe_id = uuid4()
        try:
            result = self._table().insert(_recipe_to_row(recipe, recipe_id)).execute()
        except _STORE_ERRORS as error:
            logger.error("Error inserting recipe: %s", error)
            raise RecipeStoreError("insert_one", _error_reason(error)) from error

        if not result.data:
            raise RecipeStoreError("insert_one", "no row returned")

        logger.info("Inserted recipe: id=%s, name=%s", recipe_id, recipe.name)
        return recipe_id

    def insert_many(self, recipes: Sequence[Recipe]) -> int:
        if not recipes:
            return 0

        rows = [_recipe_to_row(recipe, uuid4()) for recipe in recipes]
        try:
            result = self._table().insert(rows).execute()
        except _STORE_ERRORS as error:
            logger.error("Error bulk inserting recipes: %s", error)
            raise RecipeStoreError("insert_many", _error_reason(error)) from error

        return len(result.data or [])

    def update_by_id(self, recipe_id: UUID, draft: RecipeDraft) -> int:
        update_data = {
            "name": draft.name,
            "tags": draft.tags,
            "ingredients": draft.ingredients,
            "instructions": draft.instructions,
        }
        try:
            result = self._table().update(update_data).eq("id", str(recipe_id)).execute()
        except _STORE_ERRORS as error:
            logger.error("Error updating recipe %s: %s", recipe_id, error)
            raise RecipeStoreError("update_by_id", _error_reason(error)) from error

        return len(result.data or [])

    def delete_by_id(self, recipe_id: UUID) -> int:
        try:
            result = self._table().delete().eq("id", str(recipe_id)).execute()
        except _STORE_ERRORS as error:
            logger.error("Error deleting recipe %s: %s", recipe_id, error)
            raise RecipeStoreError("delete_by_id", _error_reason(error)) from error

        return len(result.data or [])
