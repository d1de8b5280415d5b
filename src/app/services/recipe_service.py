# src/app/services/recipe_service.py
"""
Recipe service.
Single-record reads and every write, each write followed by a listing eviction.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Sequence
from uuid import UUID

from src.app.domain.errors import RecipeNotFoundError
from src.app.domain.models import Recipe, RecipeDraft, parse_recipe_id
from src.app.infra.db.base import RecipeRepository
from src.app.services.recipe_listing import RecipeListing

logger = logging.getLogger(__name__)


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class RecipeService:
    """
    Service for managing recipes.

    Responsibilities:
    - Fetch a single recipe
    - Create, update and delete recipes
    - Evict the listing cache after every write
    - Bulk load demo data
    """

    def __init__(self, repository: RecipeRepository, listing: RecipeListing):
        self._repo = repository
        self._listing = listing

    def get_by_id(self, recipe_id: str | UUID) -> Recipe:
        """
        Raises:
            InvalidInputError: If the id is not a valid identifier
            RecipeNotFoundError: If no recipe has that id
            RecipeStoreError: On any other store failure
        """
        parsed_id = parse_recipe_id(recipe_id)
        recipe = self._repo.find_by_id(parsed_id)
        if recipe is None:
            raise RecipeNotFoundError(str(parsed_id))
        return recipe

    def create(self, draft: RecipeDraft) -> Recipe:
        # placeholder id, the store assigns the real one
        recipe = Recipe.from_draft(UUID(int=0), draft, _now_utc())
        recipe_id = self._repo.insert_one(recipe)
        created = replace(recipe, id=recipe_id)

        self._listing.invalidate_listing()
        logger.info("Recipe created: id=%s", recipe_id)
        return created

    def update(self, recipe_id: str | UUID, draft: RecipeDraft) -> None:
        """Replace a recipe's fields. A missing id is not an error."""
        parsed_id = parse_recipe_id(recipe_id)
        matched = self._repo.update_by_id(parsed_id, draft)
        if matched == 0:
            logger.info("Update matched no recipe: id=%s", parsed_id)

        self._listing.invalidate_listing()

    def delete(self, recipe_id: str | UUID) -> None:
        """Delete a recipe. A missing id is not an error."""
        parsed_id = parse_recipe_id(recipe_id)
        deleted = self._repo.delete_by_id(parsed_id)
        if deleted == 0:
            logger.info("Delete matched no recipe: id=%s", parsed_id)

        self._listing.invalidate_listing()

    def seed(self, recipes: Sequence[Recipe]) -> int:
        inserted = self._repo.insert_many(recipes)
        self._listing.invalidate_listing()
        logger.info("Inserted recipes count: %d", inserted)
        return inserted
