# src/app/infra/db/base.py
"""
Abstract base class for the recipe record store.
This interface allows easy swapping between different persistence backends.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from src.app.domain.models import Recipe, RecipeDraft


class RecipeRepository(ABC):
    """
    Abstract interface for recipe persistence.

    Implementations:
    - SupabaseRecipeRepository: `recipes` table behind Supabase/PostgREST

    Every method raises RecipeStoreError when the backend fails.
    """

    @abstractmethod
    def ping(self) -> None:
        """Raise RecipeStoreError if the store cannot be reached."""
        pass

    @abstractmethod
    def find_all(self) -> list[Recipe]:
        """
        Return every stored recipe, in whatever order the store yields them.
        Rows that cannot be decoded are skipped.
        """
        pass

    @abstractmethod
    def find_by_id(self, recipe_id: UUID) -> Optional[Recipe]:
        """
        Get a recipe by its ID.

        Returns:
            The recipe, or None if not found
        """
        pass

    @abstractmethod
    def insert_one(self, recipe: Recipe) -> UUID:
        """
        Persist a new recipe. The store assigns the identifier.

        Args:
            recipe: Recipe to insert; its `id` is ignored

        Returns:
            The assigned ID
        """
        pass

    @abstractmethod
    def insert_many(self, recipes: Sequence[Recipe]) -> int:
        """
        Bulk insert recipes, assigning fresh identifiers.

        Returns:
            Number of inserted recipes
        """
        pass

    @abstractmethod
    def update_by_id(self, recipe_id: UUID, draft: RecipeDraft) -> int:
        """
        Replace the mutable fields of a recipe. `published_at` is left alone.

        Returns:
            Number of matched recipes (0 is not an error)
        """
        pass

    @abstractmethod
    def delete_by_id(self, recipe_id: UUID) -> int:
        """
        Delete a recipe.

        Returns:
            Number of deleted recipes (0 is not an error)
        """
        pass
