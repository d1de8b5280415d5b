# src/app/schemas/recipes.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.app.domain.models import Recipe, RecipeDraft


class RecipeRequest(BaseModel):
    # absent or null fields bind to their zero value; only wrong types are rejected
    name: Optional[str] = None
    tags: Optional[list[str]] = None
    ingredients: Optional[list[str]] = None
    instructions: Optional[list[str]] = None

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft(
            name=self.name or "",
            tags=self.tags or [],
            ingredients=self.ingredients or [],
            instructions=self.instructions or [],
        )


class RecipeResponse(BaseModel):
    id: str
    name: str
    tags: list[str] = Field(default_factory=list)
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    publishedAt: datetime

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> RecipeResponse:
        return cls(
            id=str(recipe.id),
            name=recipe.name,
            tags=recipe.tags,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            publishedAt=recipe.published_at,
        )
