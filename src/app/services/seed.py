# src/app/services/seed.py
"""Demo dataset loading, run once at startup when INIT is enabled."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from uuid import UUID

from src.app.domain.models import Recipe, RecipeDraft, parse_timestamp

logger = logging.getLogger(__name__)


def _published_at(value: Any) -> datetime:
    if isinstance(value, str) and value:
        return parse_timestamp(value)
    return datetime.now(timezone.utc)


def recipe_from_seed_entry(entry: dict[str, Any]) -> Recipe:
    draft = RecipeDraft(
        name=entry.get("name"),
        tags=entry.get("tags") or [],
        ingredients=entry.get("ingredients") or [],
        instructions=entry.get("instructions") or [],
    )
    return Recipe.from_draft(UUID(int=0), draft, _published_at(entry.get("publishedAt")))


def load_seed_recipes(path: str | Path) -> list[Recipe]:
    """
    Read a JSON array of recipe objects.
    Raises InvalidInputError for entries that do not match the recipe shape.
    """
    raw = Path(path).read_text(encoding="utf-8")
    entries = json.loads(raw)
    if not isinstance(entries, list):
        raise ValueError(f"{path}: expected a JSON array of recipes")

    recipes = [recipe_from_seed_entry(entry) for entry in entries]
    logger.info("Loaded %d demo recipes from %s", len(recipes), path)
    return recipes
