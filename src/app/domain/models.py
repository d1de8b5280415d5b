# src/app/domain/models.py
"""
Domain models for recipe records.
These are pure data structures with no infrastructure dependencies.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from src.app.domain.errors import InvalidInputError, InvalidRecipeIdError


def parse_recipe_id(raw: str | UUID) -> UUID:
    """Parse a client supplied identifier, rejecting anything that is not a UUID."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except (TypeError, ValueError, AttributeError) as error:
        raise InvalidRecipeIdError(str(raw)) from error


_FRACTION_RE = re.compile(r"\.(\d{1,6})(?=[+-]\d|$)")


def parse_timestamp(value: str | datetime) -> datetime:
    """
    Parse an ISO 8601 timestamp as sent by PostgREST.
    Postgres trims trailing zeros from the fraction; it is padded back to
    microseconds so fromisoformat accepts it on every supported Python.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected an ISO timestamp, got {value!r}")
    normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
    normalized = _FRACTION_RE.sub(lambda match: "." + match.group(1).ljust(6, "0"), normalized)
    return datetime.fromisoformat(normalized)


def _require_str_list(value: Any, field_name: str) -> list[str]:
    if not isinstance(value, list):
        raise InvalidInputError(f"'{field_name}' must be a list of strings")
    for item in value:
        if not isinstance(item, str):
            raise InvalidInputError(f"'{field_name}' must be a list of strings")
    return list(value)


@dataclass
class RecipeDraft:
    """Client supplied recipe fields, used for both create and update."""
    name: str
    tags: list[str] = field(default_factory=list)
    ingredients: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidInputError("'name' must be a string")
        self.tags = _require_str_list(self.tags, "tags")
        self.ingredients = _require_str_list(self.ingredients, "ingredients")
        self.instructions = _require_str_list(self.instructions, "instructions")


@dataclass
class Recipe:
    """
    A stored recipe.
    `id` and `published_at` are fixed at creation; updates replace the rest.
    """
    id: UUID
    name: str
    tags: list[str]
    ingredients: list[str]
    instructions: list[str]
    published_at: datetime

    @classmethod
    def from_draft(cls, recipe_id: UUID, draft: RecipeDraft, published_at: datetime) -> Recipe:
        return cls(
            id=recipe_id,
            name=draft.name,
            tags=list(draft.tags),
            ingredients=list(draft.ingredients),
            instructions=list(draft.instructions),
            published_at=published_at,
        )
