# src/app/deps.py (handles are built once at startup and read from app.state)

from __future__ import annotations

from fastapi import Request

from src.app.services.recipe_listing import RecipeListing
from src.app.services.recipe_service import RecipeService


def get_recipe_listing(request: Request) -> RecipeListing:
    return request.app.state.recipe_listing


def get_recipe_service(request: Request) -> RecipeService:
    return request.app.state.recipe_service
