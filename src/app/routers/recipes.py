# src/app/routers/recipes.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from starlette.concurrency import run_in_threadpool

from src.app.deps import get_recipe_listing, get_recipe_service
from src.app.domain.errors import InvalidInputError, RecipeError, RecipeNotFoundError
from src.app.schemas.recipes import RecipeRequest, RecipeResponse
from src.app.services.recipe_listing import RecipeListing
from src.app.services.recipe_service import RecipeService

log = logging.getLogger("recipes")
router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("", response_model=list[RecipeResponse])
async def list_recipes(
    listing: RecipeListing = Depends(get_recipe_listing),
) -> list[RecipeResponse]:
    try:
        recipes = await run_in_threadpool(listing.get_listing)
    except RecipeError as exc:
        log.error("Listing recipes failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return [RecipeResponse.from_recipe(recipe) for recipe in recipes]


# A malformed id is reported as 500 on the id routes, matching the existing API.
@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    try:
        recipe = await run_in_threadpool(service.get_by_id, recipe_id)
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Recipe has not found by the given id") from exc
    except RecipeError as exc:
        log.error("Getting recipe %s failed: %s", recipe_id, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return RecipeResponse.from_recipe(recipe)


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeRequest,
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    try:
        draft = payload.to_draft()
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    try:
        recipe = await run_in_threadpool(service.create, draft)
    except RecipeError as exc:
        log.error("Creating recipe failed: %s", exc)
        raise HTTPException(status_code=500, detail="Error while inserting a new recipe") from exc
    return RecipeResponse.from_recipe(recipe)


@router.put("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_recipe(
    recipe_id: str,
    payload: RecipeRequest,
    service: RecipeService = Depends(get_recipe_service),
) -> Response:
    try:
        draft = payload.to_draft()
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    try:
        await run_in_threadpool(service.update, recipe_id, draft)
    except RecipeError as exc:
        log.error("Updating recipe %s failed: %s", recipe_id, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: str,
    service: RecipeService = Depends(get_recipe_service),
) -> Response:
    try:
        await run_in_threadpool(service.delete, recipe_id)
    except RecipeError as exc:
        log.error("Deleting recipe %s failed: %s", recipe_id, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
