# src/app/main.py
from __future__ import annotations
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app.config import Settings, get_settings
from src.app.domain.errors import CacheError
from src.app.handlers import install_exception_handlers
from src.app.infra.cache.redis_cache import RedisListingCache, create_redis_client
from src.app.infra.db.supabase_recipes_repo import SupabaseRecipeRepository, create_supabase_client
from src.app.routers.recipes import router as recipes_router
from src.app.services.recipe_listing import RecipeListing
from src.app.services.recipe_service import RecipeService
from src.app.services.seed import load_seed_recipes

# Logging no stdout, coletado pelo container
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
log = logging.getLogger(__name__)


def init_services(app: FastAPI, settings: Settings) -> None:
    """Open the store and cache handles once and hang the services off app.state."""
    cache = RedisListingCache(create_redis_client(settings.REDIS_URL))
    try:
        cache.ping()
        log.info("Connected to redis")
    except CacheError as error:
        log.warning("Redis ping failed: %s", error)

    repository = SupabaseRecipeRepository(
        create_supabase_client(str(settings.SUPABASE_URL), settings.SUPABASE_SERVICE_ROLE_KEY),
        table_name=settings.RECIPES_TABLE,
    )
    # an unreachable store aborts startup
    repository.ping()
    log.info("Connected to database")

    listing = RecipeListing(repository, cache, key=settings.RECIPES_CACHE_KEY)
    service = RecipeService(repository, listing)

    if settings.INIT:
        service.seed(load_seed_recipes(settings.INIT_RECIPES_FILE))

    app.state.recipe_listing = listing
    app.state.recipe_service = service


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="Recipes API", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)
    app.include_router(recipes_router)

    @app.on_event("startup")
    def startup() -> None:
        init_services(app, settings)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app(get_settings())
