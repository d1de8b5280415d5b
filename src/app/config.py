from __future__ import annotations

from pydantic import AnyUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=False,
        extra="ignore",
    )

    SUPABASE_URL: AnyUrl
    SUPABASE_SERVICE_ROLE_KEY: str
    REDIS_URL: str = "redis://localhost:6379/0"
    RECIPES_TABLE: str = "recipes"
    RECIPES_CACHE_KEY: str = "recipes"
    # seeds the demo dataset on startup
    INIT: bool = False
    INIT_RECIPES_FILE: str = "resources/init_recipes.json"
    FRONTEND_CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
    )


def get_settings() -> Settings:
    return Settings()
