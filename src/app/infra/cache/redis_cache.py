from __future__ import annotations

import logging

import redis
from redis.exceptions import RedisError

from src.app.domain.errors import CacheError
from src.app.infra.cache.base import ListingCache

logger = logging.getLogger(__name__)


def create_redis_client(redis_url: str) -> redis.Redis:
    return redis.Redis.from_url(redis_url, encoding="utf-8", decode_responses=True)


class RedisListingCache(ListingCache):
    def __init__(self, client: redis.Redis):
        self._client = client

    def ping(self) -> None:
        try:
            self._client.ping()
        except RedisError as error:
            raise CacheError("ping", str(error)) from error

    def get(self, key: str) -> str | None:
        try:
            return self._client.get(key)
        except RedisError as error:
            logger.error("Redis GET failed: key=%s, error=%s", key, error)
            raise CacheError("get", str(error)) from error

    def set(self, key: str, blob: str) -> None:
        try:
            self._client.set(key, blob)
        except RedisError as error:
            logger.error("Redis SET failed: key=%s, error=%s", key, error)
            raise CacheError("set", str(error)) from error

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except RedisError as error:
            logger.error("Redis DEL failed: key=%s, error=%s", key, error)
            raise CacheError("delete", str(error)) from error
