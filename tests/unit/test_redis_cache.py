from __future__ import annotations

import pytest
from unittest.mock import MagicMock

from redis.exceptions import ConnectionError as RedisConnectionError

from src.app.domain.errors import CacheError
from src.app.infra.cache.redis_cache import RedisListingCache


@pytest.fixture
def client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def cache(client: MagicMock) -> RedisListingCache:
    return RedisListingCache(client)


class TestRedisListingCache:
    def test_get_hit(self, client: MagicMock, cache: RedisListingCache) -> None:
        client.get.return_value = "[]"
        assert cache.get("recipes") == "[]"
        client.get.assert_called_once_with("recipes")

    def test_get_miss_is_none(self, client: MagicMock, cache: RedisListingCache) -> None:
        client.get.return_value = None
        assert cache.get("recipes") is None

    def test_get_connection_error_is_not_a_miss(self, client: MagicMock, cache: RedisListingCache) -> None:
        client.get.side_effect = RedisConnectionError("Connection refused")

        with pytest.raises(CacheError) as exc_info:
            cache.get("recipes")
        assert exc_info.value.operation == "get"

    def test_set_has_no_expiration(self, client: MagicMock, cache: RedisListingCache) -> None:
        cache.set("recipes", "[]")
        client.set.assert_called_once_with("recipes", "[]")

    def test_set_error(self, client: MagicMock, cache: RedisListingCache) -> None:
        client.set.side_effect = RedisConnectionError("Connection refused")

        with pytest.raises(CacheError):
            cache.set("recipes", "[]")

    def test_delete(self, client: MagicMock, cache: RedisListingCache) -> None:
        client.delete.return_value = 0
        cache.delete("recipes")
        client.delete.assert_called_once_with("recipes")

    def test_delete_error(self, client: MagicMock, cache: RedisListingCache) -> None:
        client.delete.side_effect = RedisConnectionError("Connection refused")

        with pytest.raises(CacheError, match="delete"):
            cache.delete("recipes")

    def test_ping_error(self, client: MagicMock, cache: RedisListingCache) -> None:
        client.ping.side_effect = RedisConnectionError("Connection refused")

        with pytest.raises(CacheError):
            cache.ping()
