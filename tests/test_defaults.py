"""Tests for redis_url.defaults."""
from unittest.mock import MagicMock

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "REDIS_URL",
        "REDIS_USERNAME",
        "REDIS_PASSWORD",
        "REDIS_SENTINEL_PASSWORD",
    ):
        monkeypatch.delenv(name, raising=False)


class TestCreateRedis:
    def test_builds_client_for_url(self):
        from redis_url.defaults import create_redis

        cluster_class = MagicMock()
        client = create_redis("redis-cluster://n1:7000", cluster_class=cluster_class)
        assert client is cluster_class.return_value

    def test_uses_env_url(self, monkeypatch):
        from redis_url.defaults import create_redis
        from redis_url.models import Credentials

        monkeypatch.setenv("REDIS_URL", "redis://cache:6380")
        redis_class = MagicMock()
        create_redis(credentials=Credentials(password="1234"), redis_class=redis_class)
        kwargs = redis_class.call_args.kwargs
        assert kwargs["host"] == "cache"
        assert kwargs["port"] == 6380
        assert kwargs["password"] == "1234"

    def test_reuses_redis_url_entry_point(self):
        from redis_url import defaults
        from redis_url.url import RedisURL

        assert defaults.RedisURL is RedisURL
