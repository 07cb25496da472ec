"""Pre-configured client creation for redis-url."""
from __future__ import annotations

from typing import Any

from redis_url.models import Credentials
from redis_url.url import RedisURL


def create_redis(
    url: str | None = None,
    credentials: Credentials | None = None,
    **client_classes: Any,
) -> Any:
    """Create a client straight from a connection string.

    Args:
        url: Connection string; defaults to ``$REDIS_URL`` then
            ``redis://127.0.0.1``.
        credentials: Overrides for the environment credentials.
        **client_classes: ``redis_class``, ``sentinel_class`` or
            ``cluster_class`` replacements forwarded to the factory.
    """
    return RedisURL(url, credentials).get_redis(**client_classes)
