"""Environment configuration for redis-url."""
from __future__ import annotations

import os
from collections.abc import Mapping

from redis_url.models import Credentials

DEFAULT_REDIS_URL = "redis://127.0.0.1"

REDIS_URL_ENV = "REDIS_URL"
REDIS_USERNAME_ENV = "REDIS_USERNAME"
REDIS_PASSWORD_ENV = "REDIS_PASSWORD"
REDIS_SENTINEL_PASSWORD_ENV = "REDIS_SENTINEL_PASSWORD"


def resolve_url(url: str | None = None, environ: Mapping[str, str] | None = None) -> str:
    """Resolve the connection string.

    Resolution order:
      1. Explicit ``url`` parameter
      2. ``REDIS_URL`` environment variable
      3. ``redis://127.0.0.1``
    """
    if url is not None:
        return url
    env = os.environ if environ is None else environ
    return env.get(REDIS_URL_ENV) or DEFAULT_REDIS_URL


def resolve_credentials(
    credentials: Credentials | None = None,
    environ: Mapping[str, str] | None = None,
) -> Credentials:
    """Fill every unset credential from its own environment variable."""
    env = os.environ if environ is None else environ
    given = credentials or Credentials()
    return Credentials(
        username=_first(given.username, env.get(REDIS_USERNAME_ENV)),
        password=_first(given.password, env.get(REDIS_PASSWORD_ENV)),
        sentinel_password=_first(
            given.sentinel_password, env.get(REDIS_SENTINEL_PASSWORD_ENV)
        ),
    )


def _first(value: str | None, fallback: str | None) -> str | None:
    return value if value is not None else fallback
