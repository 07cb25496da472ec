"""Value objects produced by connection string parsing."""
from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_PORT = 6379


@dataclass(frozen=True)
class Endpoint:
    """A single server address."""

    host: str
    port: int = DEFAULT_PORT

    def as_tuple(self) -> tuple[str, int]:
        return (self.host, self.port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class ParsedURL:
    """Result of parsing a connection string.

    ``scheme`` keeps its trailing colon (``"redis:"``). ``endpoints`` is never
    empty; for sentinel and cluster URLs it is the seed list in the order it
    was written. Hashing ignores ``params``.
    """

    scheme: str
    endpoints: tuple[Endpoint, ...]
    params: dict[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class Credentials:
    """Authentication inputs.

    Any field left as ``None`` is filled from its own environment variable
    when resolved; ``password`` and ``sentinel_password`` never stand in for
    each other.
    """

    username: str | None = None
    password: str | None = None
    sentinel_password: str | None = None
