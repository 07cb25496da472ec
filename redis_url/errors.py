"""Exceptions raised while parsing connection strings and building clients."""


class RedisURLError(ValueError):
    """Base class for redis-url errors."""


class FormatError(RedisURLError):
    """The connection string does not match ``scheme://host[:port][,...]``."""


class UnsupportedProtocolError(RedisURLError):
    """The scheme does not map to any known topology."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f"Unsupported protocol: {scheme!r}")
        self.scheme = scheme


class MasterNameRequiredError(RedisURLError):
    """A sentinel connection string has no ``name`` parameter."""

    def __init__(self) -> None:
        super().__init__("Requires the name of master.")
