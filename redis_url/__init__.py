"""redis-url: build Redis clients from a single connection string."""
from redis_url.config import DEFAULT_REDIS_URL, resolve_credentials, resolve_url
from redis_url.defaults import create_redis
from redis_url.errors import (
    FormatError,
    MasterNameRequiredError,
    RedisURLError,
    UnsupportedProtocolError,
)
from redis_url.factory import build_client
from redis_url.models import DEFAULT_PORT, Credentials, Endpoint, ParsedURL
from redis_url.options import (
    ClusterOptions,
    RedisOptions,
    resolve_cluster_options,
    resolve_redis_options,
)
from redis_url.parser import parse_url
from redis_url.topology import TopologyClass, classify, is_secured
from redis_url.url import RedisURL

__all__ = [
    # Models
    "Endpoint",
    "ParsedURL",
    "Credentials",
    # Parsing and classification
    "parse_url",
    "TopologyClass",
    "classify",
    "is_secured",
    # Options
    "RedisOptions",
    "ClusterOptions",
    "resolve_redis_options",
    "resolve_cluster_options",
    # Client construction
    "build_client",
    "RedisURL",
    # Defaults
    "DEFAULT_PORT",
    "DEFAULT_REDIS_URL",
    "resolve_url",
    "resolve_credentials",
    "create_redis",
    # Errors
    "RedisURLError",
    "FormatError",
    "UnsupportedProtocolError",
    "MasterNameRequiredError",
]
