"""Resolution of query parameters into typed client options."""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from redis.asyncio.retry import Retry
from redis.backoff import AbstractBackoff

RetryStrategy = Callable[[int], int]

RECONNECT_DELAY_MS = 1000


def fixed_retry_strategy(attempt: int) -> int:
    """Wait the same delay (ms) before every reconnect attempt."""
    return RECONNECT_DELAY_MS


class StrategyBackoff(AbstractBackoff):
    """Adapts a millisecond retry strategy to redis-py's backoff interface."""

    def __init__(self, strategy: RetryStrategy) -> None:
        self._strategy = strategy

    def compute(self, failures: int) -> float:
        return self._strategy(failures) / 1000


# Booleans are compared against exact strings. Options defaulting to True are
# only disabled by "false"; options defaulting to False only enabled by "true".
BOOLEAN_DEFAULTS: dict[str, bool] = {
    "noDelay": True,
    "dropBufferSupport": False,
    "enableReadyCheck": True,
    "enableOfflineQueue": True,
    "autoResubscribe": True,
    "autoResendUnfulfilledCommands": True,
    "lazyConnect": False,
    "readOnly": False,
    "stringNumbers": False,
    "enableAutoPipelining": False,
}


def _bool_param(params: Mapping[str, str], key: str) -> bool:
    if BOOLEAN_DEFAULTS[key]:
        return params.get(key) != "false"
    return params.get(key) == "true"


def _int_param(params: Mapping[str, str], key: str, default: int) -> int:
    try:
        value = int(params[key])
    except (KeyError, TypeError, ValueError):
        return default
    # zero counts as unset
    return value or default


def _list_param(params: Mapping[str, str], key: str) -> tuple[str, ...]:
    return tuple(item for item in params.get(key, "").split(",") if item)


@dataclass(frozen=True)
class RedisOptions:
    """Per-connection options.

    Field names follow the query parameter names in snake_case. Options that
    redis-py has no counterpart for are still resolved and kept here.
    """

    name: str | None = None
    family: int = 4
    path: str | None = None
    keep_alive: int = 0
    no_delay: bool = True
    connection_name: str | None = None
    db: int = 0
    drop_buffer_support: bool = False
    enable_ready_check: bool = True
    enable_offline_queue: bool = True
    connect_timeout: int = 10000  # ms
    auto_resubscribe: bool = True
    auto_resend_unfulfilled_commands: bool = True
    lazy_connect: bool = False
    key_prefix: str = ""
    retry_strategy: RetryStrategy = fixed_retry_strategy
    max_retries_per_request: int = 0
    reconnect_on_error: Callable[[Exception], bool] | None = None
    read_only: bool = False
    string_numbers: bool = False
    enable_auto_pipelining: bool = False
    auto_pipelining_ignored_commands: tuple[str, ...] = ()
    max_scripts_caching_time: int = 60000  # ms

    def connection_kwargs(self) -> dict[str, Any]:
        """Keyword arguments understood by redis-py connections."""
        return {
            "db": self.db,
            "client_name": self.connection_name,
            "socket_connect_timeout": self.connect_timeout / 1000,
            "socket_keepalive": self.keep_alive > 0,
            "retry": Retry(
                StrategyBackoff(self.retry_strategy), self.max_retries_per_request
            ),
        }


@dataclass(frozen=True)
class ClusterOptions:
    """Cluster-wide options plus the options applied to every node."""

    enable_offline_queue: bool = True
    enable_ready_check: bool = True
    scale_reads: str = "master"
    max_redirections: int = 16
    retry_delay_on_failover: int = 100
    retry_delay_on_cluster_down: int = 100
    retry_delay_on_try_again: int = 100
    cluster_retry_strategy: RetryStrategy = fixed_retry_strategy
    slots_refresh_timeout: int = 1000
    slots_refresh_interval: int = 5000
    redis_options: RedisOptions = field(default_factory=RedisOptions)

    @property
    def reads_from_replicas(self) -> bool:
        return self.scale_reads != "master"

    def cluster_retry(self) -> Retry:
        return Retry(
            StrategyBackoff(self.cluster_retry_strategy),
            self.redis_options.max_retries_per_request,
        )


def resolve_redis_options(params: Mapping[str, str]) -> RedisOptions:
    """Build per-connection options from a query parameter table.

    Absent or unparseable values fall back to their defaults; this never
    raises.
    """
    return RedisOptions(
        name=params.get("name"),
        family=_int_param(params, "family", 4),
        path=params.get("path") or None,
        keep_alive=_int_param(params, "keepAlive", 0),
        no_delay=_bool_param(params, "noDelay"),
        connection_name=params.get("connectionName") or None,
        db=_int_param(params, "db", 0),
        drop_buffer_support=_bool_param(params, "dropBufferSupport"),
        enable_ready_check=_bool_param(params, "enableReadyCheck"),
        enable_offline_queue=_bool_param(params, "enableOfflineQueue"),
        connect_timeout=_int_param(params, "connectTimeout", 10000),
        auto_resubscribe=_bool_param(params, "autoResubscribe"),
        auto_resend_unfulfilled_commands=_bool_param(
            params, "autoResendUnfulfilledCommands"
        ),
        lazy_connect=_bool_param(params, "lazyConnect"),
        key_prefix=params.get("keyPrefix") or "",
        max_retries_per_request=_int_param(params, "maxRetriesPerRequest", 0),
        read_only=_bool_param(params, "readOnly"),
        string_numbers=_bool_param(params, "stringNumbers"),
        enable_auto_pipelining=_bool_param(params, "enableAutoPipelining"),
        auto_pipelining_ignored_commands=_list_param(
            params, "autoPipeliningIgnoredCommands"
        ),
        max_scripts_caching_time=_int_param(params, "maxScriptsCachingTime", 60000),
    )


def resolve_cluster_options(params: Mapping[str, str]) -> ClusterOptions:
    """Build cluster options, embedding the per-node options."""
    return ClusterOptions(
        enable_offline_queue=_bool_param(params, "enableOfflineQueue"),
        enable_ready_check=_bool_param(params, "enableReadyCheck"),
        scale_reads=params.get("scaleReads") or "master",
        max_redirections=_int_param(params, "maxRedirections", 16),
        retry_delay_on_failover=_int_param(params, "retryDelayOnFailover", 100),
        retry_delay_on_cluster_down=_int_param(params, "retryDelayOnClusterDown", 100),
        retry_delay_on_try_again=_int_param(params, "retryDelayOnTryAgain", 100),
        slots_refresh_timeout=_int_param(params, "slotsRefreshTimeout", 1000),
        slots_refresh_interval=_int_param(params, "slotsRefreshInterval", 5000),
        redis_options=resolve_redis_options(params),
    )
