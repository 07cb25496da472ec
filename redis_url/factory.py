"""Client construction for each topology."""
from __future__ import annotations

import logging
from typing import Any

from redis.asyncio import Redis
from redis.asyncio.cluster import ClusterNode, RedisCluster
from redis.asyncio.sentinel import Sentinel

from redis_url.errors import MasterNameRequiredError, UnsupportedProtocolError
from redis_url.models import Credentials, ParsedURL
from redis_url.options import resolve_cluster_options, resolve_redis_options
from redis_url.topology import TopologyClass, classify, is_secured

logger = logging.getLogger(__name__)


def build_client(
    parsed: ParsedURL,
    credentials: Credentials,
    *,
    redis_class: Any = Redis,
    sentinel_class: Any = Sentinel,
    cluster_class: Any = RedisCluster,
) -> Any:
    """Construct a client for the topology named by ``parsed.scheme``.

    ``credentials`` must already be resolved; it is used as given. The
    returned client belongs to the caller, who is responsible for closing it.
    No connection is opened here; redis-py connects on the first command.

    Raises:
        UnsupportedProtocolError: If the scheme maps to no topology.
        MasterNameRequiredError: If a sentinel URL has no ``name``.
    """
    topology = classify(parsed.scheme)
    if topology is TopologyClass.UNSUPPORTED:
        raise UnsupportedProtocolError(parsed.scheme)

    secured = is_secured(parsed.scheme)
    logger.debug(
        "Building %s Redis client for %s (secured=%s)",
        topology.value,
        ",".join(str(endpoint) for endpoint in parsed.endpoints),
        secured,
    )

    if topology is TopologyClass.SENTINEL:
        return _build_sentinel(parsed, credentials, secured, sentinel_class)
    if topology is TopologyClass.CLUSTER:
        return _build_cluster(parsed, credentials, secured, cluster_class)
    return _build_single(parsed, credentials, secured, redis_class)


def _build_single(
    parsed: ParsedURL, credentials: Credentials, secured: bool, redis_class: Any
) -> Any:
    options = resolve_redis_options(parsed.params)
    endpoint = parsed.endpoints[0]
    kwargs = options.connection_kwargs()
    if options.path is not None:
        kwargs["unix_socket_path"] = options.path
    return redis_class(
        host=endpoint.host,
        port=endpoint.port,
        username=credentials.username,
        password=credentials.password,
        ssl=secured,
        **kwargs,
    )


def _build_sentinel(
    parsed: ParsedURL, credentials: Credentials, secured: bool, sentinel_class: Any
) -> Any:
    options = resolve_redis_options(parsed.params)
    # redis-py accepts a missing service name and only fails at first command
    if not options.name:
        raise MasterNameRequiredError()
    kwargs = options.connection_kwargs()
    sentinel = sentinel_class(
        [endpoint.as_tuple() for endpoint in parsed.endpoints],
        sentinel_kwargs={
            "password": credentials.sentinel_password,
            "socket_connect_timeout": kwargs["socket_connect_timeout"],
            "ssl": secured,
        },
        password=credentials.password,
        ssl=secured,
        **kwargs,
    )
    return sentinel.master_for(options.name)


def _build_cluster(
    parsed: ParsedURL, credentials: Credentials, secured: bool, cluster_class: Any
) -> Any:
    options = resolve_cluster_options(parsed.params)
    kwargs = options.redis_options.connection_kwargs()
    # cluster nodes only serve db 0
    kwargs.pop("db")
    kwargs["retry"] = options.cluster_retry()
    if options.reads_from_replicas:
        kwargs["read_from_replicas"] = True
    return cluster_class(
        startup_nodes=[
            ClusterNode(endpoint.host, endpoint.port) for endpoint in parsed.endpoints
        ],
        username=credentials.username,
        password=credentials.password,
        ssl=secured,
        **kwargs,
    )
