"""RedisURL: unified entry point from connection string to client."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from redis_url.config import resolve_credentials, resolve_url
from redis_url.factory import build_client
from redis_url.models import Credentials, Endpoint, ParsedURL
from redis_url.options import (
    ClusterOptions,
    RedisOptions,
    resolve_cluster_options,
    resolve_redis_options,
)
from redis_url.parser import parse_url
from redis_url.topology import TopologyClass, classify, is_secured


class RedisURL:
    """A parsed connection string that knows how to build its client.

    Supported schemes: ``redis``/``rediss`` (single node),
    ``redis-sentinel``/``rediss-sentinel`` and
    ``redis-cluster``/``rediss-cluster``. Parsing happens on construction, so
    a malformed string raises ``FormatError`` immediately; an unsupported
    scheme only fails in ``get_redis()``.
    """

    def __init__(
        self,
        url: str | None = None,
        credentials: Credentials | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._raw_url = resolve_url(url, environ)
        self._credentials = resolve_credentials(credentials, environ)
        self._parsed: ParsedURL = parse_url(self._raw_url)

    def __repr__(self) -> str:
        hosts = ",".join(str(endpoint) for endpoint in self._parsed.endpoints)
        return f"RedisURL('{self._parsed.scheme}//{hosts}')"

    @property
    def raw_url(self) -> str:
        return self._raw_url

    @property
    def scheme(self) -> str:
        return self._parsed.scheme

    @property
    def endpoints(self) -> tuple[Endpoint, ...]:
        return self._parsed.endpoints

    @property
    def params(self) -> dict[str, str]:
        return dict(self._parsed.params)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def topology(self) -> TopologyClass:
        return classify(self._parsed.scheme)

    @property
    def single(self) -> bool:
        return self.topology is TopologyClass.SINGLE

    @property
    def secured(self) -> bool:
        return is_secured(self._parsed.scheme)

    @property
    def uses_sentinel(self) -> bool:
        return self.topology is TopologyClass.SENTINEL

    @property
    def clustered(self) -> bool:
        return self.topology is TopologyClass.CLUSTER

    def redis_options(self) -> RedisOptions:
        return resolve_redis_options(self._parsed.params)

    def cluster_options(self) -> ClusterOptions:
        return resolve_cluster_options(self._parsed.params)

    def get_redis(self, **client_classes: Any) -> Any:
        """Build the client for this URL's topology.

        Args:
            **client_classes: Optional ``redis_class``, ``sentinel_class`` or
                ``cluster_class`` used instead of the redis-py asyncio classes.

        Returns:
            A ``Redis`` client (single node or sentinel-managed master) or a
            ``RedisCluster``. Close it with ``await client.aclose()``.
        """
        return build_client(self._parsed, self._credentials, **client_classes)
