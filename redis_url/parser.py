"""Connection string parser.

Accepted grammar::

    scheme://host1[:port1][,host2[:port2]...][/anything][?key1=val1&key2=val2...]
"""
from __future__ import annotations

import re
from urllib.parse import parse_qsl

from redis_url.errors import FormatError
from redis_url.models import DEFAULT_PORT, Endpoint, ParsedURL

_URL_PATTERN = re.compile(
    r"(?P<scheme>[^:\s]+:)//(?P<authority>[^/?\s]+)(/[^?\s]*)?(\?(?P<query>\S*))?"
)
_SERVER_PATTERN = re.compile(r"(?P<host>[^:\s]+)(:(?P<port>[0-9]+))?")


def parse_endpoint(server: str) -> Endpoint:
    """Parse one ``host[:port]`` token."""
    match = _SERVER_PATTERN.fullmatch(server)
    if match is None:
        raise FormatError(f"Invalid server address: {server!r}")
    port = match.group("port")
    return Endpoint(
        host=match.group("host"),
        port=int(port) if port is not None else DEFAULT_PORT,
    )


def parse_query(query: str | None) -> dict[str, str]:
    """Parse a query string; the last value wins for repeated keys."""
    if not query:
        return {}
    return dict(parse_qsl(query, keep_blank_values=True))


def parse_url(url: str) -> ParsedURL:
    """Split a connection string into scheme, endpoints and parameters.

    Args:
        url: Connection string, e.g.
            ``redis-sentinel://10.0.0.1:26379,10.0.0.2:26379?name=mymaster``

    Returns:
        The parsed scheme (with trailing colon), endpoints and query table.

    Raises:
        FormatError: If the string does not have the ``scheme://authority``
            shape, contains whitespace, or a server token has a port that
            is not made of ASCII digits.
    """
    if not isinstance(url, str):
        raise FormatError(f"Connection string must be a str, got {type(url).__name__}")
    match = _URL_PATTERN.fullmatch(url)
    if match is None:
        raise FormatError(f"Invalid connection string: {url!r}")
    endpoints = tuple(
        parse_endpoint(server) for server in match.group("authority").split(",")
    )
    return ParsedURL(
        scheme=match.group("scheme"),
        endpoints=endpoints,
        params=parse_query(match.group("query")),
    )
