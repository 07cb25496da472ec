"""Scheme to deployment topology mapping."""
from enum import Enum


class TopologyClass(Enum):
    """Deployment shape a connection string targets."""

    SINGLE = "single"
    SENTINEL = "sentinel"
    CLUSTER = "cluster"
    UNSUPPORTED = "unsupported"


_TOPOLOGIES: dict[str, TopologyClass] = {
    "redis:": TopologyClass.SINGLE,
    "rediss:": TopologyClass.SINGLE,
    "redis-sentinel:": TopologyClass.SENTINEL,
    "rediss-sentinel:": TopologyClass.SENTINEL,
    "redis-cluster:": TopologyClass.CLUSTER,
    "rediss-cluster:": TopologyClass.CLUSTER,
}

_SECURED_SCHEMES = frozenset({"rediss:", "rediss-sentinel:", "rediss-cluster:"})


def classify(scheme: str) -> TopologyClass:
    """Return the topology for a scheme such as ``"redis-cluster:"``."""
    return _TOPOLOGIES.get(scheme, TopologyClass.UNSUPPORTED)


def is_secured(scheme: str) -> bool:
    """Return True for the TLS (``rediss``) schemes."""
    return scheme in _SECURED_SCHEMES
