"""Tests for redis_url public API exports."""
import redis_url


class TestPublicExports:
    def test_redis_url_importable(self):
        from redis_url import RedisURL
        assert RedisURL is not None

    def test_parse_url_importable(self):
        from redis_url import parse_url
        assert parse_url is not None

    def test_errors_importable(self):
        from redis_url import FormatError, UnsupportedProtocolError
        assert FormatError is not None
        assert UnsupportedProtocolError is not None

    def test_options_importable(self):
        from redis_url import ClusterOptions, RedisOptions
        assert RedisOptions is not None
        assert ClusterOptions is not None

    def test_all_names_resolve(self):
        for name in redis_url.__all__:
            assert hasattr(redis_url, name), name

    def test_all_contains_core_names(self):
        expected = {
            "RedisURL",
            "parse_url",
            "classify",
            "is_secured",
            "TopologyClass",
            "resolve_redis_options",
            "resolve_cluster_options",
            "build_client",
            "Credentials",
            "Endpoint",
            "FormatError",
            "UnsupportedProtocolError",
        }
        assert expected <= set(redis_url.__all__)
