"""Tests for redis_url.models value objects."""
import dataclasses

import pytest


class TestEndpoint:
    def test_default_port(self):
        from redis_url.models import Endpoint

        assert Endpoint("localhost").port == 6379

    def test_as_tuple(self):
        from redis_url.models import Endpoint

        assert Endpoint("10.0.0.1", 26379).as_tuple() == ("10.0.0.1", 26379)

    def test_str(self):
        from redis_url.models import Endpoint

        assert str(Endpoint("cache", 7000)) == "cache:7000"

    def test_frozen(self):
        from redis_url.models import Endpoint

        endpoint = Endpoint("localhost")
        with pytest.raises(dataclasses.FrozenInstanceError):
            endpoint.port = 1


class TestCredentials:
    def test_all_unset_by_default(self):
        from redis_url.models import Credentials

        credentials = Credentials()
        assert credentials.username is None
        assert credentials.password is None
        assert credentials.sentinel_password is None

    def test_frozen(self):
        from redis_url.models import Credentials

        with pytest.raises(dataclasses.FrozenInstanceError):
            Credentials().password = "x"


class TestErrors:
    def test_hierarchy(self):
        from redis_url.errors import (
            FormatError,
            MasterNameRequiredError,
            RedisURLError,
            UnsupportedProtocolError,
        )

        assert issubclass(RedisURLError, ValueError)
        for error in (FormatError, UnsupportedProtocolError, MasterNameRequiredError):
            assert issubclass(error, RedisURLError)

    def test_unsupported_protocol_message(self):
        from redis_url.errors import UnsupportedProtocolError

        error = UnsupportedProtocolError("http:")
        assert error.scheme == "http:"
        assert "http:" in str(error)


class TestParsedURL:
    def test_hashable(self):
        from redis_url.parser import parse_url

        first = parse_url("redis-cluster://n1:7000,n2?scaleReads=all")
        second = parse_url("redis-cluster://n1:7000,n2?scaleReads=all")
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_params_still_compared(self):
        from redis_url.parser import parse_url

        assert parse_url("redis://h?db=1") != parse_url("redis://h?db=2")
