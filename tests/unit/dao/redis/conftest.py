from unittest.mock import MagicMock

import pytest
import redis

from intolink.dao.redis import RedisKeySchema, ShortURLRedisDAO


@pytest.fixture
def app_prefix() -> str:
    """Provide a consistent Redis key prefix for testing."""
    return 'testapp:test'


@pytest.fixture
def key_schema() -> RedisKeySchema:
    """Mock RedisKeySchema to return predictable key values."""
    mock = MagicMock(spec=RedisKeySchema)
    mock.forward_key.return_value = 'testapp:test:shortenUrls'
    mock.reverse_key.return_value = 'testapp:test:originalUrls'
    mock.counter_key.return_value = 'testapp:test:resolveCounter'
    return mock


@pytest.fixture
def dao(redis_client, key_schema, app_prefix) -> ShortURLRedisDAO:
    """Create a ShortURLRedisDAO instance with mocked dependencies."""
    _dao = ShortURLRedisDAO(redis_client=redis_client, prefix=app_prefix)
    _dao.keys = key_schema
    return _dao


@pytest.fixture
def unreachable(redis_client) -> redis.Redis:
    """Make the next connection attempt look like it targets an unreachable host."""
    redis_client.connection_pool.connection_kwargs = {'host': '203.0.113.1', 'port': 18000, 'db': 5}
    return redis_client
