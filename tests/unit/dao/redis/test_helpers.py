"""Unit tests for handle_redis_connection_error decorator.

This test suite verifies that the decorator properly handles Redis
connection failures and preserves the original method's behavior.

Test coverage includes:
    1. Normal function execution
       - Ensures the wrapped method executes and returns its result.
    2. Connection error handling
       - Ensures Redis connection errors and timeouts are converted into DataStoreError.
       - Ensures server-side command errors (OOM, WRONGTYPE) are converted into DataStoreError.
       - Ensures non-Redis exceptions pass through untouched.
    3. Function metadata preservation
       - Confirms functools.wraps preserves the original function's name and docstring.
"""

import pytest
import redis
from unittest.mock import MagicMock

from intolink.dao.redis.helpers import handle_redis_connection_error
from intolink.dao.exceptions import DataStoreError


class DummyDAO:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {
            'host': 'localhost',
            'port': 6379,
            'db': 0,
        }

    @handle_redis_connection_error
    def call(self):
        if self.error is not None:
            raise self.error
        return 'OK'


# -------------------------------
# 1. Normal execution
# -------------------------------


def test_decorator_allows_normal_execution():
    """Ensure the wrapped function executes normally when no error occurs."""
    assert DummyDAO().call() == 'OK'


# -------------------------------
# 2. Connection error handling
# -------------------------------


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ConnectionError('Cannot connect'),
        redis.exceptions.TimeoutError('Timeout reading from socket'),
        redis.exceptions.AuthenticationError('invalid password'),
    ],
)
def test_decorator_transforms_redis_connection_error(error):
    """Ensure connectivity errors are caught and re-raised as DataStoreError."""
    with pytest.raises(DataStoreError, match="Can't connect to Redis at localhost:6379/0.") as exc_info:
        DummyDAO(error).call()

    assert exc_info.value.__cause__ is error


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ResponseError("OOM command not allowed when used memory > 'maxmemory'."),
        redis.exceptions.ResponseError('WRONGTYPE Operation against a key holding the wrong kind of value'),
        redis.exceptions.ReadOnlyError("You can't write against a read only replica."),
    ],
)
def test_decorator_transforms_redis_command_error(error):
    """Ensure errors reported by the Redis server are re-raised as DataStoreError."""
    with pytest.raises(DataStoreError, match='Redis command failed at localhost:6379/0') as exc_info:
        DummyDAO(error).call()

    assert exc_info.value.__cause__ is error


def test_decorator_does_not_swallow_other_errors():
    """Ensure non-Redis exceptions propagate unchanged."""
    with pytest.raises(KeyError):
        DummyDAO(KeyError('shortcode')).call()


# -------------------------------
# 3. Function metadata preservation
# -------------------------------


def test_decorator_preserves_function_metadata():
    """Ensure function name and docstring are preserved via functools.wraps."""

    @handle_redis_connection_error
    def sample_function():
        """This is a sample docstring."""
        return 'OK'

    assert sample_function.__name__ == 'sample_function'
    assert 'sample docstring' in sample_function.__doc__
