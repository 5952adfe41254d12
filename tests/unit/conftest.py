"""Shared fixtures: an in-memory mapping store standing in for Redis, and a mocked Redis client."""

import random
from unittest.mock import MagicMock

import pytest
import redis

from intolink.dao.base import ShortURLBaseDAO
from intolink.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from intolink.utils.shortener import ShortcodeGenerator


class InMemoryShortURLDAO(ShortURLBaseDAO):
    """Dict-backed ShortURLBaseDAO with the same semantics as the Redis hashes."""

    def __init__(self):
        self.forward: dict[str, str] = {}
        self.reverse: dict[str, str] = {}
        self.counter: dict[str, int] = {}

    def get_forward(self, shortcode, **kwargs):
        target = self.forward.get(shortcode)
        if not target:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return target

    def set_forward(self, shortcode, target, overwrite=True, **kwargs):
        exists = shortcode in self.forward
        if exists and not overwrite:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")
        self.forward[shortcode] = target
        return not exists

    def get_reverse(self, target, **kwargs):
        return self.reverse.get(target)

    def set_reverse(self, target, shortcode, overwrite=True, **kwargs):
        exists = target in self.reverse
        if not exists or overwrite:
            self.reverse[target] = shortcode
        return not exists

    def delete_forward(self, shortcode, **kwargs):
        return self.forward.pop(shortcode, None) is not None

    def increment_counter(self, shortcode, **kwargs):
        self.counter[shortcode] = self.counter.get(shortcode, 0) + 1
        return self.counter[shortcode]


@pytest.fixture
def memory_dao() -> InMemoryShortURLDAO:
    return InMemoryShortURLDAO()


@pytest.fixture
def generator() -> ShortcodeGenerator:
    """Deterministically seeded shortcode generator."""
    return ShortcodeGenerator(rng=random.Random(1234))


@pytest.fixture
def redis_client() -> redis.Redis:
    """Mock a Redis client answering PING."""
    client = MagicMock(spec=redis.Redis)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.ping.return_value = True
    client.hget.return_value = None
    return client

