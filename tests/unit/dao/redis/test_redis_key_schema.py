"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Default key names
   - Ensures the three hashes keep their well-known names without a prefix.

2. Custom prefix behavior
   - Confirms keys are correctly prefixed when a valid prefix is provided.

3. Invalid prefix types
   - Ensures improper prefix types raise TypeError.
"""

import pytest

from intolink.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Default key names
# -------------------------------


def test_no_key_prefix_by_default():
    """Ensure keys are not prefixed when no prefix is provided."""
    keys = RedisKeySchema()
    assert keys.forward_key() == 'shortenUrls'
    assert keys.reverse_key() == 'originalUrls'
    assert keys.counter_key() == 'resolveCounter'


# -------------------------------
# 2. Custom prefix behavior
# -------------------------------


@pytest.mark.parametrize(
    'prefix, expected_forward, expected_reverse, expected_counter',
    [
        ('intolink:prod', 'intolink:prod:shortenUrls', 'intolink:prod:originalUrls', 'intolink:prod:resolveCounter'),
        ('secret', 'secret:shortenUrls', 'secret:originalUrls', 'secret:resolveCounter'),
        (None, 'shortenUrls', 'originalUrls', 'resolveCounter'),
    ],
)
def test_key_prefixing(prefix, expected_forward, expected_reverse, expected_counter):
    """Ensure keys are correctly prefixed when a prefix is provided."""
    keys = RedisKeySchema(prefix=prefix)
    assert keys.forward_key() == expected_forward
    assert keys.reverse_key() == expected_reverse
    assert keys.counter_key() == expected_counter


# -------------------------------
# 3. Invalid prefix types
# -------------------------------


@pytest.mark.parametrize('prefix', [123, -1, 45.6, [], {}])
def test_invalid_prefix_type_raises_error(prefix):
    """Ensure invalid prefix types raise a TypeError."""
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
