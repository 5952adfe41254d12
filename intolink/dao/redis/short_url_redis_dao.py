"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO on top of
three Redis hashes:

    <prefix>:shortenUrls      field=<shortcode>     value=<original url>
    <prefix>:originalUrls     field=<original url>  value=<shortcode>
    <prefix>:resolveCounter   field=<shortcode>     value=<resolve count>

Responsibilities:
    - Read and write the forward (shortcode -> URL) and reverse (URL -> shortcode) mappings;
    - Report shortcode collisions, either as a return value (HSET) or an exception (HSETNX);
    - Increment the per-shortcode resolve counter;
    - Translate Redis connectivity failures into DAO exceptions.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving URL mappings in a Redis datastore.

Example:
    >>> from intolink.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(redis_url='redis://localhost:6379/0', prefix='intolink:dev')

    >>> dao.set_forward('abc123defg', 'https://example.com/page?foo=bar', overwrite=False)
    True
    >>> dao.get_forward('abc123defg')
    'https://example.com/page?foo=bar'
    >>> dao.increment_counter('abc123defg')
    1
"""

from beartype import beartype

from intolink.dao.base import ShortURLBaseDAO
from intolink.dao.redis.mixins import RedisClientMixin
from intolink.dao.redis.helpers import handle_redis_connection_error
from intolink.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using Redis hashes.
    Writes to a single hash field are atomic in Redis, and concurrent writes
    to the same field follow last-write-wins semantics unless the
    set-if-absent variants (overwrite=False) are used.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Example:
        >>> dao = ShortURLRedisDAO(redis_url='redis://localhost:6379/0')
        >>> dao.set_forward('abc123defg', 'https://example.com')
        True
        >>> dao.set_forward('abc123defg', 'https://example.org')
        False
    """

    @handle_redis_connection_error
    @beartype
    def get_forward(self, shortcode: str, **kwargs) -> str:
        """Retrieve the original URL stored under a shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str:
                The original URL, exactly as it was stored.

        Raises:
            ShortURLNotFoundError:
                If the shortcode has no (or an empty) forward mapping.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get_forward('abc123defg')
            'https://example.com'
        """
        target = self.redis.hget(self.keys.forward_key(), shortcode)
        if not target:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return target

    @handle_redis_connection_error
    @beartype
    def set_forward(self, shortcode: str, target: str, overwrite: bool = True, **kwargs) -> bool:
        """Store the shortcode -> URL mapping

        With overwrite=True the mapping is written with HSET, whose reply tells
        whether the field was new. A False return value therefore means an
        existing mapping was replaced, i.e. a shortcode collision happened.

        With overwrite=False the mapping is written with HSETNX, so an existing
        mapping is never touched.

        Args:
            shortcode (str):
                The shortcode identifier.
            target (str):
                The original URL.
            overwrite (bool):
                Replace an existing mapping. Defaults to True.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            bool:
                True if a new mapping was created, False if one was overwritten.

        Raises:
            ShortURLAlreadyExistsError:
                If overwrite=False and the shortcode is already mapped.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        if overwrite:
            return self.redis.hset(self.keys.forward_key(), shortcode, target) == 1

        if not self.redis.hsetnx(self.keys.forward_key(), shortcode, target):
            raise ShortURLAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")
        return True

    @handle_redis_connection_error
    @beartype
    def get_reverse(self, target: str, **kwargs) -> str | None:
        """Retrieve the shortcode previously issued for a URL

        The URL is used as the hash field verbatim, so 'https://x.com' and
        'https://x.com/' are distinct entries.

        Args:
            target (str):
                The original URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str | None:
                The shortcode, or None if the URL was never shortened.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        return self.redis.hget(self.keys.reverse_key(), target) or None

    @handle_redis_connection_error
    @beartype
    def set_reverse(self, target: str, shortcode: str, overwrite: bool = True, **kwargs) -> bool:
        """Store the URL -> shortcode mapping

        Args:
            target (str):
                The original URL.
            shortcode (str):
                The shortcode identifier.
            overwrite (bool):
                Replace an existing mapping (HSET) or keep it (HSETNX). Defaults to True.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            bool:
                True if a new mapping was created. False if the URL was already
                mapped to a shortcode.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        if overwrite:
            return self.redis.hset(self.keys.reverse_key(), target, shortcode) == 1
        return bool(self.redis.hsetnx(self.keys.reverse_key(), target, shortcode))

    @handle_redis_connection_error
    @beartype
    def delete_forward(self, shortcode: str, **kwargs) -> bool:
        """Remove the shortcode -> URL mapping

        Returns:
            bool:
                True if a mapping was removed.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        return self.redis.hdel(self.keys.forward_key(), shortcode) == 1

    @handle_redis_connection_error
    @beartype
    def increment_counter(self, shortcode: str, **kwargs) -> int:
        """Increment the resolve counter of a shortcode

        NOTE: the counter is purely observational. HINCRBY initializes a
              missing field to 0 before incrementing, so no existence check
              is made against the forward mapping.

        Returns:
            int:
                The counter value after the increment.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.increment_counter('abc123defg')
            42
        """
        return self.redis.hincrby(self.keys.counter_key(), shortcode, 1)
