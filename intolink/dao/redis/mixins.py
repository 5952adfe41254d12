"""Redis mixin providing shared client initialization and connectivity checks.

Responsibilities:
    - Initialize Redis client from a connection string
    - Healthcheck Redis client

Classes:
    - RedisClientMixin: Base mixin to inject Redis key management, client setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLRedisDAO(redis_url='redis://localhost:6379/0', prefix='intolink:prod')
        >>> dao._healthcheck()
        True
"""

import redis

from intolink.dao.redis.redis_key_schema import RedisKeySchema
from intolink.dao.redis.helpers import describe_connection
from intolink.dao.exceptions import DataStoreError
from intolink.exceptions import BadConfigurationError


DEFAULT_REDIS_URL = 'redis://localhost:6379/0'


class RedisClientMixin:
    """Mixin Redis client setup and health check for Redis-backed DAOs.

    Attributes:
        redis (redis.Redis):
            Active Redis client instance used by subclasses.

        keys (RedisKeySchema):
            Helper class for generating namespaced Redis key names.

    Methods:
        _healthcheck(raise_error: bool = True) -> bool:
            Ping Redis to verify connectivity.
            Optionally raise a DataStoreError if unreachable.
    """

    def __init__(
        self,
        redis_url: str | None = None,
        redis_decode_responses: bool = True,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        """Initialize a Redis-based DAO

        The option is given to either use an existing Redis client instance or
        create one from a Redis connection string.

        Args:
            redis_url (str | None):
                Connection string, e.g. 'redis://:password@host:6379/0' or
                'rediss://...' for TLS. Defaults to 'redis://localhost:6379/0'.

            redis_decode_responses (bool):
                If True, decodes Redis responses to str. Defaults to True.

            redis_client (redis.Redis | None):
                Pre-initialized Redis client. If None, a new client is created.

            prefix (str | None):
                Namespace prefix for all Redis keys, e.g. 'app:env'.

        Raises:
            BadConfigurationError:
                If the connection string can't be parsed.
            DataStoreError:
                If Redis healthcheck fails (connectivity issues).
        """
        if redis_client is None:
            try:
                redis_client = redis.Redis.from_url(
                    redis_url or DEFAULT_REDIS_URL,
                    decode_responses=redis_decode_responses,
                )
            except ValueError as e:
                raise BadConfigurationError(f'Invalid Redis connection string: {e}') from e

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool:
                True if Redis is reachable, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If Redis connection cannot be established and raise_error=True.
        """
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't connect to Redis at {describe_connection(self.redis)}. Check the provided configuration parameters."
                ) from e
            return False
        else:
            return True
