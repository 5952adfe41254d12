import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from intolink.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def describe_connection(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' for the client's connection pool."""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error(method: F) -> F:
    """Wrap Redis-interacting DAO methods so every Redis failure surfaces as DataStoreError

    Connectivity failures (ConnectionError, TimeoutError) and command failures
    reported by the server (any other RedisError, e.g. an OOM ResponseError
    under `maxmemory` with the noeviction policy) are both translated.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis error.

    Example:
        >>> @handle_redis_connection_error
        ... def get_forward(self, shortcode):
        ...     return self.redis.hget('shortenUrls', shortcode)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {describe_connection(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis command failed at {describe_connection(self.redis)}: {e}') from e

    return wrapper
