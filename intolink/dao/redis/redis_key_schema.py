import functools
from collections.abc import Callable

from intolink.constants import RedisHash


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for the mapping hashes.

    An optional prefix can be provided to namespace all generated keys,
    e.g. "intolink:prod" or "intolink:dev". Without a prefix the bare
    hash names are used (shortenUrls, originalUrls, resolveCounter).
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def forward_key(self) -> str:
        return RedisHash.FORWARD

    @prefix_key
    def reverse_key(self) -> str:
        return RedisHash.REVERSE

    @prefix_key
    def counter_key(self) -> str:
        return RedisHash.COUNTER
