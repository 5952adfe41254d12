from intolink.services.shorten import ShortenService
from intolink.services.resolve import ResolveService


__all__ = [
    'ShortenService',
    'ResolveService',
]
