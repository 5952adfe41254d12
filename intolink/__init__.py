"""intolink: a Redis-backed URL shortening service."""

__version__ = '1.0.0'
