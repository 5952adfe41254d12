"""Abstract base class for short URL data access objects (DAOs).

This class establishes a consistent contract for all mapping store implementations,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB, PostgreSQL).

The store holds three logical collections:
    - forward mapping:  shortcode -> original URL (used for resolution)
    - reverse mapping:  original URL -> shortcode (used for deduplication only)
    - resolve counter:  shortcode -> number of successful resolutions

Responsibilities:
    - Provide get/set primitives for both mappings and the counter.
    - Report shortcode collisions instead of silently overwriting entries.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from intolink.dao.redis import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(redis_url='redis://localhost:6379/0')

        >>> dao.set_forward('a1b2c3d4e5', 'https://example.com/blog/article-123')
        True
        >>> dao.set_reverse('https://example.com/blog/article-123', 'a1b2c3d4e5')
        True
        >>> dao.get_forward('a1b2c3d4e5')
        'https://example.com/blog/article-123'
        >>> dao.get_reverse('https://example.com/blog/article-123')
        'a1b2c3d4e5'
"""

from abc import ABC, abstractmethod


class ShortURLBaseDAO(ABC):
    """Interface for short URL mapping stores.

    Methods:
        get_forward(shortcode: str) -> str:
            Raises ShortURLNotFoundError if the shortcode is unknown.

        set_forward(shortcode: str, target: str, overwrite: bool = True) -> bool:
            Returns False if an existing entry was overwritten.
            Raises ShortURLAlreadyExistsError if overwrite=False and the shortcode is taken.

        get_reverse(target: str) -> str | None:
            Returns None if the URL has never been shortened.

        set_reverse(target: str, shortcode: str, overwrite: bool = True) -> bool:
            Returns False if the URL already had a shortcode.

        delete_forward(shortcode: str) -> bool:
            Remove a forward entry. Returns False if it didn't exist.

        increment_counter(shortcode: str) -> int:
            Increment the resolve counter and return its new value.

    All methods raise DataStoreError on connection or read/write failure.

    NOTE:
        - Entries never expire. The only deletion path is compensating a lost
          deduplication race (see ShortenService).
    """

    @abstractmethod
    def get_forward(self, shortcode: str, **kwargs) -> str:
        """Retrieve the original URL stored under a shortcode.

        Args:
            shortcode (str):
                The shortcode to look up.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: The original URL, exactly as it was stored.

        Raises:
            ShortURLNotFoundError:
                If no URL (or an empty value) is stored under the shortcode.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def set_forward(self, shortcode: str, target: str, overwrite: bool = True, **kwargs) -> bool:
        """Store the shortcode -> URL mapping.

        Args:
            shortcode (str):
                The shortcode to store.

            target (str):
                The original URL.

            overwrite (bool):
                If False, refuse to replace an existing entry.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if a new entry was created, False if an existing one was overwritten.

        Raises:
            ShortURLAlreadyExistsError:
                If overwrite=False and the shortcode is already mapped.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get_reverse(self, target: str, **kwargs) -> str | None:
        """Retrieve the shortcode previously issued for a URL.

        Returns:
            str | None: The shortcode, or None if the URL was never shortened.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def set_reverse(self, target: str, shortcode: str, overwrite: bool = True, **kwargs) -> bool:
        """Store the URL -> shortcode mapping.

        Returns:
            bool: True if a new entry was created. False if the URL already had
                  a shortcode (replaced when overwrite=True, kept otherwise).

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete_forward(self, shortcode: str, **kwargs) -> bool:
        """Remove a shortcode -> URL mapping.

        Returns:
            bool: True if an entry was removed.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def increment_counter(self, shortcode: str, **kwargs) -> int:
        """Increment the resolve counter of a shortcode by 1.

        Returns:
            int: The counter value after the increment.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
