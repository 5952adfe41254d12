"""Exceptions related to Data Access Object (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a shortcode has no forward mapping in the data store.

    ShortURLAlreadyExistsError:
        Raised when a shortcode is claimed that is already mapped to a URL.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    PartialWriteError:
        Raised when the forward mapping was written but the reverse mapping was not.

Example:
    >>> from intolink.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    intolink.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""

from intolink.exceptions import IntolinkError


class DAOError(IntolinkError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLNotFoundError(DAOError):
    """Raised when a shortcode is not found in the data store."""

    error_code = 'dao:short_url_not_found_error'


class ShortURLAlreadyExistsError(DAOError):
    """Raised when claiming a shortcode that already exists in the data store."""

    error_code = 'dao:short_url_already_exists_error'


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    """

    error_code = 'dao:data_store_error'


class PartialWriteError(DataStoreError):
    """Raised when only one half of the forward/reverse mapping pair was written.

    The forward entry stays in place; no rollback is attempted.
    """

    error_code = 'dao:partial_write_error'
