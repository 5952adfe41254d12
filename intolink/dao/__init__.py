from intolink.dao.base import ShortURLBaseDAO
from intolink.dao.exceptions import (
    DAOError,
    DataStoreError,
    PartialWriteError,
    ShortURLAlreadyExistsError,
    ShortURLNotFoundError,
)


__all__ = [
    'ShortURLBaseDAO',
    'DAOError',
    'DataStoreError',
    'PartialWriteError',
    'ShortURLAlreadyExistsError',
    'ShortURLNotFoundError',
]
