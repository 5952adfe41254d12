"""Shortening service: turn a long URL into a shortcode

Procedure:
    - Step 1: If dedup is enabled, return the shortcode already issued for the URL
    - Step 2: Generate a shortcode and claim it in the forward mapping (retry on collision)
    - Step 3: If dedup is enabled, claim the URL in the reverse mapping (set-if-absent)
    - Step 4: Return the new shortcode

Concurrency:
    Two concurrent requests for the same URL may both miss in step 1. Step 3
    uses HSETNX so exactly one of them owns the reverse mapping; the loser
    deletes its own forward entry and returns the winner's shortcode. Both
    callers therefore receive the same shortcode and the invariant
    forward[code] == url  =>  reverse[url] == code  keeps holding.

Failure modes:
    - DataStoreError in step 1 or 2: nothing was written, propagated unchanged.
    - DataStoreError in step 3: the forward entry stays in place without its
      reverse entry. Logged as PARTIAL_WRITE and raised as PartialWriteError.
    - ShortURLAlreadyExistsError: every generated shortcode collided.

Example:
    >>> service = ShortenService(dao=ShortURLRedisDAO(redis_url='redis://localhost:6379/0'))
    >>> len(service.shorten('https://google.com').shortcode)
    10
"""

import logging

from intolink.constants import (
    Defaults,
    SHORT_URL_CREATED,
    SHORT_URL_DEDUPLICATED,
    SHORTCODE_COLLISION,
    DEDUP_RACE_LOST,
    PARTIAL_WRITE,
)
from intolink.models import ShortURLModel
from intolink.dao.base import ShortURLBaseDAO
from intolink.dao.exceptions import DataStoreError, PartialWriteError, ShortURLAlreadyExistsError
from intolink.utils.shortener import ShortcodeGenerator


logger = logging.getLogger(__name__)


class ShortenService:
    """Orchestrate dedup lookup, shortcode generation and persistence.

    Attributes:
        dao (ShortURLBaseDAO):
            Mapping store.
        generator (ShortcodeGenerator):
            Source of candidate shortcodes.
        dedup (bool):
            Maintain and consult the reverse mapping.
        max_attempts (int):
            Number of shortcodes tried before giving up on collisions.
    """

    def __init__(
        self,
        dao: ShortURLBaseDAO,
        generator: ShortcodeGenerator | None = None,
        dedup: bool = True,
        max_attempts: int = Defaults.SHORTCODE_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.dao = dao
        self.generator = generator or ShortcodeGenerator()
        self.dedup = dedup
        self.max_attempts = max_attempts

    def shorten(self, url: str) -> ShortURLModel:
        """Shorten a URL, reusing the existing shortcode when dedup is enabled

        The URL is stored verbatim: no normalization, so query strings and
        fragments survive the round trip unchanged.

        Args:
            url (str):
                Non-empty URL to shorten.

        Returns:
            ShortURLModel:
                target and shortcode; deduplicated=True if the shortcode was
                issued by an earlier request.

        Raises:
            ValueError:
                If url is empty or not a string.
            ShortURLAlreadyExistsError:
                If every generated shortcode was already taken.
            PartialWriteError:
                If the forward mapping was written but the reverse mapping wasn't.
            DataStoreError:
                On any other store failure.
        """
        if not isinstance(url, str) or not url:
            raise ValueError('URL must be a non-empty string.')

        # 1- Return the shortcode issued earlier for this exact URL
        if self.dedup:
            existing = self.dao.get_reverse(url)
            if existing is not None:
                logger.debug(
                    'URL already shortened. Returning existing shortcode.',
                    extra={'shortcode': existing, 'event': SHORT_URL_DEDUPLICATED},
                )
                return ShortURLModel(target=url, shortcode=existing, deduplicated=True)

        # 2- Claim a fresh shortcode in the forward mapping
        shortcode = self._claim_shortcode(url)

        # 3- Claim the URL in the reverse mapping
        if self.dedup:
            try:
                claimed = self.dao.set_reverse(url, shortcode, overwrite=False)
            except DataStoreError as e:
                logger.error(
                    'Forward mapping written but reverse mapping failed. Mappings are inconsistent.',
                    extra={'shortcode': shortcode, 'target': url, 'event': PARTIAL_WRITE},
                )
                raise PartialWriteError(f"Short URL with code '{shortcode}' was stored without its reverse mapping.") from e

            if not claimed:
                return self._adopt_winner(url, shortcode)

        logger.info('Created short URL.', extra={'shortcode': shortcode, 'event': SHORT_URL_CREATED})
        return ShortURLModel(target=url, shortcode=shortcode)

    def _claim_shortcode(self, url: str) -> str:
        for attempt in range(1, self.max_attempts + 1):
            shortcode = self.generator.generate()
            try:
                self.dao.set_forward(shortcode, url, overwrite=False)
            except ShortURLAlreadyExistsError:
                logger.warning(
                    'Generated shortcode already exists.',
                    extra={'shortcode': shortcode, 'attempt': attempt, 'event': SHORTCODE_COLLISION},
                )
            else:
                return shortcode

        raise ShortURLAlreadyExistsError(f'Could not generate an unused shortcode after {self.max_attempts} attempts.')

    def _adopt_winner(self, url: str, shortcode: str) -> ShortURLModel:
        """Another request shortened the same URL between our lookup and our write."""
        winner = self.dao.get_reverse(url)
        self.dao.delete_forward(shortcode)
        logger.warning(
            'Lost race for URL to a concurrent request. Discarded own shortcode.',
            extra={'shortcode': shortcode, 'winner': winner, 'event': DEDUP_RACE_LOST},
        )
        if winner is None:  # pragma: no cover (reverse entries are never deleted)
            raise DataStoreError(f"Reverse mapping for shortcode '{shortcode}' vanished during write.")
        return ShortURLModel(target=url, shortcode=winner, deduplicated=True)
