"""Resolution service: turn a shortcode back into its original URL"""

import logging

from intolink.constants import COUNTER_INCREMENT_FAILED, SHORT_URL_NOT_FOUND
from intolink.models import ShortURLModel
from intolink.dao.base import ShortURLBaseDAO
from intolink.dao.exceptions import DataStoreError, ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ResolveService:
    """Look up shortcodes in the forward mapping and count successful hits."""

    def __init__(self, dao: ShortURLBaseDAO):
        self.dao = dao

    def resolve(self, shortcode: str, count: bool = True) -> ShortURLModel:
        """Resolve a shortcode to the original URL

        A failure to increment the resolve counter never fails the resolution;
        it is logged and `hits` is left as None.

        Args:
            shortcode (str):
                Shortcode to resolve.
            count (bool):
                Increment the resolve counter on success. Defaults to True.

        Returns:
            ShortURLModel:
                target URL exactly as stored, and the counter value if it was incremented.

        Raises:
            ShortURLNotFoundError:
                If the shortcode has no forward mapping.
            DataStoreError:
                If the forward lookup fails.
        """
        try:
            target = self.dao.get_forward(shortcode)
        except ShortURLNotFoundError:
            logger.info('Short URL not found.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND})
            raise

        hits = None
        if count:
            try:
                hits = self.dao.increment_counter(shortcode)
            except DataStoreError:
                logger.warning(
                    'Failed to increment resolve counter. Ignoring.',
                    exc_info=True,
                    extra={'shortcode': shortcode, 'event': COUNTER_INCREMENT_FAILED},
                )

        return ShortURLModel(target=target, shortcode=shortcode, hits=hits)
