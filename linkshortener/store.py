"""Mapping store: the shortening/resolution engine.

ShortURLStore is the only object request handlers talk to. It owns the
collision policy: candidates come from `generate_shortcode()` outside any
lock, and the DAO's atomic insert-if-absent decides whether a candidate is
free. A collision never overwrites an existing mapping; the candidate is
discarded and a new one is drawn.

Classes:
    ShortURLStore:
        Create and resolve short URL mappings.

Example:
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO
    >>> store = ShortURLStore(ShortURLMemoryDAO())
    >>> short_url = store.create('https://example.com/page')
    >>> len(short_url.shortcode)
    6
    >>> store.resolve(short_url.shortcode)
    'https://example.com/page'
    >>> store.resolve('zzzzzz')
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'zzzzzz' not found.
"""

import logging

from beartype import beartype

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortcodeGenerationExhaustedError
from linkshortener.utils.config import ShortenerConfig
from linkshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


class ShortURLStore:
    """Concurrency-safe registry of shortcode -> target URL mappings

    Attributes:
        dao (ShortURLBaseDAO):
            Data access object holding the mappings.
        config (ShortenerConfig):
            Shortcode length, alphabet and retry bounds.

    Methods:
        create(target: str) -> ShortURLModel:
            Store `target` under a fresh shortcode.
            Raises ShortcodeGenerationExhaustedError when no free shortcode was found.

        resolve(shortcode: str) -> str:
            Return the target stored under `shortcode`.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.

        count() -> int:
            Number of stored mappings.
    """

    def __init__(self, dao: ShortURLBaseDAO, config: ShortenerConfig | None = None):
        self.dao = dao
        self.config = config if config is not None else ShortenerConfig()

    def _candidate_length(self, collisions: int) -> int:
        grow_after = self.config.grow_after
        if grow_after == 0:
            return self.config.shortcode_length
        return self.config.shortcode_length + collisions // grow_after

    @beartype
    def create(self, target: str) -> ShortURLModel:
        """Store a target URL under a freshly generated shortcode

        Procedure:
        - Step 1: Draw a candidate shortcode (no lock held)
        - Step 2: Insert it through the DAO (atomic insert-if-absent)
        - Step 3: On collision, discard the candidate and go back to step 1.
                  Every `grow_after` collisions the candidate grows by one
                  character. Give up after `max_attempts` attempts.

        Args:
            target (str):
                Original URL, stored as submitted.

        Returns:
            ShortURLModel: the stored mapping.

        Raises:
            ShortcodeGenerationExhaustedError:
                If all `max_attempts` candidates collided.
        """
        length = self.config.shortcode_length
        for attempt in range(self.config.max_attempts):
            length = self._candidate_length(collisions=attempt)
            shortcode = generate_shortcode(length=length, alphabet=self.config.alphabet)
            short_url = ShortURLModel(target=target, shortcode=shortcode)

            try:
                self.dao.insert(short_url)
            except ShortURLAlreadyExistsError:
                logger.warning(
                    'Shortcode collision, drawing a new candidate.',
                    extra={'shortcode': shortcode, 'attempt': attempt + 1, 'length': length},
                )
                continue
            else:
                return short_url

        raise ShortcodeGenerationExhaustedError(
            f'No free shortcode found after {self.config.max_attempts} attempts (last length: {length}).',
            attempts=self.config.max_attempts,
            length=length,
        )

    @beartype
    def resolve(self, shortcode: str) -> str:
        """Return the target URL stored under `shortcode`

        Raises:
            ShortURLNotFoundError:
                If no mapping exists for `shortcode`.
        """
        return self.dao.get(shortcode).target

    def count(self) -> int:
        return self.dao.count()
