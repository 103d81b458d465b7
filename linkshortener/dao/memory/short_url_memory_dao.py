"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a process-local implementation of ShortURLBaseDAO.
Nothing is persisted: the store starts empty and is discarded with the process.

Responsibilities:
    - Insert and retrieve short URLs under a single lock;
    - Refuse to overwrite an existing shortcode;
    - Raise appropriate DAO exceptions.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in a lock-guarded dict.

Example:
    >>> from linkshortener.models import ShortURLModel
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()

    >>> short_url = ShortURLModel(
    ...     target="https://example.com/page",
    ...     shortcode="abc123"
    ... )
    >>> dao.insert(short_url)
    <ShortURLMemoryDAO>

    >>> dao.get("abc123").target
    'https://example.com/page'
    >>> dao.count()
    1
"""

from beartype import beartype

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory.mixins import InMemoryStoreMixin
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


class ShortURLMemoryDAO(InMemoryStoreMixin, ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    Attributes (see InMemoryStoreMixin):
        records (dict[str, ShortURLModel]):
            Mappings keyed by shortcode.
        lock (threading.Lock):
            Guards every read and write of `records`.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLMemoryDAO:
            Insert a short URL mapping.
            Raises ShortURLAlreadyExistsError when a URL with the same shortcode exists.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.

        count(**kwargs) -> int:
            Number of stored mappings.
    """

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert a short URL mapping

        The existence check and the write happen under the same lock
        acquisition, so two concurrent inserts of one shortcode cannot both
        succeed and an existing mapping is never overwritten.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLMemoryDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
        """
        with self.lock:
            if short_url.shortcode in self.records:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
            self.records[short_url.shortcode] = short_url
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Models are frozen, so the returned instance can be handed out
        without copying.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist.
        """
        with self.lock:
            short_url = self.records.get(shortcode)

        if short_url is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
        return short_url

    def count(self, **kwargs) -> int:
        with self.lock:
            return len(self.records)
