"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a ShortURLModel is not found in the data store.

    ShortURLAlreadyExistsError:
        Raised when attempting to insert a ShortURLModel that already exists.

    ShortcodeGenerationExhaustedError:
        Raised when no free shortcode was found within the retry bound.

Example:
    >>> from linkshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'zzzzzz' not found.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'zzzzzz' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a ShortURLModel is not found in the data store."""

    pass


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortURLModel that already exists in the data store."""

    pass


class ShortcodeGenerationExhaustedError(DAOError):
    """Exception raised when every shortcode candidate collided with an existing one.

    Not expected at default capacity; treat it as a sign that the shortcode
    space is close to exhaustion.
    """

    def __init__(self, message: str, attempts: int, length: int):
        super().__init__(message)
        self.attempts = attempts
        self.length = length
