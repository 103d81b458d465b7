"""Shortcode generation utility

This module provides a helper function for generating short, unpredictable,
URL-safe identifiers from a cryptographically secure random source.

Functions:
    generate_shortcode(length=6, alphabet=ALPHABET):
        Generate a random shortcode suitable for use as a URL slug.

Example:
    >>> from linkshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'q7FemO'
    >>> generate_shortcode(length=8, alphabet='abc')
    'cabbacab'
"""

import secrets

from linkshortener.constants import DefaultShortcode


ALPHABET = DefaultShortcode.ALPHABET


def validate_alphabet(alphabet: str) -> str:
    """Ensure an alphabet is usable for shortcodes.

    Args:
        alphabet (str):
            Candidate alphabet.

    Returns:
        str: the alphabet, unchanged.

    Raises:
        TypeError: If the alphabet is not a string.
        ValueError: If the alphabet has fewer than 2 characters, repeats a
                    character or contains characters that are not URL-safe.
    """
    if not isinstance(alphabet, str):
        raise TypeError(f'Alphabet must be of type string (given type: {type(alphabet)}).')
    if len(alphabet) < 2:
        raise ValueError(f'Alphabet must contain at least 2 characters (given value: {alphabet!r}).')
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f'Alphabet must not repeat characters (given value: {alphabet!r}).')

    unsafe = sorted(set(alphabet) - DefaultShortcode.URL_SAFE_CHARACTERS)
    if unsafe:
        raise ValueError(f'Alphabet must only contain [A-Za-z0-9_-] (unsafe characters: {"".join(unsafe)!r}).')
    return alphabet


def generate_shortcode(length: int = DefaultShortcode.LENGTH, alphabet: str = ALPHABET) -> str:
    """Generate a random, fixed-length shortcode.

    Every character is drawn independently and uniformly from `alphabet` via
    `secrets.choice()`. Shortcodes must not be guessable, otherwise anyone
    could enumerate the links created by other users.

    The function is stateless: there is no counter and no memory of earlier
    results, so collisions are possible and handled by the caller (see
    `linkshortener.store.ShortURLStore`).

    Args:
        length (int, optional):
            Number of characters in the shortcode. Defaults to 6.

        alphabet (str, optional):
            Characters to draw from. Defaults to Base62 [a-zA-Z0-9].

    Returns:
        str: A random shortcode of exactly `length` characters.

    Raises:
        TypeError: If length is not an integer or alphabet is not a string.
        ValueError: If length is not positive or alphabet is invalid.

    Example:
        >>> len(generate_shortcode(length=7))
        7

    NOTE:
        - With the defaults there are 62**6 (~5.7e10) possible shortcodes.
    """
    # bool is an int subclass, reject it explicitly
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    validate_alphabet(alphabet)

    return ''.join(secrets.choice(alphabet) for _ in range(length))
