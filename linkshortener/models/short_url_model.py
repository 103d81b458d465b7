from dataclasses import dataclass


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Instances are immutable: once a mapping is stored its target never changes.

    Attributes:
        target (str):
            The original long URL, exactly as submitted (not validated or normalized).
        shortcode (str):
            The unique short identifier the target is stored under.

    Example:
        >>> url = ShortURLModel(target='https://example.com/article/123', shortcode='abc123')
        >>> url.target
        'https://example.com/article/123'
        >>> url.shortcode
        'abc123'
    """

    target: str
    shortcode: str
