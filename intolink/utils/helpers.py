"""Helper utilities for the HTTP edge.

Functions:
    get_short_url(shortcode: str, base_url: str) -> str
        Get string representation of short URL for a given shortcode

Example:
    >>> from intolink.utils.helpers import get_short_url
    >>> get_short_url('abc123defg', 'https://url.noskill.in/')
    'https://url.noskill.in/abc123defg'
"""


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_url (str): public base URL of the service, with or without trailing slash

    Returns:
        str: short url string representation
    """
    return f'{base_url.rstrip("/")}/{shortcode}'
