"""Shortcode generation utility

This module provides a random shortcode generator over the Base62 alphabet
[a-zA-Z0-9]. Codes are not unique by construction: uniqueness is probabilistic
and collisions are detected by the data store (see ShortURLRedisDAO.set_forward).

Characters are picked by rejection sampling over a uniform byte source: a byte
is accepted only if it falls below the largest multiple of the alphabet size
that fits in a byte (248 = 4 * 62), and is then reduced modulo 62. This keeps
every character equally likely.

Classes:
    ShortcodeGenerator:
        Thread-safe generator owning an injectable random source.

Functions:
    generate_shortcode(rng, length=10) -> str:
        Draw a single shortcode from the given random source.

Example:
    >>> import random
    >>> from intolink.utils import ShortcodeGenerator
    >>> generator = ShortcodeGenerator(rng=random.Random(42))
    >>> len(generator.generate())
    10
"""

import random
import string
import threading

from intolink.constants import Defaults


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits
ACCEPT_LIMIT = 256 - 256 % BASE  # bytes >= 248 would bias the first 8 characters


def generate_shortcode(rng: random.Random, length: int = Defaults.SHORTCODE_LENGTH) -> str:
    """Generate a random Base62 shortcode of a fixed length.

    Args:
        rng (random.Random):
            Source of random bytes. Any random.Random instance works,
            e.g. random.SystemRandom() or a seeded random.Random(seed).

        length (int, optional):
            Exact length of the resulting shortcode. Defaults to 10.

    Returns:
        str: A shortcode of exactly `length` characters from [a-zA-Z0-9].

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is not positive.

    Example:
        >>> code = generate_shortcode(random.Random(7), length=10)
        >>> len(code), code.isalnum()
        (10, True)
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    characters = []
    while len(characters) < length:
        # ~3% of bytes are rejected, so draw a little more than needed
        for byte in rng.randbytes(length + length // 4 + 1):
            if byte < ACCEPT_LIMIT:
                characters.append(ALPHABET[byte % BASE])
                if len(characters) == length:
                    break

    return ''.join(characters)


class ShortcodeGenerator:
    """Generate random shortcodes from an owned random source.

    The random source is injected through the constructor so tests can pass a
    seeded random.Random. Draws are serialized with a lock, which keeps the
    source's internal state consistent when request threads share a generator.

    Attributes:
        length (int):
            Length of every generated shortcode.
    """

    def __init__(self, length: int = Defaults.SHORTCODE_LENGTH, rng: random.Random | None = None):
        if not isinstance(length, int) or isinstance(length, bool):
            raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
        if length <= 0:
            raise ValueError(f'Length must be a positive integer (given value: {length}).')

        self.length = length
        self._rng = rng if rng is not None else random.SystemRandom()
        self._lock = threading.Lock()

    def generate(self) -> str:
        with self._lock:
            return generate_shortcode(self._rng, self.length)
