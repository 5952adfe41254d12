"""Unit tests for the shortcode generator in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures generated shortcodes have the requested length.
   - Ensures every character belongs to the Base62 alphabet.

2. Determinism
   - A seeded random source always yields the same sequence of shortcodes.
   - Consecutive draws from one generator differ.

3. Rejection sampling
   - Bytes at or above ACCEPT_LIMIT are never mapped to a character.

4. Error handling
   - Ensures invalid lengths raise TypeError or ValueError.

5. Thread safety
   - Concurrent draws from a shared generator all produce well-formed shortcodes.
"""

import random
import string
import threading

import pytest

from intolink.utils import ShortcodeGenerator, generate_shortcode
from intolink.utils.shortener import ACCEPT_LIMIT, ALPHABET, BASE


BASE62 = set(string.ascii_letters + string.digits)


class ScriptedBytes:
    """Random source returning prepared byte strings in order."""

    def __init__(self, *chunks: bytes):
        self.chunks = list(chunks)
        self.requested = []

    def randbytes(self, n: int) -> bytes:
        self.requested.append(n)
        chunk = self.chunks.pop(0)
        return (chunk * n)[:n] if len(chunk) < n else chunk[:n]


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_alphabet():
    assert BASE == 62
    assert set(ALPHABET) == BASE62
    assert ACCEPT_LIMIT == 248


@pytest.mark.parametrize('length', [1, 6, 10, 32])
def test_generate_shortcode_length(length):
    """Ensure the shortcode has exactly the requested length."""
    code = generate_shortcode(random.Random(0), length=length)
    assert isinstance(code, str)
    assert len(code) == length


def test_default_length_is_ten(generator):
    assert len(generator.generate()) == 10


def test_generated_characters_are_base62(generator):
    """Ensure every character is a letter or digit."""
    for _ in range(200):
        assert set(generator.generate()) <= BASE62


# -------------------------------
# 2. Determinism
# -------------------------------


def test_seeded_generators_agree():
    """Same seed must produce the same sequence of shortcodes."""
    first = ShortcodeGenerator(rng=random.Random(99))
    second = ShortcodeGenerator(rng=random.Random(99))
    assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]


def test_consecutive_draws_differ(generator):
    codes = {generator.generate() for _ in range(1000)}
    assert len(codes) == 1000


def test_default_source_is_system_random():
    assert isinstance(ShortcodeGenerator()._rng, random.SystemRandom)


# -------------------------------
# 3. Rejection sampling
# -------------------------------


def test_biased_bytes_are_rejected():
    """Ensure bytes >= 248 are skipped and more bytes are drawn."""
    rng = ScriptedBytes(bytes([255, 248]), bytes(range(20)))

    assert generate_shortcode(rng, length=10) == 'abcdefghij'
    assert len(rng.requested) == 2


@pytest.mark.parametrize(
    'byte, expected',
    [
        (0, 'a'),
        (25, 'z'),
        (26, 'A'),
        (51, 'Z'),
        (52, '0'),
        (61, '9'),
        (62, 'a'),
        (247, '9'),
    ],
)
def test_byte_to_character_mapping(byte, expected):
    assert generate_shortcode(ScriptedBytes(bytes([byte])), length=1) == expected


# -------------------------------
# 4. Error handling
# -------------------------------


@pytest.mark.parametrize('length', ['10', 10.0, None, True])
def test_invalid_length_type(length):
    with pytest.raises(TypeError):
        generate_shortcode(random.Random(0), length=length)
    with pytest.raises(TypeError):
        ShortcodeGenerator(length=length)


@pytest.mark.parametrize('length', [0, -1, -100])
def test_invalid_length_value(length):
    with pytest.raises(ValueError):
        generate_shortcode(random.Random(0), length=length)
    with pytest.raises(ValueError):
        ShortcodeGenerator(length=length)


# -------------------------------
# 5. Thread safety
# -------------------------------


def test_concurrent_generation(generator):
    """Ensure a shared generator serves many threads without corrupt output."""
    results = []
    lock = threading.Lock()

    def worker():
        codes = [generator.generate() for _ in range(200)]
        with lock:
            results.extend(codes)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 1600
    assert all(len(code) == 10 and set(code) <= BASE62 for code in results)
    assert len(set(results)) == 1600
