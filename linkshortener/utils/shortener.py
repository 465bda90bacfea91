"""Identifier generation utility

This module provides helpers for deriving short, collision-resistant
identifiers for new short links.

Functions:
    encode_base62(value) -> str:
        Encode a non-negative integer over the Base62 alphabet.

    generate_identifier(target, owner_token, timestamp_ns=None, attempt=0, salt='default_salt', length=7) -> str:
        Generate a short identifier suitable for use as a URL slug.

Example:
    >>> from linkshortener.utils import encode_base62, generate_identifier
    >>> encode_base62(0)
    '0'
    >>> encode_base62(61)
    'z'
    >>> identifier = generate_identifier('https://example.com', 'owner-token')
    >>> 1 <= len(identifier) <= 7
    True
"""

import string
import time

import xxhash

from linkshortener.constants import Defaults


ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
BASE = len(ALPHABET)  # 10 digits + 26 uppercase + 26 lowercase


def encode_base62(value: int) -> str:
    """Encode a non-negative integer into a Base62 string.

    Digits are produced by repeated division/remainder and emitted most
    significant digit first. Zero encodes to the first alphabet symbol ('0'),
    so the result is never empty.

    Args:
        value (int):
            Non-negative integer to encode.

    Returns:
        str: Base62 representation of `value`.

    Raises:
        TypeError: If `value` is not an integer.
        ValueError: If `value` is negative.

    Example:
        >>> encode_base62(62)
        '10'
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f'Value must be of type integer (given type: {type(value)}).')
    if value < 0:
        raise ValueError(f'Value must be a non-negative integer (given value: {value}).')

    if value == 0:
        return ALPHABET[0]

    digits = []
    while value > 0:
        value, remainder = divmod(value, BASE)
        digits.append(ALPHABET[remainder])
    return ''.join(reversed(digits))


def generate_identifier(
    target: str,
    owner_token: str,
    timestamp_ns: int | None = None,
    attempt: int = 0,
    salt: str = Defaults.SALT,
    length: int = Defaults.IDENTIFIER_LENGTH,
) -> str:
    """Generate a short identifier for a new link.

    The seed material combines the target, the owner token, a high-resolution
    creation timestamp, the retry attempt and a salt. Two requests for the same
    target and owner issued at different instants therefore hash to different
    identifiers with overwhelming probability.

    Args:
        target (str):
            The resource the link points to.

        owner_token (str):
            Token of the link's owner.

        timestamp_ns (int, optional):
            Creation timestamp in nanoseconds. Defaults to `time.time_ns()`.

        attempt (int, optional):
            Retry counter. Callers bump it after a collision so a retry never
            reproduces the same seed.

        salt (str, optional):
            Secret string used to randomize the output space.

        length (int, optional):
            Maximum length of the resulting identifier. The hash is reduced
            modulo BASE**length before encoding.

    Returns:
        str: Base62 identifier of 1 to `length` characters.

    NOTE:
        - The generator does not check for collisions. The store is the
          authority on uniqueness and raises CollisionError on duplicates.
        - xxh64 digests are unsigned, so the seed is never negative.
        - Hash inputs are UTF-8 encoded. xxhash 4 only accepts bytes.
    """
    if not isinstance(salt, str):
        raise TypeError(f'Salt must be of type string (given type: {type(salt)}).')
    if not salt:
        raise ValueError(f'Salt must be a non-empty string (given value: {salt}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    if timestamp_ns is None:
        timestamp_ns = time.time_ns()

    # Fields are separated so that ('ab', 'c') and ('a', 'bc') produce different seeds
    seed = '\x1f'.join((target, owner_token, str(timestamp_ns), str(attempt)))
    modulo_space = BASE**length
    hashed = xxhash.xxh64_intdigest(seed.encode(), seed=xxhash.xxh32_intdigest(salt.encode())) % modulo_space
    return encode_base62(hashed)
