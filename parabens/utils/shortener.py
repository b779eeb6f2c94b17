"""Shortcode generation utility

This module provides a helper function for generating short, random,
Base62 codes used as shortlink identifiers.

Functions:
    generate_shortcode(length=7, alphabet=ALPHABET):
        Generate a random code suitable for use as a URL slug.

Example:
    >>> from parabens.utils import generate_shortcode
    >>> generate_shortcode()
    'q7FemOj'
"""

import secrets
import string


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_shortcode(length: int = 7, alphabet: str = ALPHABET) -> str:
    """Generate a random, fixed-length shortcode.

    Every character is drawn independently and uniformly from `alphabet`, so
    codes carry no information about the path they point to and have no
    ordering. With the default Base62 alphabet and length 7 there are
    62**7 (about 3.5e12) possible codes; collisions are possible but
    practically negligible, and callers are expected to check for them.

    Args:
        length (int, optional):
            Number of characters in the code. Defaults to 7.

        alphabet (str, optional):
            Characters to draw from. Defaults to Base62 [a-zA-Z0-9].

    Returns:
        str: A random alphanumeric code of exactly `length` characters.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is not positive or the alphabet is empty.

    Example:
        >>> code = generate_shortcode(length=7)
        >>> len(code)
        7
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not alphabet:
        raise ValueError('Alphabet must be a non-empty string.')

    return ''.join(secrets.choice(alphabet) for _ in range(length))
