"""Unit tests for generate_shortcode() in shortener.py.

Test coverage includes:

1. Basic functionality
   - Returns a string of the requested length (7 by default).

2. Output format
   - Every character belongs to the Base62 alphabet, or to a custom alphabet.

3. Randomness
   - Repeated calls produce (practically) unique codes.

4. Error handling
   - Invalid lengths and empty alphabets raise the appropriate exceptions.
"""

import string

import pytest

from parabens.utils import generate_shortcode
from parabens.utils.shortener import ALPHABET


# -------------------------------
# 1. Basic functionality
# -------------------------------

def test_default_length_is_seven():
    code = generate_shortcode()
    assert isinstance(code, str)
    assert len(code) == 7


@pytest.mark.parametrize('length', [1, 5, 12, 64])
def test_length_is_respected(length):
    assert len(generate_shortcode(length)) == length


# -------------------------------
# 2. Output format
# -------------------------------

def test_alphabet_is_base62():
    assert set(ALPHABET) == set(string.ascii_letters + string.digits)
    assert len(ALPHABET) == 62


def test_codes_only_use_alphabet_characters():
    for _ in range(200):
        assert set(generate_shortcode()) <= set(ALPHABET)


def test_custom_alphabet():
    assert generate_shortcode(10, alphabet='x') == 'x' * 10
    assert set(generate_shortcode(50, alphabet='ab')) <= {'a', 'b'}


# -------------------------------
# 3. Randomness
# -------------------------------

def test_codes_are_unique():
    codes = {generate_shortcode() for _ in range(1000)}
    assert len(codes) == 1000


# -------------------------------
# 4. Error handling
# -------------------------------

@pytest.mark.parametrize('length', ['7', 7.0, None, True])
def test_non_integer_length_raises_type_error(length):
    with pytest.raises(TypeError):
        generate_shortcode(length)


@pytest.mark.parametrize('length', [0, -1])
def test_non_positive_length_raises_value_error(length):
    with pytest.raises(ValueError):
        generate_shortcode(length)


def test_empty_alphabet_raises_value_error():
    with pytest.raises(ValueError):
        generate_shortcode(7, alphabet='')
