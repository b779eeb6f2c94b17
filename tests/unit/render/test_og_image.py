"""Unit tests for the OG image naming conventions.

Test coverage includes:

1. og_image_text_prefix(): whitespace collapsing and truncation.
2. og_cache_key(): slug normalization, default key, length cap.
3. og_cache_path() and og_image_url().
"""

from pathlib import Path

import pytest

from parabens.render import og_image_text_prefix, og_cache_key, og_cache_path, og_image_url


# -------------------------------
# 1. og_image_text_prefix()
# -------------------------------

@pytest.mark.parametrize(
    'message, expected',
    [
        ('', ''),
        ('   ', ''),
        ('Short message', 'Short message'),
        ('multiple   spaces   collapsed', 'multiple spaces collapsed'),
        ('  leading and trailing  ', 'leading and trailing'),
        ('a' * 48, 'a' * 48),
        ('a' * 49, 'a' * 48 + '…'),
    ],
)
def test_og_image_text_prefix(message, expected):
    assert og_image_text_prefix(message) == expected


def test_truncation_counts_characters_not_bytes():
    assert og_image_text_prefix('ã' * 60) == 'ã' * 48 + '…'


# -------------------------------
# 2. og_cache_key()
# -------------------------------

@pytest.mark.parametrize(
    'message, expected',
    [
        ('', 'default'),
        ('   ', 'default'),
        ('!!!', 'default'),
        ('Test Message', 'test-message'),
        ('Test!!!Message', 'test---message'),
        ('  Joana  ', 'joana'),
        ('Feliz Aniversário, Joana', 'feliz-anivers-rio--joana'),
        ('Olá 2026!', 'ol--2026'),
    ],
)
def test_og_cache_key(message, expected):
    assert og_cache_key(message) == expected


def test_og_cache_key_is_capped():
    key = og_cache_key('x' * 100)
    assert key == 'x' * 48


def test_og_cache_key_only_uses_slug_characters():
    key = og_cache_key('Ünïcødé & <script>alert(1)</script> ../../etc/passwd')
    assert set(key) <= set('abcdefghijklmnopqrstuvwxyz0123456789-')
    assert not key.startswith('-') and not key.endswith('-')


def test_distinct_texts_can_share_a_key():
    assert og_cache_key('Test!!!') == og_cache_key('Test???')


# -------------------------------
# 3. og_cache_path() and og_image_url()
# -------------------------------

def test_og_cache_path():
    assert og_cache_path(Path('/var/cache/parabens.vc'), 'joana') == Path('/var/cache/parabens.vc/og/joana.png')


@pytest.mark.parametrize(
    'base_url, message, expected',
    [
        ('https://parabens.vc', '', 'https://parabens.vc/og-image.png'),
        ('https://parabens.vc/', 'Test Message', 'https://parabens.vc/og-image.png?text=Test+Message'),
        ('http://localhost:8080', 'Olá & tchau', 'http://localhost:8080/og-image.png?text=Ol%C3%A1+%26+tchau'),
    ],
)
def test_og_image_url(base_url, message, expected):
    assert og_image_url(base_url, message) == expected
