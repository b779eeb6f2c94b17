"""Open Graph image naming conventions

Every rendered social-preview image is identified by a cache key derived
from its display text. Both the render worker and the HTTP handler use the
functions below, so they always agree on where a given image lives.

Functions:
    og_image_text_prefix(message: str) -> str
        Normalize and truncate display text for the image.
    og_cache_key(message: str) -> str
        Derive the cache key (slug) for a display text.
    og_cache_path(cache_dir: Path, key: str) -> Path
        Return the cache file location for a key.
    og_image_url(base_url: str, message: str) -> str
        Return the public URL of the image for a display text.

Example:
    >>> og_cache_key('Feliz Aniversário, Joana')
    'feliz-anivers-rio--joana'
    >>> og_cache_path(Path('/var/cache/parabens.vc'), 'default')
    PosixPath('/var/cache/parabens.vc/og/default.png')
"""

from pathlib import Path
from urllib.parse import quote_plus

from parabens.utils.constants import OG_IMAGE_TEXT_LIMIT


DEFAULT_CACHE_KEY = 'default'
ELLIPSIS = '…'


def og_image_text_prefix(message: str) -> str:
    """Collapse whitespace and truncate long messages with an ellipsis

    Args:
        message (str): display text

    Returns:
        str: '' for blank input; at most OG_IMAGE_TEXT_LIMIT characters plus '…'.

    Example:
        >>> og_image_text_prefix('multiple   spaces   collapsed')
        'multiple spaces collapsed'
    """
    message = ' '.join(message.split())
    if not message:
        return ''
    if len(message) > OG_IMAGE_TEXT_LIMIT:
        return message[:OG_IMAGE_TEXT_LIMIT] + ELLIPSIS
    return message


def og_cache_key(message: str) -> str:
    """Derive the cache key of a display text

    The key is the lowercased text prefix where every character outside
    [a-z0-9] becomes '-', with leading/trailing dashes removed.

    NOTE: distinct texts can share a key (e.g. 'Test!!!' and 'Test???'); the
          first one rendered wins.

    Example:
        >>> og_cache_key('Test!!!Message')
        'test---message'
        >>> og_cache_key('   ')
        'default'
    """
    prefix = og_image_text_prefix(message)
    if not prefix:
        return DEFAULT_CACHE_KEY

    normalized = ''.join(ch if ('a' <= ch <= 'z' or '0' <= ch <= '9') else '-' for ch in prefix.lower())
    normalized = normalized.strip('-')[:OG_IMAGE_TEXT_LIMIT]
    return normalized or DEFAULT_CACHE_KEY


def og_cache_path(cache_dir: Path, key: str) -> Path:
    return Path(cache_dir) / 'og' / f'{key}.png'


def og_image_url(base_url: str, message: str) -> str:
    """Return the public URL of the OG image for a display text

    Example:
        >>> og_image_url('https://parabens.vc/', 'Test Message')
        'https://parabens.vc/og-image.png?text=Test+Message'
        >>> og_image_url('https://parabens.vc', '')
        'https://parabens.vc/og-image.png'
    """
    base = base_url.rstrip('/')
    prefix = og_image_text_prefix(message)
    if not prefix:
        return f'{base}/og-image.png'
    return f'{base}/og-image.png?text={quote_plus(prefix)}'
