"""Blocked-word filter for greeting messages

Terms are read once from the packaged `blocked-words.txt` (one term per
line, `#` comments and blank lines ignored). Both the terms and the
messages are normalized the same way before a substring match, so
'Some-Bad_Word!' matches the term 'some bad word'.

Example:
    >>> normalize_for_block('  Olá_MUNDO-cruel!! ')
    'olá mundo cruel'
"""

import re
import functools

from parabens.utils.config import public_dir


_NOT_ALLOWED = re.compile(r'[^a-z0-9à-ÿ ]')


def normalize_for_block(value: str) -> str:
    value = value.strip().lower()
    if not value:
        return ''
    value = value.replace('_', ' ').replace('-', ' ')
    value = _NOT_ALLOWED.sub(' ', value)
    return ' '.join(value.split())


def parse_blocked_terms(content: str) -> tuple[str, ...]:
    terms = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        term = normalize_for_block(line)
        if term:
            terms.append(term)
    return tuple(terms)


@functools.cache
def blocked_terms() -> tuple[str, ...]:
    """Return the normalized blocked terms (loaded once per process)

    A missing word list disables the filter.
    """
    try:
        content = (public_dir() / 'blocked-words.txt').read_text(encoding='utf-8')
    except FileNotFoundError:
        return ()
    return parse_blocked_terms(content)


def is_blocked_message(message: str, terms: tuple[str, ...] | None = None) -> bool:
    """True if the normalized message contains any blocked term

    Args:
        message (str): display text
        terms (tuple[str, ...] | None): normalized terms. Defaults to blocked_terms().
    """
    terms = blocked_terms() if terms is None else terms
    if not terms:
        return False
    normalized = normalize_for_block(message)
    if not normalized:
        return False
    return any(term in normalized for term in terms)
