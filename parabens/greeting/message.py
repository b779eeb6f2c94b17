"""Greeting message normalization and display rules

Messages travel in URL paths with spaces written as underscores, e.g.
`/Happy_Birthday_Joana`. These helpers convert between the path form and
the display form and decide how a message is presented.

Functions:
    decode_path(raw: str) -> str
    encode_path_segment(value: str) -> str
    encode_url_path(path: str) -> str
    build_display_message(value: str) -> str
    has_final_punctuation(value: str) -> bool
    has_encoded_final_punctuation(raw: str) -> bool
"""

import re
from urllib.parse import quote, unquote


DEFAULT_DISPLAY_MESSAGE = 'você é um(a) amigo(a)'
FINAL_PUNCTUATION = ('!', '?', '.', '…')
ENCODED_FINAL_PUNCTUATION = ('%21', '%3f', '%2e', '%e2%80%a6')
# Characters left unescaped in a path segment besides [A-Za-z0-9_.-~]
PATH_SEGMENT_SAFE = "$&+:=@"
# Whole paths keep their segments, query string and existing escapes
URL_PATH_SAFE = "/?=&%"

_WORD = re.compile(r"[A-Za-zÀ-ÿ'’]+")


def decode_path(raw: str) -> str:
    """Convert a raw path message into display text

    Example:
        >>> decode_path('Jo%C3%A3o_Silva')
        'João Silva'
    """
    if not raw:
        return ''
    return unquote(raw).replace('_', ' ').strip()


def encode_path_segment(value: str) -> str:
    """Convert display text into a single URL path segment

    Example:
        >>> encode_path_segment('João Silva')
        'Jo%C3%A3o_Silva'
        >>> encode_path_segment('a/b')
        'a%2Fb'
    """
    value = value.strip()
    if not value:
        return ''
    return quote(value.replace(' ', '_'), safe=PATH_SEGMENT_SAFE)


def encode_url_path(path: str) -> str:
    """Make a stored greeting path safe to embed in a URL

    Spaces become underscores and everything outside URL_PATH_SAFE is
    percent-encoded, so occasion segments and the query string stay readable.

    Example:
        >>> encode_url_path('/aniversario/Feliz aniversário Joana?theme=warm')
        '/aniversario/Feliz_anivers%C3%A1rio_Joana?theme=warm'
    """
    return quote(path.strip().replace(' ', '_'), safe=URL_PATH_SAFE)


def tokenize_words(value: str) -> list[str]:
    return _WORD.findall(value)


def is_capitalized(token: str) -> bool:
    if not token:
        return False
    first = token[0]
    return first.upper() == first and first.lower() != first


def starts_with_proper_name(value: str) -> bool:
    tokens = tokenize_words(value)
    return bool(tokens) and is_capitalized(tokens[0])


def build_display_message(value: str) -> str:
    """Return the text shown after the greeting

    Proper names ('Joana', 'Dr. Silva') and sentences already addressing the
    reader ('você passou!') are kept as is; anything else is prefixed with
    'você' so the page reads naturally ('Parabéns, você passou na prova!').

    Example:
        >>> build_display_message('Joana')
        'Joana'
        >>> build_display_message('passou na prova')
        'você passou na prova'
        >>> build_display_message('')
        'você é um(a) amigo(a)'
    """
    value = value.strip()
    if not value:
        return DEFAULT_DISPLAY_MESSAGE

    lower = value.lower()
    if lower.startswith(('voce ', 'você ', 'vc ')):
        return value
    if starts_with_proper_name(value):
        return value
    return f'você {value}'


def has_final_punctuation(value: str) -> bool:
    value = value.strip()
    return bool(value) and value.endswith(FINAL_PUNCTUATION)


def has_encoded_final_punctuation(raw: str) -> bool:
    """True if the raw (possibly percent-encoded) message ends with punctuation

    Example:
        >>> has_encoded_final_punctuation('Oi%21')
        True
    """
    raw = raw.strip()
    if not raw:
        return False
    if has_final_punctuation(raw):
        return True
    return raw.lower().endswith(ENCODED_FINAL_PUNCTUATION)
