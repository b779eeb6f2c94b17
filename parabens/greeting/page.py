"""Greeting page rendering

The index page is a static HTML template with `__PLACEHOLDER__` markers that
are substituted per request. All substituted values are HTML-escaped.

Placeholders:
    __TITLE__, __OG_TITLE__   "<greeting>, <display message><punct>"
    __OG_DESC__               occasion subtitle and emoji
    __OG_URL__                absolute URL of the page
    __OG_IMAGE__              absolute URL of the social-preview image
    __GREETING__              occasion greeting
    __MESSAGE__               display message
    __PUNCT__                 '!' unless the message ends with punctuation
    __SUBTITLE__              occasion subtitle and emoji
    __THEME_CLASS__           CSS class of the selected theme ('' for default)
    __SHOW_COMPOSER__         'true' when there's no message yet
"""

import re

from parabens.greeting.occasions import DEFAULT_OCCASION, parse_occasion_from_path
from parabens.greeting.message import decode_path, build_display_message, has_final_punctuation, has_encoded_final_punctuation
from parabens.render.og_image import og_image_url
from parabens.utils.config import public_dir
from parabens.utils.helpers import escape_html


_PLACEHOLDER = re.compile(r'__[A-Z]+(?:_[A-Z]+)*__')
THEMES = frozenset({'light', 'warm', 'elegant', 'pixel'})


def load_index_template() -> str:
    return (public_dir() / 'index.html').read_text(encoding='utf-8')


def theme_class(theme: str) -> str:
    """Return the CSS class for a theme name, '' for unknown or default themes

    Example:
        >>> theme_class(' Warm ')
        'theme-warm'
        >>> theme_class('neon')
        ''
    """
    theme = theme.strip().lower()
    return f'theme-{theme}' if theme in THEMES else ''


def og_image_text(greeting: str, message: str) -> str:
    """Text rendered on the social-preview image

    The default greeting is implied by the image itself; other occasions
    prepend their greeting.
    """
    if message and greeting != DEFAULT_OCCASION.greeting:
        return f'{greeting}, {message}'
    return message


def render_index_html(template: str, path: str, theme: str, base_url: str) -> str:
    """Render the greeting page for a request path

    Args:
        template (str): index page template
        path (str): request path, e.g. '/aniversario/Joana'
        theme (str): requested theme name ('' for default)
        base_url (str): public base URL of the site

    Returns:
        str: rendered HTML document

    Example:
        >>> html = render_index_html(template, '/aniversario/Joana', '', 'https://parabens.vc')
        >>> '<title>Feliz Aniversário, Joana!</title>' in html
        True
    """
    occasion, raw_message = parse_occasion_from_path(path)
    message = decode_path(raw_message)
    display_message = build_display_message(message)
    punct = '' if has_final_punctuation(message) or has_encoded_final_punctuation(raw_message) else '!'

    title = f'{occasion.greeting}, {display_message}{punct}'
    subtitle = f'{occasion.subtitle} {occasion.emoji}'

    base = base_url.rstrip('/')
    og_url = base_url if path in ('', '/') else f'{base}{path}'
    og_image = og_image_url(base_url, og_image_text(occasion.greeting, message))

    replacements = {
        '__TITLE__': escape_html(title),
        '__OG_TITLE__': escape_html(title),
        '__OG_DESC__': escape_html(subtitle),
        '__OG_URL__': escape_html(og_url),
        '__OG_IMAGE__': escape_html(og_image),
        '__GREETING__': escape_html(occasion.greeting),
        '__MESSAGE__': escape_html(display_message),
        '__PUNCT__': punct,
        '__SUBTITLE__': escape_html(subtitle),
        '__THEME_CLASS__': theme_class(theme),
        '__SHOW_COMPOSER__': 'true' if not message else 'false',
    }
    return _PLACEHOLDER.sub(lambda match: replacements.get(match.group(0), match.group(0)), template)


def error_page(message: str) -> str:
    return (
        '<!DOCTYPE html><html lang="pt-BR"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width,initial-scale=1">'
        '<title>Erro</title><link rel="stylesheet" href="/styles.css"></head>'
        '<body class="error-page"><div class="card"><h1>Ops!</h1>'
        f'<p>{escape_html(message)}</p><a href="/">Voltar</a></div></body></html>'
    )
