from parabens.utils.constants import CacheControl


# Log event codes of the page handler
PATH_TOO_LONG = 'PATH_TOO_LONG'
PROBE_PATH = 'PROBE_PATH'
BLOCKED_MESSAGE = 'BLOCKED_MESSAGE'
STATIC_ASSET_MISSING = 'STATIC_ASSET_MISSING'

# User facing error messages
PATH_TOO_LONG_MESSAGE = 'A mensagem é muito longa. Encurte o texto e tente novamente.'
BLOCKED_MESSAGE_TEXT = 'Esta mensagem não está disponível.'
NOT_FOUND_MESSAGE = 'Página não encontrada.'

# fmt: off
# Request path -> (file under public/, content type, cache control)
STATIC_ROUTES: dict[str, tuple[str, str, str | None]] = {
    '/privacy':      ('privacy.html', 'text/html; charset=utf-8', None),
    '/styles.css':   ('styles.css', 'text/css; charset=utf-8', CacheControl.SHORT),
    '/app.js':       ('app.js', 'application/javascript; charset=utf-8', CacheControl.SHORT),
    '/favicon.svg':  ('favicon.svg', 'image/svg+xml', CacheControl.LONG),
    '/og-image.svg': ('og-image.svg', 'image/svg+xml', CacheControl.LONG),
}
# fmt: on
