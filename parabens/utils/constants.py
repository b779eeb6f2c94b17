from enum import StrEnum


# Public site domain (used for the default base URL and the OG cache directory)
SITE_DOMAIN = 'parabens.vc'

# Shortlinks
SHORT_CODE_LENGTH = 7
SHORT_CODE_MAX_ATTEMPTS = 10
DEFAULT_SHORTLINK_DB = 'data/shortlinks.json'

# Request limits
MAX_PATH_LENGTH = 512
MAX_SHORTLINK_BODY_BYTES = 8 * 1024
MAX_TRACK_BODY_BYTES = 16 * 1024

# Per-IP rate limits (flask-limiter notation)
SHORTLINK_RATE_LIMIT = '20 per minute'
TRACK_RATE_LIMIT = '120 per minute'

# Open Graph image rendering
OG_IMAGE_WIDTH = 600
OG_IMAGE_HEIGHT = 315
OG_IMAGE_TEXT_LIMIT = 48
OG_RENDER_TIMEOUT_SECONDS = 5
OG_QUEUE_SIZE = 32
OG_CONVERTER = 'rsvg-convert'


class CacheControl:
    """Cache-Control header values."""

    SHORT = 'public, max-age=300'  # 5 minutes
    LONG = 'public, max-age=86400'  # 1 day


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        LOG_LEVEL = 'LOG_LEVEL'
        PORT = 'PORT'
        PUBLIC_BASE_URL = 'PUBLIC_BASE_URL'

    class Storage(StrEnum):
        SHORTLINK_DB = 'SHORTLINK_DB'
        # Render cache base directory lookups, in order of preference
        XDG_CACHE_DIR = 'XDG_CACHE_DIR'
        XDG_CACHE_HOME = 'XDG_CACHE_HOME'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
