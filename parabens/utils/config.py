"""Utility functions for application configuration management.

Every setting of the server comes from the process environment. Each
accessor reads its variable on every call (so tests can monkeypatch the
environment) and falls back to a documented default.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    log_level() -> str
        Return the configured log level (`LOG_LEVEL`), defaulting to `'INFO'`.

    server_port() -> int
        Return the TCP port the server listens on (`PORT`), defaulting to 8080.

    public_base_url() -> str
        Return the public base URL used in absolute links (`PUBLIC_BASE_URL`).

    shortlink_db_path() -> Path
        Return the location of the shortlink JSON snapshot (`SHORTLINK_DB`).

    og_cache_dir() -> Path
        Return the base directory for rendered Open Graph images.

    project_root() -> Path
        Return the absolute path to the package directory.

    public_dir() -> Path
        Return the directory holding the packaged static assets.

Example:
    >>> from parabens.utils.config import shortlink_db_path
    >>> os.environ['SHORTLINK_DB'] = '/var/lib/parabens/shortlinks.json'
    >>> shortlink_db_path()
    PosixPath('/var/lib/parabens/shortlinks.json')
"""

import os
import tempfile
from pathlib import Path

from parabens.utils.constants import ENV, SITE_DOMAIN, DEFAULT_SHORTLINK_DB


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'prod'
        >>> app_env()
        'prod'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def log_level() -> str:
    return os.environ.get(ENV.App.LOG_LEVEL, 'INFO').upper()


def server_port() -> int:
    """Return the port to listen on by reading 'PORT'

    Raises:
        ValueError:
            If `PORT` is set to something other than an integer.
    """
    return int(os.environ.get(ENV.App.PORT) or 8080)


def public_base_url() -> str:
    """Return the public base URL of the site by reading 'PUBLIC_BASE_URL'

    Returns:
        str:
            Value of `PUBLIC_BASE_URL`, `'https://parabens.vc'` by default.

    Example:
        >>> os.environ['PUBLIC_BASE_URL'] = 'http://localhost:8080'
        >>> public_base_url()
        'http://localhost:8080'
    """
    return os.environ.get(ENV.App.PUBLIC_BASE_URL) or f'https://{SITE_DOMAIN}'


def shortlink_db_path() -> Path:
    """Return the shortlink snapshot location by reading 'SHORTLINK_DB'

    Relative paths are resolved against the working directory of the server.

    Returns:
        Path:
            Value of `SHORTLINK_DB`, `data/shortlinks.json` by default.
    """
    return Path(os.environ.get(ENV.Storage.SHORTLINK_DB) or DEFAULT_SHORTLINK_DB)


def og_cache_dir() -> Path:
    """Return the base directory for the rendered OG image cache

    Lookup order:
        1. $XDG_CACHE_DIR/parabens.vc
        2. $XDG_CACHE_HOME/parabens.vc
        3. ~/.cache/parabens.vc
        4. <system temp dir>/parabens.vc

    Returns:
        Path:
            Cache base directory (not created by this function).

    Example:
        >>> os.environ['XDG_CACHE_HOME'] = '/tmp/cache'
        >>> og_cache_dir()
        PosixPath('/tmp/cache/parabens.vc')
    """
    for name in (ENV.Storage.XDG_CACHE_DIR, ENV.Storage.XDG_CACHE_HOME):
        value = os.environ.get(name)
        if value:
            return Path(value) / SITE_DOMAIN

    try:
        home = Path.home()
    except RuntimeError:
        # No resolvable home directory (e.g. stripped-down containers)
        return Path(tempfile.gettempdir()) / SITE_DOMAIN
    else:
        return home / '.cache' / SITE_DOMAIN


def project_root() -> Path:
    """Return the absolute path to the `parabens` package directory"""
    return Path(__file__).resolve().parent.parent


def public_dir() -> Path:
    """Return the directory with the static assets shipped with the package"""
    return project_root() / 'public'
