"""Unit tests for the configuration accessors in config.py.

Test coverage includes:

1. Application settings
   - APP_ENV, LOG_LEVEL, PORT and PUBLIC_BASE_URL with and without overrides.

2. Storage locations
   - SHORTLINK_DB default and override.
   - OG cache directory lookup order, including a missing home directory.

3. Package paths
   - project_root() and public_dir() point at the installed package.
"""

from pathlib import Path

import pytest

from parabens.utils import config
from parabens.utils.config import (
    app_env,
    log_level,
    server_port,
    public_base_url,
    shortlink_db_path,
    og_cache_dir,
    project_root,
    public_dir,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ('APP_ENV', 'LOG_LEVEL', 'PORT', 'PUBLIC_BASE_URL', 'SHORTLINK_DB', 'XDG_CACHE_DIR', 'XDG_CACHE_HOME'):
        monkeypatch.delenv(name, raising=False)


# -------------------------------
# 1. Application settings
# -------------------------------

def test_app_env(monkeypatch):
    assert app_env() == 'local'
    monkeypatch.setenv('APP_ENV', 'PROD')
    assert app_env() == 'prod'


def test_log_level(monkeypatch):
    assert log_level() == 'INFO'
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    assert log_level() == 'DEBUG'


def test_server_port(monkeypatch):
    assert server_port() == 8080
    monkeypatch.setenv('PORT', '9000')
    assert server_port() == 9000
    monkeypatch.setenv('PORT', '')
    assert server_port() == 8080


def test_invalid_server_port(monkeypatch):
    monkeypatch.setenv('PORT', 'eighty')
    with pytest.raises(ValueError):
        server_port()


def test_public_base_url(monkeypatch):
    assert public_base_url() == 'https://parabens.vc'
    monkeypatch.setenv('PUBLIC_BASE_URL', 'http://localhost:8080')
    assert public_base_url() == 'http://localhost:8080'


# -------------------------------
# 2. Storage locations
# -------------------------------

def test_shortlink_db_path(monkeypatch, tmp_path):
    assert shortlink_db_path() == Path('data/shortlinks.json')
    monkeypatch.setenv('SHORTLINK_DB', str(tmp_path / 'links.json'))
    assert shortlink_db_path() == tmp_path / 'links.json'


def test_og_cache_dir_prefers_xdg_cache_dir(monkeypatch, tmp_path):
    monkeypatch.setenv('XDG_CACHE_DIR', str(tmp_path / 'dir'))
    monkeypatch.setenv('XDG_CACHE_HOME', str(tmp_path / 'home'))
    assert og_cache_dir() == tmp_path / 'dir' / 'parabens.vc'


def test_og_cache_dir_falls_back_to_xdg_cache_home(monkeypatch, tmp_path):
    monkeypatch.setenv('XDG_CACHE_HOME', str(tmp_path / 'home'))
    assert og_cache_dir() == tmp_path / 'home' / 'parabens.vc'


def test_og_cache_dir_defaults_to_home_cache(monkeypatch, tmp_path):
    monkeypatch.setattr(config.Path, 'home', classmethod(lambda cls: tmp_path))
    assert og_cache_dir() == tmp_path / '.cache' / 'parabens.vc'


def test_og_cache_dir_without_home(monkeypatch, tmp_path):
    def no_home(cls):
        raise RuntimeError('Could not determine home directory.')

    monkeypatch.setattr(config.Path, 'home', classmethod(no_home))
    monkeypatch.setattr(config.tempfile, 'gettempdir', lambda: str(tmp_path))
    assert og_cache_dir() == tmp_path / 'parabens.vc'


# -------------------------------
# 3. Package paths
# -------------------------------

def test_project_root_is_package_directory():
    root = project_root()
    assert root.name == 'parabens'
    assert (root / 'server.py').is_file()


def test_public_dir_holds_static_assets():
    for name in ('index.html', 'privacy.html', 'styles.css', 'app.js', 'favicon.svg', 'og-image.svg', 'og-image.png', 'og-template.svg'):
        assert (public_dir() / name).is_file(), name
