"""Unit tests for looks_like_path().

Test coverage includes:
    - Exploit/scanner probes (scripts, dotfiles, traversal, URLs, probe
      directories) are detected.
    - Real greeting messages, including single words matching probe
      directory names and texts with spaces, are not.
"""

import pytest

from parabens.greeting import looks_like_path


@pytest.mark.parametrize(
    'message',
    [
        'wp-login.php',
        'wp-admin/index.php',
        'wp-content/uploads',
        'wordpress/readme.html',
        '../etc/passwd',
        '..\\windows\\system32',
        'xmlrpc.php',
        'phpmyadmin/index.php',
        '.env',
        '.git/config',
        '.htaccess',
        'admin.php',
        'admin/dashboard',
        'backup.sql',
        'config.yml',
        'database.json',
        'http://evil.com/',
        'https://attacker.net/payload',
        'ftp://files.example.com',
        'cgi-bin/script.cgi',
        'shell.sh',
        'exploit.exe',
        'api/users',
        'etc/passwd',
    ],
)
def test_probes_look_like_paths(message):
    assert looks_like_path(message) is True


@pytest.mark.parametrize(
    'message',
    [
        '',
        'João',
        'Maria Silva',
        'J.R. Tolkien',
        'Dr. Smith',
        'Müller',
        'François',
        'admin',
        'Administração',
        'wordpress',
        'wp-admin',
        'I love wordpress',
        'A / B / C',
        'I love wordpress / drupal',
        'my api key',
        'the admin panel',
        '/admin/dashboard',
    ],
)
def test_greetings_do_not_look_like_paths(message):
    assert looks_like_path(message) is False
