"""Heuristic detection of scanner/exploit probes posing as greeting messages

Every unknown path renders a greeting page, so vulnerability scanners asking
for `/wp-login.php` or `/.env` would get a cheerful "Parabéns, wp-login.php!"
page. Such messages are answered with 404 instead.

Real messages are free text: anything containing a space, or starting with a
slash, is never treated as a probe.

Example:
    >>> looks_like_path('wp-admin/index.php')
    True
    >>> looks_like_path('I love wordpress / drupal')
    False
"""

import re


SCHEME = re.compile(r'^[a-z][a-z0-9+.-]*://', re.IGNORECASE)
TRAVERSAL = re.compile(r'\.\.[/\\]')

# fmt: off
PROBE_EXTENSIONS = frozenset({
    'php', 'php3', 'php5', 'phtml', 'asp', 'aspx', 'jsp', 'cgi', 'pl', 'py', 'rb',
    'sh', 'bash', 'exe', 'dll', 'bat', 'cmd', 'ps1',
    'sql', 'db', 'sqlite', 'bak', 'old', 'swp', 'log',
    'env', 'ini', 'conf', 'cfg', 'config', 'yml', 'yaml', 'json', 'xml', 'toml',
    'zip', 'tar', 'gz', 'tgz', 'rar', '7z',
    'html', 'htm', 'js', 'txt',
})

PROBE_DIRECTORIES = frozenset({
    'wp-admin', 'wp-content', 'wp-includes', 'wordpress', 'wp',
    'phpmyadmin', 'pma', 'admin', 'administrator', 'cgi-bin',
    'api', 'etc', 'bin', 'var', 'usr', 'proc', 'tmp', 'vendor', 'node_modules',
    '.git', '.svn', '.well-known', 'backup', 'backups', 'config', 'includes',
})
# fmt: on


def looks_like_path(message: str) -> bool:
    """True if a decoded message looks like a file/URL probe rather than a greeting

    Args:
        message (str): decoded display text (underscores already turned into spaces)

    Returns:
        bool: True for URLs, traversal sequences, dotfiles, script/config file
              names and paths under well known probe directories.
    """
    message = message.strip()
    if not message or message.startswith('/'):
        return False
    if SCHEME.match(message):
        return True
    if TRAVERSAL.search(message):
        return True
    if any(ch.isspace() for ch in message):
        return False

    segments = [segment for segment in re.split(r'[/\\]', message) if segment]
    if not segments:
        return False

    # .env, .git/config, .htaccess
    if message.startswith('.') and len(message) > 1:
        return True

    # wp-login.php, backup.sql, wordpress/readme.html
    last = segments[-1]
    _, dot, extension = last.rpartition('.')
    if dot and extension.lower() in PROBE_EXTENSIONS:
        return True

    # admin/dashboard, api/users, etc/passwd
    return len(segments) > 1 and segments[0].lower() in PROBE_DIRECTORIES
