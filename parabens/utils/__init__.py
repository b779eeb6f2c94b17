from parabens.utils.config import app_env, public_base_url, shortlink_db_path, og_cache_dir, project_root, public_dir
from parabens.utils.helpers import short_url, absolute_url, client_ip, escape_html, escape_xml, file_exists, guarantee_500_response
from parabens.utils.shortener import generate_shortcode
from parabens.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'public_base_url',
    'shortlink_db_path',
    'og_cache_dir',
    'project_root',
    'public_dir',
    'short_url',
    'absolute_url',
    'client_ip',
    'escape_html',
    'escape_xml',
    'file_exists',
    'guarantee_500_response',
    'initialize_logging',
]
