from parabens.greeting.occasions import Occasion, OCCASIONS, DEFAULT_OCCASION, parse_occasion_from_path
from parabens.greeting.message import decode_path, encode_path_segment, encode_url_path, build_display_message
from parabens.greeting.blocking import is_blocked_message
from parabens.greeting.path_filter import looks_like_path
from parabens.greeting.page import render_index_html, load_index_template, error_page


__all__ = [
    'Occasion',
    'OCCASIONS',
    'DEFAULT_OCCASION',
    'parse_occasion_from_path',
    'decode_path',
    'encode_path_segment',
    'encode_url_path',
    'build_display_message',
    'is_blocked_message',
    'looks_like_path',
    'render_index_html',
    'load_index_template',
    'error_page',
]
