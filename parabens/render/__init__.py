from parabens.render.og_image import og_image_text_prefix, og_cache_key, og_cache_path, og_image_url
from parabens.render.converter import render_og_image_to_file
from parabens.render.og_image_queue import OgImageQueue, RenderJob


__all__ = [
    'og_image_text_prefix',
    'og_cache_key',
    'og_cache_path',
    'og_image_url',
    'render_og_image_to_file',
    'OgImageQueue',
    'RenderJob',
]
