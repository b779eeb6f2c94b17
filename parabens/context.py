"""Per-process application context handed to every handler

The shortlink store and the render queue are constructed once at server
startup and passed explicitly to handlers, instead of living in module
globals. Tests build their own context with fakes.

Example:
    >>> context = AppContext(
    ...     short_link_dao=ShortLinkJsonDAO(db_path='data/shortlinks.json'),
    ...     og_image_queue=OgImageQueue(cache_dir=og_cache_dir()),
    ... )
    >>> redirect_url.handler(event, context)
"""

from dataclasses import dataclass

from parabens.dao.base import ShortLinkBaseDAO
from parabens.render import OgImageQueue


@dataclass(frozen=True)
class AppContext:
    """Owned instances shared by the request handlers.

    Attributes:
        short_link_dao (ShortLinkBaseDAO):
            Shortlink store.
        og_image_queue (OgImageQueue):
            Social-preview image render queue.
    """
    short_link_dao: ShortLinkBaseDAO
    og_image_queue: OgImageQueue
