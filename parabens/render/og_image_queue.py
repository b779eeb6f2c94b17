"""Serializing render queue for Open Graph images

Rendering shells out to an external converter with real CPU and memory
cost. To keep resource usage bounded under bursty traffic, every render of
the process goes through one FIFO queue consumed by a single worker thread:
at most one render runs at any instant, and requests wait their turn.

Each job carries a one-shot `concurrent.futures.Future`. The submitting
thread blocks on it; the worker resolves it exactly once. Before rendering,
the worker checks the cache, so jobs queued for a key that got rendered in
the meantime complete without running the converter again.

Classes:
    RenderJob:
        A request to materialize the cache entry for a key.

    OgImageQueue:
        Bounded FIFO queue with a single render worker.

Example:
    >>> from parabens.render import OgImageQueue
    >>> with OgImageQueue(cache_dir=Path('/var/cache/parabens.vc')) as og_queue:
    ...     og_queue.render('test-message', 'Test Message')
    ...     og_queue.cache_path('test-message')
    PosixPath('/var/cache/parabens.vc/og/test-message.png')
"""

import queue
import logging
import threading
from pathlib import Path
from dataclasses import dataclass, field
from concurrent.futures import Future
from collections.abc import Callable

from parabens.render.exceptions import RenderError
from parabens.render.converter import render_og_image_to_file
from parabens.render.og_image import og_cache_path
from parabens.utils.config import og_cache_dir
from parabens.utils.helpers import file_exists
from parabens.utils.constants import OG_QUEUE_SIZE


logger = logging.getLogger(__name__)

# Put on the queue by close() to stop the worker after the pending jobs
_STOP = object()


@dataclass(frozen=True)
class RenderJob:
    """Represent a request to render a cache entry.

    Attributes:
        key (str):
            Cache key (normalized slug) identifying the output file.
        text (str):
            Literal text to render.
        done (Future):
            Completion signal, resolved once by the worker with None or a RenderError.
    """
    key: str
    text: str
    done: Future = field(default_factory=Future, compare=False, repr=False)


class OgImageQueue:
    """Single-worker render queue

    Attributes:
        cache_dir (Path):
            Base directory of the render cache.

    Methods:
        start() -> OgImageQueue:
            Start the worker thread (idempotent).

        close(timeout: float | None = None) -> None:
            Let the worker finish the pending jobs, then stop it.

        cache_path(key: str) -> Path:
            Location of the cache file for a key.

        render(key: str, text: str) -> None:
            Enqueue a job and block until it completes.
            Raises RenderError (or a subclass) if the render failed.
    """

    def __init__(
        self,
        cache_dir: str | Path | None = None,
        renderer: Callable[[str, Path], None] = render_og_image_to_file,
        maxsize: int = OG_QUEUE_SIZE,
    ):
        """Create a stopped render queue

        Args:
            cache_dir (str | Path | None):
                Render cache base directory. Defaults to `og_cache_dir()`.

            renderer (Callable[[str, Path], None]):
                Renders text into the given PNG path, raising RenderError on
                failure. Defaults to render_og_image_to_file.

            maxsize (int):
                Queue capacity. A full queue blocks producers. Defaults to 32.
        """
        self.cache_dir = Path(cache_dir) if cache_dir is not None else og_cache_dir()
        self._renderer = renderer
        self._jobs: queue.Queue = queue.Queue(maxsize=maxsize)
        self._lifecycle_lock = threading.Lock()
        self._worker: threading.Thread | None = None
        self._closed = False

    def __enter__(self) -> 'OgImageQueue':
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def running(self) -> bool:
        return self._worker is not None and self._worker.is_alive()

    def start(self) -> 'OgImageQueue':
        with self._lifecycle_lock:
            self._ensure_worker()
        return self

    def _ensure_worker(self) -> None:
        """Start the worker unless it runs. Caller must hold self._lifecycle_lock."""
        if self._closed:
            raise RenderError('Render queue is closed.')
        if not self.running:
            self._worker = threading.Thread(target=self._run, name='og-image-worker', daemon=True)
            self._worker.start()
            logger.debug('Started OG image render worker.', extra={'cache_dir': str(self.cache_dir)})

    def close(self, timeout: float | None = None) -> None:
        """Stop accepting jobs, drain the queue and stop the worker

        Jobs enqueued before close() still run (the stop signal is queued
        behind them in FIFO order).
        """
        with self._lifecycle_lock:
            if self._closed:
                return
            self._closed = True
            worker = self._worker

        if worker is not None and worker.is_alive():
            self._jobs.put(_STOP)
            worker.join(timeout)
        logger.debug('Stopped OG image render worker.')

    def cache_path(self, key: str) -> Path:
        return og_cache_path(self.cache_dir, key)

    def render(self, key: str, text: str) -> None:
        """Render `text` into the cache entry for `key`, waiting for completion

        The worker is started on first use if start() wasn't called. The call
        blocks while the queue is full and while earlier jobs are processed.

        Args:
            key (str):
                Cache key, see og_cache_key().
            text (str):
                Literal text to render.

        Raises:
            RenderError:
                If the render failed (ConverterUnavailableError,
                RenderTimeoutError, ProcessFailureError, or a wrapped
                unexpected error), or the queue is closed.

        Example:
            >>> og_queue.render('test-message', 'Test Message')
            >>> og_queue.cache_path('test-message').is_file()
            True
        """
        job = RenderJob(key=key, text=text)

        # Accepted jobs are always queued ahead of the stop signal of close()
        with self._lifecycle_lock:
            self._ensure_worker()
            self._jobs.put(job)

        job.done.result()

    def _run(self) -> None:
        while True:
            job = self._jobs.get()
            try:
                if job is _STOP:
                    self._reject_pending()
                    return
                self._process(job)
            finally:
                self._jobs.task_done()

    def _reject_pending(self) -> None:
        """Fail jobs that raced in behind the stop signal so no caller waits forever"""
        while True:
            try:
                job = self._jobs.get_nowait()
            except queue.Empty:
                return
            if job is not _STOP:
                job.done.set_exception(RenderError('Render queue is closed.'))
            self._jobs.task_done()

    def _process(self, job: RenderJob) -> None:
        cache_path = self.cache_path(job.key)
        if file_exists(cache_path):
            job.done.set_result(None)
            return

        try:
            self._renderer(job.text, cache_path)
        except RenderError as e:
            logger.error(
                'OG image render failed.',
                extra={'key': job.key, 'text': job.text, 'reason': str(e), 'error': e.__class__.__name__},
            )
            job.done.set_exception(e)
        except Exception as e:
            logger.exception(
                'Unexpected error while rendering OG image.',
                extra={'key': job.key, 'text': job.text, 'error': e.__class__.__name__},
            )
            error = RenderError(f"Unexpected error while rendering '{job.key}': {e}")
            error.__cause__ = e
            job.done.set_exception(error)
        else:
            logger.info('Rendered OG image.', extra={'key': job.key})
            job.done.set_result(None)
