"""Data Access Object (DAO) implementation for managing shortlinks in a JSON file

This module provides a file-backed implementation of ShortLinkBaseDAO. All
shortlinks live in memory in two indices kept mutually consistent:

    forward index:  code -> path   (persisted, source of truth)
    reverse index:  path -> code   (rebuilt from the forward index on load)

Responsibilities:
    - Load the persisted snapshot exactly once, on first use;
    - Create shortlinks idempotently (one code per path);
    - Generate unique random codes with a bounded number of attempts;
    - Persist every new shortlink synchronously, rolling back on failure;
    - Raise appropriate DAO exceptions.

Classes:
    ShortLinkJsonDAO:
        DAO for storing and retrieving ShortLinkModel in a JSON snapshot file.

Example:
    >>> from parabens.dao.json import ShortLinkJsonDAO

    >>> dao = ShortLinkJsonDAO(db_path='data/shortlinks.json')
    >>> link, created = dao.get_or_create('/Happy_Birthday_Joana')
    >>> link.code
    'q7FemOj'
    >>> created
    True

    >>> dao.get_or_create('/Happy_Birthday_Joana')
    (ShortLinkModel(code='q7FemOj', path='/Happy_Birthday_Joana'), False)

    >>> dao.resolve('q7FemOj').path
    '/Happy_Birthday_Joana'

NOTE:
    Every new shortlink rewrites the whole snapshot, so the cost of a write
    grows with the number of stored shortlinks. This is fine for the expected
    write volume of a greeting site; it is a scalability ceiling, not a bug.
"""

import logging
import threading
from pathlib import Path
from collections.abc import Callable

from beartype import beartype

from parabens.models import ShortLinkModel
from parabens.dao.base import ShortLinkBaseDAO
from parabens.dao.json.helpers import read_snapshot, write_snapshot
from parabens.dao.exceptions import (
    ShortLinkNotFoundError,
    ShortCodeExhaustedError,
    ShortLinkStoreLoadError,
    ShortLinkPersistError,
)
from parabens.utils.config import shortlink_db_path
from parabens.utils.shortener import generate_shortcode
from parabens.utils.constants import SHORT_CODE_LENGTH, SHORT_CODE_MAX_ATTEMPTS


logger = logging.getLogger(__name__)


class ShortLinkJsonDAO(ShortLinkBaseDAO):
    """JSON-file-backed Data Access Object (DAO) for shortlink mappings

    A single lock guards both indices, the loaded flag and the snapshot
    write. Mutations hold it for their whole duration, disk I/O included,
    which serializes all shortlink operations of the process. Only one
    process may use a given snapshot file.

    Attributes:
        db_path (Path):
            Location of the JSON snapshot.
        code_length (int):
            Number of characters of generated codes.
        max_attempts (int):
            Number of candidate codes tried before giving up.

    Methods:
        ensure_loaded(**kwargs) -> ShortLinkJsonDAO:
            Load the snapshot once. Missing file means an empty store.
            Raises ShortLinkStoreLoadError on unreadable or malformed data.

        get_or_create(path: str, **kwargs) -> tuple[ShortLinkModel, bool]:
            Return the existing shortlink for path, or create and persist one.
            Raises ShortCodeExhaustedError or ShortLinkPersistError.

        resolve(code: str, **kwargs) -> ShortLinkModel:
            Retrieve a shortlink by code.
            Raises ShortLinkNotFoundError when the code doesn't exist.

        count(**kwargs) -> int:
            Return the number of stored shortlinks.
    """

    def __init__(
        self,
        db_path: str | Path | None = None,
        code_length: int = SHORT_CODE_LENGTH,
        max_attempts: int = SHORT_CODE_MAX_ATTEMPTS,
        code_generator: Callable[[int], str] = generate_shortcode,
    ):
        """Initialize an empty, not yet loaded shortlink store

        Args:
            db_path (str | Path | None):
                Snapshot location. Defaults to `shortlink_db_path()`.

            code_length (int):
                Length of generated codes. Defaults to 7.

            max_attempts (int):
                Candidate codes tried per creation. Defaults to 10.

            code_generator (Callable[[int], str]):
                Returns a random code of the given length. Defaults to generate_shortcode.
        """
        self.db_path = Path(db_path) if db_path is not None else shortlink_db_path()
        self.code_length = code_length
        self.max_attempts = max_attempts
        self._generate_code = code_generator

        self._lock = threading.Lock()
        self._loaded = False
        self._by_code: dict[str, str] = {}
        self._by_path: dict[str, str] = {}

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} db_path={str(self.db_path)!r} loaded={self._loaded}>'

    @property
    def loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self, **kwargs) -> 'ShortLinkJsonDAO':
        """Load the persisted snapshot on first call

        The load runs under the store lock: concurrent first callers wait for
        the one doing the load and then observe its result. After a failed
        load the store stays "not loaded", so the next call tries again.

        Returns:
            ShortLinkJsonDAO: self (for method chaining)

        Raises:
            ShortLinkStoreLoadError:
                If the snapshot exists but can't be read or isn't a JSON
                object of code -> path strings.

        Example:
            >>> dao.ensure_loaded().count()
            42
        """
        with self._lock:
            if self._loaded:
                return self

            try:
                entries = read_snapshot(self.db_path)
            except (OSError, ValueError) as e:
                logger.error(
                    'Failed to load shortlinks snapshot.',
                    extra={'db_path': str(self.db_path), 'reason': str(e), 'error': e.__class__.__name__},
                )
                raise ShortLinkStoreLoadError(f"Can't load shortlinks from '{self.db_path}'.") from e

            entries = entries or {}
            self._by_code = dict(entries)
            self._by_path = {path: code for code, path in entries.items()}
            self._loaded = True

        logger.info('Loaded shortlinks snapshot.', extra={'db_path': str(self.db_path), 'shortlinks': len(entries)})
        return self

    @beartype
    def get_or_create(self, path: str, **kwargs) -> tuple[ShortLinkModel, bool]:
        """Return the shortlink for `path`, creating it if needed

        Idempotent: once a path has a code, every later call returns that same
        code with `created=False` and performs no write.

        Creation runs as one critical section:
            1. draw up to `max_attempts` random codes until one is unused;
            2. insert it into both indices;
            3. rewrite the snapshot;
            4. on write failure, remove it from both indices again.

        Args:
            path (str):
                Destination path of the shortlink (non-empty).
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            tuple[ShortLinkModel, bool]:
                The shortlink and True if it was created by this call.

        Raises:
            ValueError:
                If path is empty.
            ShortLinkStoreLoadError:
                If the snapshot could not be loaded.
            ShortCodeExhaustedError:
                If every candidate code was already taken.
            ShortLinkPersistError:
                If the snapshot could not be written (nothing was created).

        Example:
            >>> dao.get_or_create('/formatura/Ana')
            (ShortLinkModel(code='Gh71WPT', path='/formatura/Ana'), True)
        """
        if not path:
            raise ValueError('Shortlink path must be a non-empty string.')

        self.ensure_loaded()

        with self._lock:
            code = self._by_path.get(path)
            if code is not None:
                return ShortLinkModel(code=code, path=path), False

            code = self._unused_code()
            if code is None:
                logger.error(
                    'Failed to generate an unused shortlink code.',
                    extra={'attempts': self.max_attempts, 'shortlinks': len(self._by_code)},
                )
                raise ShortCodeExhaustedError(f'No unused shortlink code found after {self.max_attempts} attempts.')

            self._by_code[code] = path
            self._by_path[path] = code
            try:
                write_snapshot(self.db_path, self._by_code)
            except OSError as e:
                del self._by_code[code]
                del self._by_path[path]
                logger.error(
                    'Failed to persist shortlinks snapshot. New shortlink rolled back.',
                    extra={'db_path': str(self.db_path), 'code': code, 'reason': str(e)},
                )
                raise ShortLinkPersistError(f"Can't write shortlinks to '{self.db_path}'.") from e

        logger.debug('Created shortlink %s.', code, extra={'code': code, 'path': path})
        return ShortLinkModel(code=code, path=path), True

    @beartype
    def resolve(self, code: str, **kwargs) -> ShortLinkModel:
        """Retrieve a stored shortlink by code

        Args:
            code (str):
                The shortlink code.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkModel:
                The stored shortlink.

        Raises:
            ShortLinkStoreLoadError:
                If the snapshot could not be loaded.
            ShortLinkNotFoundError:
                If the code doesn't exist.

        Example:
            >>> dao.resolve('abc1234')
            ShortLinkModel(code='abc1234', path='Test Message')
        """
        self.ensure_loaded()

        with self._lock:
            path = self._by_code.get(code)

        if path is None:
            raise ShortLinkNotFoundError(f"Shortlink with code '{code}' not found.")
        return ShortLinkModel(code=code, path=path)

    def count(self, **kwargs) -> int:
        self.ensure_loaded()
        with self._lock:
            return len(self._by_code)

    def _unused_code(self) -> str | None:
        """Draw candidate codes until one is unused. Caller must hold self._lock."""
        for _ in range(self.max_attempts):
            candidate = self._generate_code(self.code_length)
            if candidate and candidate not in self._by_code:
                return candidate
        return None
