"""Abstract base class for shortlink data access objects (DAOs).

This class establishes a consistent contract for all shortlink DAO
implementations, regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for idempotently creating and resolving shortlinks.
    - Standardize error handling across data store implementations.
    - Enforce a consistent API for use by HTTP handlers.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from parabens.dao.json import ShortLinkJsonDAO

        >>> dao = ShortLinkJsonDAO(db_path='data/shortlinks.json')
        >>> dao.ensure_loaded()
        <ShortLinkJsonDAO>

        >>> link, created = dao.get_or_create('/Happy_Birthday_Joana')
        >>> created
        True

        >>> dao.resolve(link.code).path
        '/Happy_Birthday_Joana'
"""

from abc import ABC, abstractmethod

from parabens.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for shortlink data access objects (DAOs).

    Methods:
        ensure_loaded(**kwargs) -> ShortLinkBaseDAO:
            Load persisted shortlinks once. No-op afterwards.
            Raises ShortLinkStoreLoadError if the persisted data is unusable.

        get_or_create(path: str, **kwargs) -> tuple[ShortLinkModel, bool]:
            Return the shortlink for a path, creating it when missing.
            Raises ShortCodeExhaustedError when no free code was found.
            Raises ShortLinkPersistError on write failure.

        resolve(code: str, **kwargs) -> ShortLinkModel:
            Retrieve a shortlink by code.
            Raises ShortLinkNotFoundError if the code does not exist.

        count(**kwargs) -> int:
            Return the number of stored shortlinks.

    NOTE:
        - Shortlinks never expire and are never deleted.
    """

    @abstractmethod
    def ensure_loaded(self, **kwargs) -> 'ShortLinkBaseDAO':
        """Load persisted shortlinks into memory (exactly once).

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            ShortLinkStoreLoadError:
                If the persisted data exists but is unreadable or malformed.
        """
        pass

    @abstractmethod
    def get_or_create(self, path: str, **kwargs) -> tuple[ShortLinkModel, bool]:
        """Return the shortlink for `path`, creating and persisting it when missing.

        Args:
            path (str):
                Destination path of the shortlink.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            tuple[ShortLinkModel, bool]: the shortlink and whether it was just created.

        Raises:
            ShortLinkStoreLoadError:
                If the store could not be loaded.

            ShortCodeExhaustedError:
                If no unused code could be generated.

            ShortLinkPersistError:
                If the new entry could not be persisted (nothing is kept).
        """
        pass

    @abstractmethod
    def resolve(self, code: str, **kwargs) -> ShortLinkModel:
        """Retrieve a shortlink by its code.

        Args:
            code (str):
                The shortlink code.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkModel: The stored shortlink.

        Raises:
            ShortLinkStoreLoadError:
                If the store could not be loaded.

            ShortLinkNotFoundError:
                If no shortlink with the given code exists.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of stored shortlinks."""
        pass
