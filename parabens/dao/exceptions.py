"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortLinkNotFoundError:
        Raised when a shortlink code is not found in the data store.

    ShortCodeExhaustedError:
        Raised when no unused shortlink code could be generated.

    DataStoreError:
        Raised when there is an error in the data store (e.g. unreadable or
        unwritable snapshot file, full disk, etc.).

    ShortLinkStoreLoadError:
        Raised when the persisted shortlink snapshot can't be loaded.

    ShortLinkPersistError:
        Raised when a new shortlink can't be written to the snapshot.

Example:
    >>> from parabens.dao.exceptions import ShortLinkNotFoundError
    >>> raise ShortLinkNotFoundError("Shortlink with code 'abc1234' not found.")
    Traceback (most recent call last):
        ...
    parabens.dao.exceptions.ShortLinkNotFoundError: Shortlink with code 'abc1234' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortLinkNotFoundError(DAOError):
    """Exception raised when a shortlink code is not found in the data store."""

    pass


class ShortCodeExhaustedError(DAOError):
    """Exception raised when every generated candidate code was already taken.

    This is a transient condition (service temporarily unavailable), not a
    client error. No entry is created.
    """

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. unreadable files, corrupt snapshots, write failures, etc.
    """

    pass


class ShortLinkStoreLoadError(DataStoreError):
    """Exception raised when the persisted shortlink snapshot is unreadable or malformed."""

    pass


class ShortLinkPersistError(DataStoreError):
    """Exception raised when writing the shortlink snapshot fails."""

    pass
