"""Exceptions related to Open Graph image rendering.

Classes:
    RenderError:
        Generic base class for render-related exceptions.

    ConverterUnavailableError:
        Raised when the external SVG-to-PNG converter can't be located.

    RenderTimeoutError:
        Raised when the converter did not finish in time (it is killed).

    ProcessFailureError:
        Raised when the converter exits with a nonzero status.

None of these are retried automatically. No cache entry is created on
failure, so a later request for the same key renders from scratch.

Example:
    >>> from parabens.render.exceptions import ConverterUnavailableError
    >>> raise ConverterUnavailableError("'rsvg-convert' not found on PATH.")
    Traceback (most recent call last):
        ...
    parabens.render.exceptions.ConverterUnavailableError: 'rsvg-convert' not found on PATH.
"""


class RenderError(Exception):
    """Generic base class for render-related exceptions."""

    pass


class ConverterUnavailableError(RenderError):
    """Exception raised when the external converter binary can't be located."""

    pass


class RenderTimeoutError(RenderError):
    """Exception raised when the external converter exceeds its timeout."""

    pass


class ProcessFailureError(RenderError):
    """Exception raised when the external converter exits with a nonzero status."""

    pass
