from dataclasses import dataclass


@dataclass(frozen=True)
class ShortLinkModel:
    """Represent a shortlink mapping.

    Attributes:
        code (str):
            The unique short identifier, e.g. 'abc1234'.
        path (str):
            The destination the code redirects to. New entries store a
            site-relative path with its leading slash (occasion prefix and
            query string included), e.g. '/aniversario/Joana?theme=warm'.
            Entries created by older releases hold a bare decoded message,
            e.g. 'Joana'.

    Example:
        >>> link = ShortLinkModel(code='abc1234', path='/Happy_Birthday_Joana')
        >>> link.code
        'abc1234'
        >>> link.path
        '/Happy_Birthday_Joana'
    """
    code: str
    path: str
