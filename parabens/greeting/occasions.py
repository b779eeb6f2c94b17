"""Celebration occasions selectable by the first path segment

Example:
    >>> occasion, message = parse_occasion_from_path('/aniversario/Joana')
    >>> occasion.greeting
    'Feliz Aniversário'
    >>> message
    'Joana'
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Occasion:
    """Represent a celebration type and how it's displayed.

    Attributes:
        prefix (str):
            URL prefix selecting the occasion (e.g. 'aniversario'), '' for the default.
        greeting (str):
            Greeting text, e.g. 'Feliz Aniversário'.
        subtitle (str):
            Subtitle shown under the greeting.
        emoji (str):
            Emoji appended to the subtitle.
    """
    prefix: str
    greeting: str
    subtitle: str
    emoji: str


DEFAULT_OCCASION = Occasion(prefix='', greeting='Parabéns', subtitle='Celebrando com balões e confetes', emoji='🎉')

# fmt: off
OCCASIONS: dict[str, Occasion] = {
    'aniversario': Occasion('aniversario', 'Feliz Aniversário', 'Celebrando mais um ano de vida', '🎂'),
    'formatura': Occasion('formatura', 'Parabéns pela formatura', 'Uma conquista para celebrar', '🎓'),
    'promocao': Occasion('promocao', 'Parabéns pela promoção', 'Seu esforço foi reconhecido', '🏆'),
    'casamento': Occasion('casamento', 'Felicidades', 'Celebrando o amor', '💒'),
    'boas-vindas': Occasion('boas-vindas', 'Boas-vindas', 'É um prazer ter você aqui', '👋'),
}
# fmt: on


def parse_occasion_from_path(path: str) -> tuple[Occasion, str]:
    """Split a request path into its occasion and the raw (still encoded) message

    The first segment selects an occasion when it matches one of OCCASIONS
    (case-insensitively). Otherwise the default occasion applies and the
    whole path is the message.

    Args:
        path (str): request path, with or without leading slash

    Returns:
        tuple[Occasion, str]: occasion and raw message

    Example:
        >>> parse_occasion_from_path('/Jo%C3%A3o')
        (Occasion(prefix='', greeting='Parabéns', ...), 'Jo%C3%A3o')
        >>> parse_occasion_from_path('/FORMATURA')
        (Occasion(prefix='formatura', ...), '')
    """
    path = path.removeprefix('/')
    if not path:
        return DEFAULT_OCCASION, ''

    first, _, rest = path.partition('/')
    occasion = OCCASIONS.get(first.lower())
    if occasion is not None:
        return occasion, rest
    return DEFAULT_OCCASION, path
