"""Unit tests for occasion parsing.

Test coverage includes:
    - Known prefixes select their occasion (case-insensitively).
    - Unknown first segments keep the whole path as the message.
    - Empty paths and prefix-only paths yield an empty message.
"""

import pytest

from parabens.greeting import OCCASIONS, DEFAULT_OCCASION, parse_occasion_from_path


@pytest.mark.parametrize(
    'path, prefix, message',
    [
        ('', '', ''),
        ('/', '', ''),
        ('/Joana', '', 'Joana'),
        ('Joana', '', 'Joana'),
        ('/aniversario/Joana', 'aniversario', 'Joana'),
        ('/ANIVERSARIO/Joana', 'aniversario', 'Joana'),
        ('/formatura', 'formatura', ''),
        ('/boas-vindas/Equipe_Nova', 'boas-vindas', 'Equipe_Nova'),
        ('/casamento/Ana_e_Bia/extra', 'casamento', 'Ana_e_Bia/extra'),
        ('/viagem/Paris', '', 'viagem/Paris'),
    ],
)
def test_parse_occasion_from_path(path, prefix, message):
    occasion, raw_message = parse_occasion_from_path(path)
    assert occasion.prefix == prefix
    assert raw_message == message


def test_default_occasion():
    occasion, _ = parse_occasion_from_path('/Joana')
    assert occasion is DEFAULT_OCCASION
    assert occasion.greeting == 'Parabéns'


def test_occasion_registry_is_keyed_by_prefix():
    assert set(OCCASIONS) == {'aniversario', 'formatura', 'promocao', 'casamento', 'boas-vindas'}
    assert all(key == occasion.prefix for key, occasion in OCCASIONS.items())
    assert OCCASIONS['aniversario'].greeting == 'Feliz Aniversário'
