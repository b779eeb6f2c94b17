"""Unit tests for the ShortLinkModel dataclass in short_link_model.py.

Test coverage includes:

1. Model creation
   - Ensures instances hold the given code and path.

2. Equality semantics
   - Models with identical data compare (and hash) equal; differing data doesn't.

3. Immutability
   - Fields are frozen and cannot be reassigned after creation.
"""

from dataclasses import FrozenInstanceError

import pytest

from parabens.models import ShortLinkModel


# -------------------------------------------------
# 1. Model creation
# -------------------------------------------------

def test_short_link_model_creation():
    """Ensure ShortLinkModel can be created with a code and a path."""
    link = ShortLinkModel(code='abc1234', path='/aniversario/Joana?theme=warm')

    assert link.code == 'abc1234'
    assert link.path == '/aniversario/Joana?theme=warm'


# -------------------------------------------------
# 2. Equality semantics
# -------------------------------------------------

def test_equal_models():
    assert ShortLinkModel('abc1234', '/Joana') == ShortLinkModel(code='abc1234', path='/Joana')
    assert hash(ShortLinkModel('abc1234', '/Joana')) == hash(ShortLinkModel('abc1234', '/Joana'))


@pytest.mark.parametrize('other', [ShortLinkModel('xyz9876', '/Joana'), ShortLinkModel('abc1234', '/Ana')])
def test_unequal_models(other):
    assert ShortLinkModel('abc1234', '/Joana') != other


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------

@pytest.mark.parametrize('field', ['code', 'path'])
def test_fields_are_frozen(field):
    link = ShortLinkModel('abc1234', '/Joana')
    with pytest.raises(FrozenInstanceError):
        setattr(link, field, 'changed')
