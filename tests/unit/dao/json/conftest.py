import json
from pathlib import Path
from collections.abc import Callable, Iterator

import pytest

from parabens.dao.json import ShortLinkJsonDAO


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / 'data' / 'shortlinks.json'


@pytest.fixture
def write_db(db_path: Path) -> Callable[[object], Path]:
    """Write arbitrary JSON (or raw text) as the snapshot file."""

    def _write(content: object) -> Path:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        db_path.write_text(text, encoding='utf-8')
        return db_path

    return _write


@pytest.fixture
def dao(db_path: Path) -> ShortLinkJsonDAO:
    return ShortLinkJsonDAO(db_path=db_path)


@pytest.fixture
def scripted_codes() -> Callable[..., Callable[[int], str]]:
    """Build a code generator returning the given codes in order (then repeating the last one)."""

    def _scripted(*codes: str) -> Callable[[int], str]:
        iterator: Iterator[str] = iter(codes)
        last = {'code': codes[-1]}

        def generate(length: int) -> str:
            last['code'] = next(iterator, last['code'])
            return last['code']

        return generate

    return _scripted
