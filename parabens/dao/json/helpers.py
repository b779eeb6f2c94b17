import os
import json
import tempfile
from pathlib import Path


__all__ = ['read_snapshot', 'write_snapshot']


def read_snapshot(path: Path) -> dict[str, str] | None:
    """Read a shortlink snapshot (JSON object of code -> path)

    Args:
        path (Path):
            Location of the snapshot file.

    Returns:
        dict[str, str] | None:
            The forward index, or None if the file does not exist.

    Raises:
        OSError:
            If the file exists but can't be read.
        ValueError:
            If the content is not valid JSON (json.JSONDecodeError, UnicodeDecodeError)
            or not a flat object of string keys and unique string values.

    Example:
        >>> read_snapshot(Path('data/shortlinks.json'))
        {'abc1234': '/Happy_Birthday_Joana'}
    """
    try:
        content = path.read_text(encoding='utf-8')
    except FileNotFoundError:
        return None

    entries = json.loads(content)
    if not isinstance(entries, dict):
        raise ValueError(f'Expected a JSON object, got {type(entries).__name__}.')
    seen: dict[str, str] = {}
    for code, target in entries.items():
        if not isinstance(target, str):
            raise ValueError(f"Expected a string path for code '{code}', got {type(target).__name__}.")
        if target in seen:
            raise ValueError(f"Codes '{seen[target]}' and '{code}' share the path '{target}'.")
        seen[target] = code
    return entries


def write_snapshot(path: Path, entries: dict[str, str]) -> None:
    """Rewrite the whole shortlink snapshot

    Parent directories are created on demand. The content is written to a
    temporary file in the destination directory which then replaces the
    snapshot in a single rename, so readers (and a crashed process) never
    observe a half-written file.

    Args:
        path (Path):
            Location of the snapshot file.
        entries (dict[str, str]):
            Forward index (code -> path) to persist.

    Raises:
        OSError:
            If the directory can't be created or the file can't be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = json.dumps(entries, indent=2, ensure_ascii=False)

    fd, tmp_name = tempfile.mkstemp(prefix=f'.{path.name}.', suffix='.tmp', dir=path.parent)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
            tmp.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
