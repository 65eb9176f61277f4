from __future__ import annotations

import os
import tempfile
from pathlib import Path

from puzzle_input.errors import InputCacheError
from time_key import DayKey

TOKEN_FILE_NAME = "token.txt"


class InputCache:
    """On-disk store for downloaded puzzle inputs and the session token.

    Layout under the root directory::

        token.txt
        <year>/day<day>_input.txt
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def input_path(self, key: DayKey) -> Path:
        return self._root / str(key.year) / f"day{key.day}_input.txt"

    @property
    def token_path(self) -> Path:
        return self._root / TOKEN_FILE_NAME

    def read_input(self, key: DayKey) -> str | None:
        text = _read_text(self.input_path(key))
        if text is None:
            return None
        # leading whitespace can be part of the puzzle
        return text.rstrip("\n")

    def write_input(self, key: DayKey, text: str) -> None:
        _atomic_write(self.input_path(key), text.rstrip("\n") + "\n")

    def read_token(self) -> str | None:
        text = _read_text(self.token_path)
        if text is None:
            return None
        token = text.strip()
        return token or None

    def write_token(self, token: str) -> None:
        _atomic_write(self.token_path, token + "\n")

    def delete_token(self) -> bool:
        try:
            self.token_path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise InputCacheError(f"failed to remove {self.token_path}: {exc}") from exc
        return True


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise InputCacheError(f"failed to read {path}: {exc}") from exc


def _atomic_write(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(prefix=f".{path.name}_", dir=path.parent)
    except OSError as exc:
        raise InputCacheError(f"failed to prepare {path}: {exc}") from exc
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, path)
    except OSError as exc:
        raise InputCacheError(f"failed to write {path}: {exc}") from exc
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)
