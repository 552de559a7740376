"""Key-value persistence for rotation state.

The shuffle manager only needs ``get``/``set``/``clear`` on string keys.
``FileStore`` keeps one file per key in a directory that other readers
(e.g. a status command) can open too; ``MemoryStore`` is for tests and
previews.
"""

import logging
import re
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(Protocol):
    """Minimal byte store keyed by strings."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...

    def clear(self, key: str) -> None: ...


class MemoryStore:
    """In-process store backed by a dict."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = value

    def clear(self, key: str) -> None:
        self._data.pop(key, None)


class FileStore:
    """Directory-backed store, one file per key."""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.base_dir / key

    def get(self, key: str) -> bytes | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_name(f"{path.name}.tmp")
        tmp_path.write_bytes(value)
        tmp_path.replace(path)
        logger.debug(f"Wrote {len(value)} bytes to {path}")

    def clear(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def copy_to_memory(self, keys: list[str]) -> MemoryStore:
        """Snapshot the given keys into a MemoryStore."""
        snapshot: dict[str, bytes] = {}
        for key in keys:
            value = self.get(key)
            if value is not None:
                snapshot[key] = value
        return MemoryStore(snapshot)
