from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from .codec import JsonMappingCodec
from .errors import CodecError, StoreOpenError, StoreSyncError
from .interfaces import KeyValueDocumentStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


class KeyValueStore(KeyValueDocumentStore[T]):
    """
    Keeps a whole key-value mapping in memory and mirrors it to one JSON file.

    - A missing file opens as an empty store.
    - Every `set` rewrites the whole file; `close` does a final sync.
    - Writes truncate the file in place (no temp file + rename), so a crash
      mid-write can leave a corrupt store.
    - No locking: one owner per file. Two stores on the same file lose
      updates (last writer wins).
    """

    def __init__(self, path: str | os.PathLike[str], codec: JsonMappingCodec[T], *, default: Any = _MISSING):
        self._path = Path(path)
        self._codec = codec
        self._default = default
        self._data: dict[str, T] = {}

    @classmethod
    def open(
        cls,
        path: str | os.PathLike[str],
        value_type: Any = str,
        *,
        default: Any = _MISSING,
    ) -> "KeyValueStore[T]":
        store = cls(path, JsonMappingCodec(value_type), default=default)
        store._load()
        return store

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("KV OPEN: %s does not exist, starting empty", self._path)
            return
        except OSError as e:
            raise StoreOpenError(self._path, f"could not open {self._path}: {e}") from e

        try:
            self._data = self._codec.decode(raw)
        except CodecError as e:
            raise StoreOpenError(self._path, f"could not decode {self._path}: {e}") from e
        logger.debug("KV OPEN: loaded %d keys from %s", len(self._data), self._path)

    def get(self, key: str) -> tuple[T, bool]:
        if key in self._data:
            return self._data[key], True
        return self._miss_value(), False

    def _miss_value(self) -> Any:
        # Fresh per miss so callers cannot alter later defaults.
        if self._default is _MISSING:
            return self._codec.zero_value()
        return copy.deepcopy(self._default)

    def set(self, key: str, value: T) -> None:
        # Memory is updated before the flush; a failed sync leaves it mutated.
        self._data[key] = value
        self.sync()

    def sync(self) -> None:
        try:
            payload = self._codec.encode(self._data)
        except CodecError as e:
            raise StoreSyncError(self._path, f"could not encode {self._path}: {e}") from e

        try:
            with self._path.open("w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            raise StoreSyncError(self._path, f"could not write {self._path}: {e}") from e
        logger.debug("KV SYNC: wrote %d keys to %s", len(self._data), self._path)

    def all(self) -> dict[str, T]:
        # Live mapping, not a copy.
        return self._data

    def close(self) -> None:
        self.sync()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __enter__(self) -> "KeyValueStore[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"KeyValueStore(path={str(self._path)!r}, value_type={self._codec.value_type!r}, keys={len(self._data)})"


def open_store(
    path: str | os.PathLike[str],
    value_type: Any = str,
    *,
    default: Any = _MISSING,
) -> KeyValueStore[Any]:
    """Open the store at `path`; values default to plain strings."""
    return KeyValueStore.open(path, value_type, default=default)
