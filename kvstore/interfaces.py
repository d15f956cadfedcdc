from __future__ import annotations

from pathlib import Path
from typing import Protocol, TypeVar

T = TypeVar("T")


class KeyValueDocumentStore(Protocol[T]):
    """
    Minimal key-value interface over a single document persisted at `path`.
    """

    @property
    def path(self) -> Path:
        ...

    def get(self, key: str) -> tuple[T, bool]:
        """Return (value, True) for a stored key, (default, False) otherwise."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store `value` under `key` and persist the full document."""
        ...

    def sync(self) -> None:
        """Rewrite the full document from the in-memory mapping."""
        ...

    def all(self) -> dict[str, T]:
        ...

    def close(self) -> None:
        ...
