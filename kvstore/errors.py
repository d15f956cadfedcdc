from __future__ import annotations

from pathlib import Path


class CodecError(ValueError):
    """Raised when a document cannot be encoded or decoded."""


class StoreError(Exception):
    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path


class StoreOpenError(StoreError):
    """Raised when an existing store file cannot be read or decoded."""


class StoreSyncError(StoreError):
    """Raised when the mapping cannot be written back to the store file."""
