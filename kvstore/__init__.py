from __future__ import annotations

from .codec import JsonMappingCodec
from .errors import CodecError, StoreError, StoreOpenError, StoreSyncError
from .interfaces import KeyValueDocumentStore
from .store import KeyValueStore, open_store

__all__ = [
    "JsonMappingCodec",
    "CodecError",
    "StoreError",
    "StoreOpenError",
    "StoreSyncError",
    "KeyValueDocumentStore",
    "KeyValueStore",
    "open_store",
]
