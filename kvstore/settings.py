from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Store used when the first argument is not a store file
    default_path: str

    # An argument ending in this suffix is taken as the store path
    store_suffix: str

    # Debug
    debug: bool


def get_settings() -> Settings:
    default_path = os.getenv("KV_DEFAULT_PATH", "default.kv")
    store_suffix = os.getenv("KV_STORE_SUFFIX", ".kv")

    debug = _env_bool("KV_DEBUG", False)

    return Settings(
        default_path=default_path,
        store_suffix=store_suffix,
        debug=debug,
    )
