from __future__ import annotations

import shutil
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """A store file location that does not exist yet."""
    return tmp_path / "countries.kv"


@pytest.fixture
def countries_path(tmp_path: Path) -> Path:
    """
    Copy of tests/data/test_countries.kv, so tests that write never touch the fixture.
    """
    dest = tmp_path / "test_countries.kv"
    shutil.copyfile(DATA_DIR / "test_countries.kv", dest)
    return dest


@pytest.fixture
def cli_workdir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Run CLI invocations from a temp directory so default.kv and local.env resolve there.
    """
    monkeypatch.chdir(tmp_path)
    # setenv first so monkeypatch records the name and undoes values loaded from local.env
    for name in ("KV_DEBUG", "KV_DEFAULT_PATH", "KV_STORE_SUFFIX"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path
