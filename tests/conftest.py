from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the chirpy package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chirpy.core import config as core_config  # noqa: E402
from chirpy.repositories.record_store import RecordStore  # noqa: E402


@pytest.fixture()
def db_file(tmp_path):
    return tmp_path / "database.json"


@pytest.fixture()
def store(db_file):
    return RecordStore(db_file)


@pytest.fixture()
def settings(tmp_path, db_file, monkeypatch):
    """Point Settings at a temporary database and reset the settings cache."""
    monkeypatch.setenv("DB_PATH", str(db_file))
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("POLKA_KEY", "polka-test-key")
    monkeypatch.setenv("STATIC_DIR", str(tmp_path))
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
    core_config.get_settings.cache_clear()
