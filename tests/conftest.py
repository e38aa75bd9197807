from __future__ import annotations

import pytest

from link_sentinel.infra.store import DictStore, JsonFileStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "LINK_SENTINEL_CONFIG_PATH",
        "LINK_SENTINEL_STATE_PATH",
        "LINK_SENTINEL_TRUSTED_HOSTNAMES",
        "LINK_SENTINEL_DEFAULT_ENABLED",
        "LINK_SENTINEL_LOG_LEVEL",
        "LINK_SENTINEL_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store() -> DictStore:
    return DictStore()


@pytest.fixture
def state_file(tmp_path):
    return tmp_path / "state" / "state.json"


@pytest.fixture
def file_store(state_file) -> JsonFileStore:
    return JsonFileStore(state_file)
