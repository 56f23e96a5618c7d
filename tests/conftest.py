import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

import pytest
from fastapi.testclient import TestClient

from uas.auth.accounts import AccountStore
from uas.auth.passwords import make_hasher


@pytest.fixture(autouse=True)
def secret_key(monkeypatch):
    monkeypatch.setenv("UAS_SECRET_KEY", "test-secret")
    monkeypatch.delenv("SECRET_KEY", raising=False)


@pytest.fixture()
def fast_hasher():
    # Cheap argon2 parameters keep the suite fast; production uses the defaults.
    return make_hasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture()
def store(fast_hasher) -> AccountStore:
    return AccountStore(hasher=fast_hasher)


@pytest.fixture()
def client(store) -> TestClient:
    from uas.app import create_app

    return TestClient(create_app(store=store))
