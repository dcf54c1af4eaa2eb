"""Pytest configuration and shared fixtures for TagLedger tests.

Every test gets its own SQLite file under ``tmp_path`` so nothing touches a
real application database.
"""

from __future__ import annotations

import pytest

from tagledger import create_app
from tagledger.config import TestConfig
from tagledger.infra.database import create_db_engine, create_session_factory, init_database
from tagledger.infra.repositories import SQLModelTransactionRepository, SQLModelUserRepository

TEST_JWT_SECRET = "test-jwt-secret-long-enough-for-hs256-signing"


@pytest.fixture
def test_env(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point configuration at a throwaway data directory and database."""

    monkeypatch.setenv("TAGLEDGER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TAGLEDGER_DATABASE_URL", f"sqlite:///{tmp_path / 'ledger.db'}")
    monkeypatch.setenv("TAGLEDGER_JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("TAGLEDGER_FRONTEND_URL", "http://frontend.test")
    monkeypatch.delenv("TAGLEDGER_API_PREFIX", raising=False)
    monkeypatch.delenv("TAGLEDGER_TOKEN_TTL_DAYS", raising=False)
    return tmp_path


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def config(test_env) -> TestConfig:
    return TestConfig()


@pytest.fixture
def db_engine(config):
    """Engine with the schema created and foreign keys enforced."""

    engine = create_db_engine(config)
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
def user_repo(session_factory) -> SQLModelUserRepository:
    return SQLModelUserRepository(session_factory)


@pytest.fixture
def transaction_repo(session_factory) -> SQLModelTransactionRepository:
    return SQLModelTransactionRepository(session_factory)


@pytest.fixture
def user(user_repo):
    """Default owner for scoping data."""

    return user_repo.create(username="tester", password_hash="dummy-hash")


@pytest.fixture
def other_user(user_repo):
    return user_repo.create(username="intruder", password_hash="dummy-hash")


@pytest.fixture
def add_transaction(transaction_repo, user):
    """Factory persisting a transaction for ``user`` unless another owner is given."""

    def _add(date: str, amount: str, tags: str = "", owner=None):
        owner_id = (owner or user).user_id
        return transaction_repo.add(user_id=owner_id, date=date, amount=amount, tags=tags)

    return _add


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(test_env):
    app = create_app("testing")
    yield app
    app.extensions["tagledger"].engine.dispose()


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register an account through the API and return its auth headers."""

    def _register(username: str = "alice", password: str = "1234") -> dict[str, str]:
        response = client.post("/api/register", json={"username": username, "password": password})
        assert response.status_code == 201, response.get_json()
        token = response.get_json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture
def auth_headers(register) -> dict[str, str]:
    return register()


@pytest.fixture
def jwt_secret() -> str:
    return TEST_JWT_SECRET
