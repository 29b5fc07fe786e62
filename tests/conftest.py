"""Test fixtures — mock Supabase client and shared test data."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from debate_gym.db.client import DatabaseError, SupabaseClient


def iso(delta: timedelta = timedelta(0)) -> str:
    """An ISO-8601 UTC timestamp offset from now."""
    return (datetime.now(timezone.utc) + delta).isoformat()


class MockSupabaseClient(SupabaseClient):
    """In-memory mock of the Supabase client for testing.

    ``failures`` maps ``"<op>:<table>"`` (or ``"rpc:<function>"``) to the
    exception that operation should raise.
    """

    def __init__(self):
        self._tables: dict[str, list[dict[str, Any]]] = {
            "void_masks": [],
            "void_sessions": [],
            "void_messages": [],
            "gym_drills": [],
            "user_drill_attempts": [],
        }
        self.failures: dict[str, Exception] = {}
        self.rpc_results: dict[str, Any] = {}
        self.rpc_calls: list[tuple[str, dict[str, Any]]] = []
        self.users: dict[str, Any] = {}

    @property
    def client(self):
        raise AssertionError("tests must not reach the raw Supabase client")

    def _check(self, op: str, table: str) -> None:
        exc = self.failures.get(f"{op}:{table}")
        if exc is not None:
            raise exc

    def _matching(
        self,
        table: str,
        filters: dict[str, Any] | None,
        gt: dict[str, Any] | None,
        gte: dict[str, Any] | None,
    ) -> list[dict[str, Any]]:
        rows = self._tables.get(table, [])
        for key, value in (filters or {}).items():
            rows = [r for r in rows if r.get(key) == value]
        for key, value in (gt or {}).items():
            rows = [r for r in rows if r.get(key) is not None and r[key] > value]
        for key, value in (gte or {}).items():
            rows = [r for r in rows if r.get(key) is not None and r[key] >= value]
        return rows

    def insert(self, table: str, data: dict[str, Any]) -> dict[str, Any]:
        self._check("insert", table)
        record = {
            "id": str(uuid4()),
            "created_at": iso(),
            **data,
        }
        self._tables.setdefault(table, []).append(record)
        return record

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        gt: dict[str, Any] | None = None,
        gte: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[dict[str, Any]]:
        self._check("select", table)
        rows = self._matching(table, filters, gt, gte)
        if order_by:
            rows = sorted(rows, key=lambda r: r.get(order_by, ""), reverse=not ascending)
        if offset:
            rows = rows[offset:]
        if limit:
            rows = rows[:limit]
        return [dict(r) for r in rows]

    def count(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        gt: dict[str, Any] | None = None,
        gte: dict[str, Any] | None = None,
    ) -> int:
        self._check("count", table)
        return len(self._matching(table, filters, gt, gte))

    def update(self, table: str, id: str, data: dict[str, Any]) -> dict[str, Any] | None:
        self._check("update", table)
        for row in self._tables.get(table, []):
            if row["id"] == id:
                row.update(data)
                return dict(row)
        return None

    def rpc(self, function: str, params: dict[str, Any] | None = None) -> Any:
        self._check("rpc", function)
        self.rpc_calls.append((function, params or {}))
        return self.rpc_results.get(function)

    def get_user(self, jwt: str) -> Any | None:
        return self.users.get(jwt)

    def add(self, table: str, **row: Any) -> dict[str, Any]:
        """Put a row straight into a table, bypassing failure injection."""
        record = {"id": str(uuid4()), "created_at": iso(), **row}
        self._tables.setdefault(table, []).append(record)
        return record

    def rows(self, table: str) -> list[dict[str, Any]]:
        return self._tables.get(table, [])


@pytest.fixture
def mock_db() -> MockSupabaseClient:
    """Fresh mock database for each test."""
    return MockSupabaseClient()


@pytest.fixture
def db_error() -> DatabaseError:
    return DatabaseError("permission denied for table", code="42501")


@pytest.fixture
def alice(mock_db) -> SimpleNamespace:
    """A signed-in user whose token is ``token-alice``."""
    user = SimpleNamespace(id="user-alice", email="alice@example.com")
    mock_db.users["token-alice"] = user
    return user


@pytest.fixture
def bob(mock_db) -> SimpleNamespace:
    user = SimpleNamespace(id="user-bob", email="bob@example.com")
    mock_db.users["token-bob"] = user
    return user


@pytest.fixture
def alice_headers(alice) -> dict[str, str]:
    return {"Authorization": "Bearer token-alice"}


@pytest.fixture
def bob_headers(bob) -> dict[str, str]:
    return {"Authorization": "Bearer token-bob"}


@pytest.fixture
def fake_model():
    """A configured Gemini handle whose ``generate`` is an AsyncMock."""
    from unittest.mock import AsyncMock, patch

    from debate_gym.ai.gemini import GeminiModel

    with patch("debate_gym.ai.gemini.genai.Client"):
        model = GeminiModel(api_key="test-key", model="gemini-pro")
    model.generate = AsyncMock(return_value="Is that not a contradiction?")
    return model


@pytest.fixture
def app(mock_db, fake_model):
    """FastAPI test app with mocked dependencies."""
    from debate_gym.ai.gemini import get_gemini_model
    from debate_gym.db.client import get_supabase_client
    from debate_gym.db.drill_store import DrillStore, get_drill_store
    from debate_gym.db.void_store import VoidStore, get_void_store
    from debate_gym.main import app as _app

    void_store = VoidStore(mock_db)
    drill_store = DrillStore(mock_db)

    _app.dependency_overrides[get_supabase_client] = lambda: mock_db
    _app.dependency_overrides[get_void_store] = lambda: void_store
    _app.dependency_overrides[get_drill_store] = lambda: drill_store
    _app.dependency_overrides[get_gemini_model] = lambda: fake_model

    yield _app

    _app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """HTTP test client."""
    return TestClient(app)
