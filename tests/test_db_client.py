"""Tests for the Supabase wrapper's query building and error mapping."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError

from debate_gym.db.client import DatabaseError, SupabaseClient


@pytest.fixture
def raw():
    """A raw Supabase client whose query builder records calls and chains to itself."""
    client = MagicMock()
    query = client.table.return_value
    for method in ("select", "eq", "gt", "gte", "order", "limit", "range", "insert", "update"):
        getattr(query, method).return_value = query
    query.execute.return_value = SimpleNamespace(data=[{"id": "1"}], count=7)
    return client


def test_select_builds_filtered_ordered_query(raw):
    db = SupabaseClient(raw)

    rows = db.select(
        "void_masks",
        filters={"is_active": True},
        gt={"expires_at": "2026-01-01"},
        order_by="created_at",
        ascending=True,
    )

    assert rows == [{"id": "1"}]
    query = raw.table.return_value
    raw.table.assert_called_with("void_masks")
    query.select.assert_called_with("*")
    query.eq.assert_called_with("is_active", True)
    query.gt.assert_called_with("expires_at", "2026-01-01")
    query.order.assert_called_with("created_at", desc=False)


def test_select_window_uses_range(raw):
    SupabaseClient(raw).select("void_messages", limit=10, offset=20)
    raw.table.return_value.range.assert_called_with(20, 29)


def test_select_none_data_is_empty_list(raw):
    raw.table.return_value.execute.return_value = SimpleNamespace(data=None, count=None)
    assert SupabaseClient(raw).select("void_masks") == []


def test_count_uses_head_request(raw):
    assert SupabaseClient(raw).count("void_sessions", filters={"is_active": True}) == 7
    raw.table.return_value.select.assert_called_with("*", count="exact", head=True)


def test_api_error_becomes_database_error(raw):
    raw.table.return_value.execute.side_effect = APIError(
        {"message": "relation does not exist", "code": "42P01", "hint": None, "details": None}
    )

    with pytest.raises(DatabaseError) as excinfo:
        SupabaseClient(raw).select("void_masks")

    assert excinfo.value.code == "42P01"
    assert "relation does not exist" in str(excinfo.value)


def test_rpc_returns_payload(raw):
    raw.rpc.return_value.execute.return_value = SimpleNamespace(data="void_token")
    assert SupabaseClient(raw).rpc("generate_void_session_token") == "void_token"
    raw.rpc.assert_called_with("generate_void_session_token", {})


def test_get_user(raw):
    raw.auth.get_user.return_value = SimpleNamespace(user=SimpleNamespace(id="u1"))
    assert SupabaseClient(raw).get_user("jwt").id == "u1"
