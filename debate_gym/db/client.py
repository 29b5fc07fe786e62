"""Supabase client initialization and helper methods."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import structlog
from postgrest.exceptions import APIError
from supabase import AuthError, Client, create_client

from debate_gym.config import get_settings

logger = structlog.get_logger()


class DatabaseError(Exception):
    """A query was rejected or could not be answered by the database service."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


def _wrap(exc: APIError) -> DatabaseError:
    return DatabaseError(exc.message or str(exc), code=exc.code)


class SupabaseClient:
    """Wrapper around the Supabase client with convenience methods.

    Range filters (``gt``/``gte``) take a column → value mapping and are
    applied alongside the equality ``filters``.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    @property
    def client(self) -> Client:
        """Access the raw Supabase client."""
        return self._client

    def _filtered(
        self,
        query: Any,
        filters: dict[str, Any] | None,
        gt: dict[str, Any] | None,
        gte: dict[str, Any] | None,
    ) -> Any:
        for key, value in (filters or {}).items():
            query = query.eq(key, value)
        for key, value in (gt or {}).items():
            query = query.gt(key, value)
        for key, value in (gte or {}).items():
            query = query.gte(key, value)
        return query

    def insert(self, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """Insert a record and return the created row."""
        try:
            result = self._client.table(table).insert(data).execute()
        except APIError as e:
            raise _wrap(e) from e
        return result.data[0]

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
        """Select records with optional filters, ordering, and a result window."""
        query = self._filtered(self._client.table(table).select(columns), filters, gt, gte)

        if order_by:
            query = query.order(order_by, desc=not ascending)

        if offset is not None and limit:
            query = query.range(offset, offset + limit - 1)
        elif limit:
            query = query.limit(limit)

        try:
            result = query.execute()
        except APIError as e:
            raise _wrap(e) from e
        return result.data or []

    def select_one(
        self,
        table: str,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        gt: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> dict[str, Any] | None:
        """Return the first matching row, or None."""
        rows = self.select(
            table,
            columns=columns,
            filters=filters,
            gt=gt,
            order_by=order_by,
            ascending=ascending,
            limit=1,
        )
        return rows[0] if rows else None

    def count(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        gt: dict[str, Any] | None = None,
        gte: dict[str, Any] | None = None,
    ) -> int:
        """Exact row count for the filtered table, without fetching rows."""
        query = self._filtered(
            self._client.table(table).select("*", count="exact", head=True), filters, gt, gte
        )
        try:
            result = query.execute()
        except APIError as e:
            raise _wrap(e) from e
        return result.count or 0

    def update(self, table: str, id: str, data: dict[str, Any]) -> dict[str, Any] | None:
        """Update a record by ID."""
        try:
            result = self._client.table(table).update(data).eq("id", id).execute()
        except APIError as e:
            raise _wrap(e) from e
        return result.data[0] if result.data else None

    def rpc(self, function: str, params: dict[str, Any] | None = None) -> Any:
        """Call a Postgres function and return its payload."""
        try:
            result = self._client.rpc(function, params or {}).execute()
        except APIError as e:
            raise _wrap(e) from e
        return result.data

    def get_user(self, jwt: str) -> Any | None:
        """Resolve an access token to its auth user, or None if it is not valid."""
        try:
            response = self._client.auth.get_user(jwt)
        except AuthError as e:
            logger.info("supabase.auth_rejected", error=str(e))
            return None
        return response.user if response else None


@lru_cache
def get_supabase_client() -> SupabaseClient:
    """Get cached Supabase client instance."""
    settings = get_settings()
    client = create_client(settings.supabase_url, settings.supabase_anon_key)
    logger.info("supabase.connected", url=settings.supabase_url)
    return SupabaseClient(client)
