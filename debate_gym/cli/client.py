"""API client for the Debate Gym REST API."""

from __future__ import annotations

from typing import Any

import httpx


class GymClient:
    """HTTP client wrapping the Debate Gym API endpoints."""

    def __init__(self, base_url: str = "http://localhost:8400", auth_token: str | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        headers = {}
        if auth_token:
            headers["Authorization"] = f"Bearer {auth_token}"
        self._client = httpx.Client(base_url=f"{self.base_url}/api", headers=headers, timeout=30)

    def _handle(self, resp: httpx.Response) -> Any:
        if resp.status_code >= 400:
            try:
                detail = resp.json().get("error", resp.text)
            except ValueError:
                detail = resp.text
            raise RuntimeError(f"API error ({resp.status_code}): {detail}")
        return resp.json()

    # --- Void ---

    def list_masks(self) -> list[dict]:
        return self._handle(self._client.get("/void/masks"))

    def stats(self) -> dict:
        return self._handle(self._client.get("/void/stats"))

    def list_messages(self, page: int = 1, limit: int = 50) -> dict:
        return self._handle(self._client.get("/void/messages", params={"page": page, "limit": limit}))

    def post_message(self, session_id: str, content: str) -> dict:
        return self._handle(
            self._client.post("/void/messages", json={"sessionId": session_id, "content": content})
        )

    def get_session(self) -> dict:
        return self._handle(self._client.get("/void/session"))

    def start_session(self, mask_id: str) -> dict:
        return self._handle(self._client.post("/void/session", json={"maskId": mask_id}))

    def end_session(self, session_id: str) -> dict:
        return self._handle(
            self._client.request("DELETE", "/void/session", json={"sessionId": session_id})
        )

    # --- Drills ---

    def submit_attempt(self, drill_id: str, score: float) -> dict:
        return self._handle(
            self._client.post("/drills/attempt", json={"drillId": drill_id, "score": score})
        )
