"""Store layer for The Void: anonymous masks, sessions and ephemeral messages."""

from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone
from typing import Any

import structlog

from debate_gym.constants import VOID_CONSTANTS
from debate_gym.db.client import DatabaseError, SupabaseClient, get_supabase_client

logger = structlog.get_logger()

MASKS = "void_masks"
SESSIONS = "void_sessions"
MESSAGES = "void_messages"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VoidStore:
    """Store operations for void masks, sessions and messages."""

    def __init__(self, db: SupabaseClient) -> None:
        self.db = db

    # --- Masks ---

    def list_active_masks(self) -> list[dict[str, Any]]:
        """All active masks, oldest first."""
        return self.db.select(
            MASKS,
            filters={"is_active": True},
            order_by="created_at",
            ascending=True,
        )

    def get_active_mask(self, mask_id: str) -> dict[str, Any] | None:
        return self.db.select_one(
            MASKS,
            columns="id, name, icon_type, color",
            filters={"id": mask_id, "is_active": True},
        )

    def seed_default_masks(self, dry_run: bool = False) -> list[str]:
        """Insert the default masks that are missing, by name. Returns the names added.

        With ``dry_run`` nothing is written; the names that would be added are returned.
        """
        existing = {row.get("name") for row in self.db.select(MASKS, columns="name")}
        added = []
        for mask in VOID_CONSTANTS.DEFAULT_MASKS:
            if mask.name in existing:
                logger.info("void.mask_seed_skip", name=mask.name, reason="already_exists")
                continue
            if not dry_run:
                self.db.insert(
                    MASKS,
                    {
                        "name": mask.name,
                        "icon_type": mask.icon_type,
                        "color": mask.color,
                        "is_active": True,
                    },
                )
                logger.info("void.mask_seeded", name=mask.name)
            added.append(mask.name)
        return added

    # --- Sessions ---

    def get_active_session(self, user_id: str) -> dict[str, Any] | None:
        """The user's most recent session that is active and not yet expired."""
        return self.db.select_one(
            SESSIONS,
            filters={"user_id": user_id, "is_active": True},
            gt={"expires_at": utcnow().isoformat()},
            order_by="created_at",
            ascending=False,
        )

    def get_session(self, session_id: str) -> dict[str, Any] | None:
        return self.db.select_one(
            SESSIONS,
            columns="id, user_id, mask_name, is_active, expires_at",
            filters={"id": session_id},
        )

    def generate_session_token(self, user_id: str) -> str:
        """Ask the database for a session token; derive one locally if it returns none."""
        token = self.db.rpc("generate_void_session_token")
        if token:
            return token
        epoch_ms = int(utcnow().timestamp() * 1000)
        raw = f"{user_id}-{epoch_ms}".encode()
        return f"void_{base64.b64encode(raw).decode()}"

    def create_session(self, user_id: str, mask: dict[str, Any], token: str) -> dict[str, Any]:
        expires_at = utcnow() + timedelta(seconds=VOID_CONSTANTS.SESSION_DURATION_SECONDS)
        session = self.db.insert(
            SESSIONS,
            {
                "user_id": user_id,
                "mask_id": mask["id"],
                "mask_name": mask["name"],
                "session_token": token,
                "expires_at": expires_at.isoformat(),
                "is_active": True,
                "message_count": 0,
            },
        )
        logger.info("void.session_created", session_id=session["id"], mask=mask["name"])
        return session

    def end_session(self, session_id: str) -> None:
        self.db.update(SESSIONS, session_id, {"is_active": False})
        logger.info("void.session_ended", session_id=session_id)

    # --- Messages ---

    def post_message(self, session: dict[str, Any], content: str) -> dict[str, Any]:
        expires_at = utcnow() + timedelta(seconds=VOID_CONSTANTS.MESSAGE_EXPIRATION_SECONDS)
        return self.db.insert(
            MESSAGES,
            {
                "session_id": session["id"],
                "mask_name": session["mask_name"],
                "content": content,
                "expires_at": expires_at.isoformat(),
                "is_deleted": False,
            },
        )

    def list_messages(self, offset: int, limit: int) -> list[dict[str, Any]]:
        """Live messages (not deleted, not expired), newest first."""
        return self.db.select(
            MESSAGES,
            filters={"is_deleted": False},
            gt={"expires_at": utcnow().isoformat()},
            order_by="created_at",
            ascending=False,
            limit=limit,
            offset=offset,
        )

    def count_messages(self) -> int:
        return self.db.count(
            MESSAGES,
            filters={"is_deleted": False},
            gt={"expires_at": utcnow().isoformat()},
        )

    # --- Stats ---

    def _safe_count(self, name: str, table: str, **kwargs: Any) -> int:
        try:
            return self.db.count(table, **kwargs)
        except DatabaseError as e:
            logger.error("void.stats_count_failed", stat=name, error=str(e))
            return 0

    def stats(self) -> dict[str, int]:
        """Live counters for the void landing page. A failed counter reads as zero."""
        now = utcnow()
        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        live_sessions = {"filters": {"is_active": True}, "gt": {"expires_at": now.isoformat()}}

        return {
            "activePhantoms": self._safe_count("active_phantoms", SESSIONS, **live_sessions),
            "activeSessions": self._safe_count("active_sessions", SESSIONS, **live_sessions),
            "messagesToday": self._safe_count(
                "messages_today",
                MESSAGES,
                filters={"is_deleted": False},
                gte={"created_at": midnight.isoformat()},
            ),
            "totalMasks": self._safe_count("total_masks", MASKS, filters={"is_active": True}),
        }


def get_void_store() -> VoidStore:
    """Get VoidStore instance."""
    return VoidStore(get_supabase_client())
