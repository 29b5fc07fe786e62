"""Store layer for gym drills and attempts."""

from __future__ import annotations

import math
from typing import Any

import structlog

from debate_gym.constants import GYM_CONSTANTS
from debate_gym.db.client import DatabaseError, SupabaseClient, get_supabase_client

logger = structlog.get_logger()


def xp_for_score(score: float, xp_reward: int) -> int:
    """XP earned for a score: the drill's reward scaled by score percent, rounded down."""
    return math.floor(score / GYM_CONSTANTS.MAX_SCORE * xp_reward)


class DrillStore:
    """Store operations for drills."""

    def __init__(self, db: SupabaseClient) -> None:
        self.db = db

    def get_drill(self, drill_id: str) -> dict[str, Any] | None:
        return self.db.select_one("gym_drills", columns="id, xp_reward", filters={"id": drill_id})

    def record_attempt(
        self,
        user_id: str,
        drill_id: str,
        score: float,
        feedback: dict[str, Any] | None,
    ) -> dict[str, Any]:
        attempt = self.db.insert(
            "user_drill_attempts",
            {
                "user_id": user_id,
                "drill_id": drill_id,
                "score": score,
                "feedback": feedback,
            },
        )
        logger.info("drills.attempt_recorded", drill_id=drill_id, score=score)
        return attempt

    def award_xp(self, user_id: str, score: float, xp_reward: int) -> int:
        """Credit XP for an attempt. Failures are logged, never raised."""
        xp = xp_for_score(score, xp_reward)
        if xp <= 0:
            return 0
        try:
            self.db.rpc("increment_user_xp", {"user_uuid": user_id, "xp_amount": xp})
        except DatabaseError as e:
            logger.error("drills.xp_award_failed", user_id=user_id, xp=xp, error=str(e))
            return 0
        return xp


def get_drill_store() -> DrillStore:
    """Get DrillStore instance."""
    return DrillStore(get_supabase_client())
