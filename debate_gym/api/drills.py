"""Gym drill attempt endpoints."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Depends

from debate_gym.api.auth import AuthUser, get_current_user
from debate_gym.api.errors import ApiError
from debate_gym.api.models import DrillAttemptCreate
from debate_gym.constants import GYM_CONSTANTS
from debate_gym.db.client import DatabaseError
from debate_gym.db.drill_store import DrillStore, get_drill_store
from debate_gym.db.models import RebuttalFeedback
from debate_gym.utils.text import validate_message

logger = structlog.get_logger()

router = APIRouter()


@router.post("/attempt")
async def submit_attempt(
    data: DrillAttemptCreate,
    user: AuthUser = Depends(get_current_user),
    store: DrillStore = Depends(get_drill_store),
) -> dict[str, Any]:
    """Record a drill attempt and award XP in proportion to the score."""
    if not data.drill_id:
        raise ApiError(400, "Drill ID is required and must be a string")

    if data.score is None or not 0 <= data.score <= GYM_CONSTANTS.MAX_SCORE:
        raise ApiError(400, f"Score must be a number between 0 and {GYM_CONSTANTS.MAX_SCORE}")

    feedback = data.feedback
    if isinstance(feedback, RebuttalFeedback):
        result = validate_message(feedback.rebuttal_text)
        if not result.is_valid:
            raise ApiError(400, f"Invalid rebuttal: {result.error}")
        feedback = feedback.model_copy(update={"rebuttal_text": result.sanitized})

    try:
        drill = store.get_drill(data.drill_id)
    except DatabaseError:
        drill = None
    if not drill:
        raise ApiError(404, "Drill not found")

    try:
        attempt = store.record_attempt(
            user_id=user.id,
            drill_id=data.drill_id,
            score=data.score,
            feedback=feedback.model_dump() if feedback else None,
        )
    except DatabaseError as e:
        logger.error("drills.attempt_failed", drill_id=data.drill_id, error=str(e))
        raise ApiError(500, "Failed to submit drill attempt")

    store.award_xp(user.id, data.score, drill.get("xp_reward") or 0)
    return attempt
