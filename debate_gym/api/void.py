"""The Void: anonymous masks, sessions, messages and live stats."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Query

from debate_gym.api.auth import AuthUser, get_current_user
from debate_gym.api.errors import INTERNAL_ERROR, ApiError, error_response
from debate_gym.api.models import (
    SuccessResponse,
    VoidMessageCreate,
    VoidMessagePage,
    VoidSessionCreate,
    VoidSessionEnd,
    VoidStatsResponse,
)
from debate_gym.constants import VOID_CONSTANTS
from debate_gym.db.client import DatabaseError
from debate_gym.db.void_store import VoidStore, get_void_store, utcnow
from debate_gym.utils.text import sanitize_text

logger = structlog.get_logger()

router = APIRouter()


# --- Masks ---


@router.get("/masks", response_model=None)
async def list_masks(store: VoidStore = Depends(get_void_store)) -> Any:
    """Active masks, oldest first."""
    try:
        masks = store.list_active_masks()
    except DatabaseError as e:
        logger.error("void.masks_query_failed", error=str(e), code=e.code)
        return error_response(500, "Failed to get masks")
    except Exception as e:
        logger.error("void.masks_failed", error=str(e), exc_info=e)
        return error_response(500, INTERNAL_ERROR)
    return masks or []


# --- Sessions ---


@router.post("/session")
async def create_session(
    data: VoidSessionCreate,
    user: AuthUser = Depends(get_current_user),
    store: VoidStore = Depends(get_void_store),
) -> dict[str, Any]:
    """Enter the void wearing the chosen mask."""
    if not data.mask_id:
        raise ApiError(400, "Mask ID is required")

    try:
        mask = store.get_active_mask(data.mask_id)
    except DatabaseError:
        mask = None
    if not mask:
        raise ApiError(400, "Invalid or inactive mask")

    try:
        existing = store.get_active_session(user.id)
    except DatabaseError as e:
        logger.warning("void.active_session_check_failed", user_id=user.id, error=str(e))
        existing = None
    if existing:
        raise ApiError(409, "You already have an active session")

    try:
        token = store.generate_session_token(user.id)
    except DatabaseError as e:
        logger.error("void.token_generation_failed", error=str(e))
        raise ApiError(500, "Failed to generate session token")

    try:
        return store.create_session(user.id, mask, token)
    except DatabaseError as e:
        logger.error("void.session_create_failed", error=str(e))
        raise ApiError(500, "Failed to create session")


@router.get("/session")
async def get_session(
    user: AuthUser = Depends(get_current_user),
    store: VoidStore = Depends(get_void_store),
) -> dict[str, Any]:
    """The caller's current active session."""
    try:
        session = store.get_active_session(user.id)
    except DatabaseError:
        session = None
    if not session:
        raise ApiError(404, "No active session found")
    return session


@router.delete("/session", response_model=SuccessResponse)
async def end_session(
    data: VoidSessionEnd,
    user: AuthUser = Depends(get_current_user),
    store: VoidStore = Depends(get_void_store),
) -> SuccessResponse:
    """Leave the void. Only the session's owner may end it."""
    if not data.session_id:
        raise ApiError(400, "Session ID is required")

    try:
        session = store.get_session(data.session_id)
    except DatabaseError:
        session = None
    if not session or session["user_id"] != user.id:
        raise ApiError(404, "Session not found")

    try:
        store.end_session(data.session_id)
    except DatabaseError as e:
        logger.error("void.session_end_failed", session_id=data.session_id, error=str(e))
        raise ApiError(500, "Failed to end session")
    return SuccessResponse()


# --- Messages ---


def _is_live(session: dict[str, Any]) -> bool:
    expires_at = datetime.fromisoformat(str(session["expires_at"]).replace("Z", "+00:00"))
    return bool(session["is_active"]) and expires_at > utcnow()


@router.post("/messages")
async def post_message(
    data: VoidMessageCreate,
    user: AuthUser = Depends(get_current_user),
    store: VoidStore = Depends(get_void_store),
) -> dict[str, Any]:
    """Post an anonymous message under the session's mask."""
    if not data.session_id or not data.content:
        raise ApiError(400, "Session ID and content are required")

    content = sanitize_text(data.content).strip()
    bounds = VOID_CONSTANTS.VALIDATION.MESSAGE_CONTENT
    if len(content) < bounds.MIN_LENGTH:
        raise ApiError(400, "Message cannot be empty")
    if len(content) > bounds.MAX_LENGTH:
        raise ApiError(400, f"Message must be less than {bounds.MAX_LENGTH} characters")

    try:
        session = store.get_session(data.session_id)
    except DatabaseError:
        session = None
    if not session:
        raise ApiError(404, "Session not found")
    if session["user_id"] != user.id:
        raise ApiError(403, "Unauthorized")
    if not _is_live(session):
        raise ApiError(400, "Session is expired or inactive")

    try:
        return store.post_message(session, content)
    except DatabaseError as e:
        logger.error("void.message_create_failed", session_id=session["id"], error=str(e))
        raise ApiError(500, "Failed to post message")


@router.get("/messages", response_model=VoidMessagePage)
async def list_messages(
    page: int = Query(default=1),
    limit: int = Query(default=VOID_CONSTANTS.UI.MESSAGES_PER_PAGE),
    store: VoidStore = Depends(get_void_store),
) -> VoidMessagePage:
    """Live messages, newest first, one page at a time."""
    if page < 1 or limit < 1 or limit > VOID_CONSTANTS.UI.MAX_MESSAGES_PER_PAGE:
        raise ApiError(400, "Invalid pagination parameters")

    offset = (page - 1) * limit
    try:
        messages = store.list_messages(offset=offset, limit=limit)
    except DatabaseError as e:
        logger.error("void.messages_query_failed", error=str(e))
        raise ApiError(500, "Failed to get messages")

    try:
        total = store.count_messages()
    except DatabaseError as e:
        logger.error("void.messages_count_failed", error=str(e))
        total = 0

    return VoidMessagePage(
        messages=messages,
        total=total,
        has_more=offset + len(messages) < total,
    )


# --- Stats ---


@router.get("/stats", response_model=VoidStatsResponse)
async def void_stats(store: VoidStore = Depends(get_void_store)) -> VoidStatsResponse:
    """Active phantom, session, message and mask counts."""
    return VoidStatsResponse(**store.stats())
