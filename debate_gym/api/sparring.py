"""AI sparring endpoint. One Gemini turn against a chosen persona."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from debate_gym.ai.gemini import AIServiceError, GeminiModel, get_gemini_model
from debate_gym.ai.prompts import FALLBACK_REPLY, build_sparring_prompt, to_gemini_role
from debate_gym.api.errors import ApiError
from debate_gym.api.models import SparringReply, SparringRequest
from debate_gym.constants import DEBATE_CONSTANTS

logger = structlog.get_logger()

router = APIRouter()


@router.post("/sparring", response_model=SparringReply)
async def spar(
    data: SparringRequest,
    model: GeminiModel = Depends(get_gemini_model),
) -> SparringReply:
    """Reply to the transcript in character."""
    if not model.configured:
        raise ApiError(500, "Gemini API key not configured")

    if data.messages is None:
        raise ApiError(400, "Invalid messages format")

    persona = data.persona
    system_prompt = build_sparring_prompt(
        name=persona.name if persona else None,
        difficulty=persona.difficulty_level if persona else None,
        style=persona.system_prompt if persona else None,
    )
    turns = [(to_gemini_role(m.role), m.content) for m in data.messages]

    try:
        text = await model.generate(
            turns,
            system_instruction=system_prompt,
            max_output_tokens=DEBATE_CONSTANTS.GEMINI.MAX_TOKENS,
        )
    except AIServiceError as e:
        logger.error("sparring.ai_unavailable", error=str(e))
        raise ApiError(502, "AI Service Unavailable")

    return SparringReply(reply=text or FALLBACK_REPLY)
