"""Pydantic request/response models for the API.

Request bodies use the web client's camelCase keys; snake_case is accepted too.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from debate_gym.db.models import DrillFeedback


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Void ---


class VoidSessionCreate(_Body):
    mask_id: str | None = Field(default=None, validation_alias=AliasChoices("maskId", "mask_id"))


class VoidSessionEnd(_Body):
    session_id: str | None = Field(
        default=None, validation_alias=AliasChoices("sessionId", "session_id")
    )


class VoidMessageCreate(_Body):
    session_id: str | None = Field(
        default=None, validation_alias=AliasChoices("sessionId", "session_id")
    )
    content: str | None = None


class VoidMessagePage(BaseModel):
    """One page of live void messages."""

    model_config = ConfigDict(populate_by_name=True)

    messages: list[dict[str, Any]]
    total: int
    has_more: bool = Field(alias="hasMore")


class VoidStatsResponse(BaseModel):
    activePhantoms: int
    activeSessions: int
    messagesToday: int
    totalMasks: int


class SuccessResponse(BaseModel):
    success: bool = True


# --- Drills ---


class DrillAttemptCreate(_Body):
    drill_id: str | None = Field(default=None, validation_alias=AliasChoices("drillId", "drill_id"))
    score: float | None = None
    feedback: DrillFeedback | None = None


# --- Sparring ---


class ChatTurn(BaseModel):
    role: str
    content: str


class SparringPersona(_Body):
    name: str | None = None
    difficulty_level: str | None = Field(
        default=None, validation_alias=AliasChoices("difficultyLevel", "difficulty_level")
    )
    system_prompt: str | None = Field(
        default=None, validation_alias=AliasChoices("systemPrompt", "system_prompt")
    )


class SparringRequest(_Body):
    messages: list[ChatTurn] | None = None
    persona: SparringPersona | None = None


class SparringReply(BaseModel):
    reply: str
