"""Database models / type definitions.

These mirror the Supabase tables for type safety in Python code. Rows come
back from PostgREST in snake_case; the camelCase names used by the web
client are accepted as aliases.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Discriminator, Field, Tag


class InvalidTransition(ValueError):
    """A status change that the record's lifecycle does not allow."""


def _alias(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class _Row(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Debates ---

DebateStatus = Literal["active", "completed", "archived"]
FactCheckStatus = Literal["pending", "verified", "disputed"]


class DebateMetrics(BaseModel):
    turns: int = Field(default=0, ge=0)
    avg_steelman: float = 0.0


class DebateSession(_Row):
    """Row from the debates table."""

    id: str
    user_id: str
    persona_id: str
    topic: str
    status: DebateStatus = "active"
    metrics: DebateMetrics = Field(default_factory=DebateMetrics)
    created_at: datetime
    updated_at: datetime

    def transition(self, status: DebateStatus) -> DebateSession:
        """Move an active debate to a terminal status."""
        if self.status != "active" or status not in ("completed", "archived"):
            raise InvalidTransition(f"Debate cannot move from '{self.status}' to '{status}'")
        return self.model_copy(update={"status": status})


class MessageMetadata(BaseModel):
    """Known annotations on a debate message; unknown keys are kept as-is."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    steelman: float | None = None
    fact_check: FactCheckStatus | None = Field(
        default=None, validation_alias=_alias("fact_check", "factCheck")
    )


class DebateMessage(_Row):
    """Row from the debate_messages table."""

    id: int
    session_id: str
    sender_id: str | None = None
    sender_role: Literal["user", "ai"]
    content: str
    metadata: MessageMetadata = Field(default_factory=MessageMetadata)
    created_at: datetime


# --- Gym ---


class FallacyDrillContent(BaseModel):
    kind: Literal["fallacy"] = "fallacy"
    argument: str
    options: list[str]
    answer: str
    explanation: str | None = None


class RebuttalDrillContent(BaseModel):
    kind: Literal["rebuttal"] = "rebuttal"
    prompt: str
    time_limit_seconds: int = 60


DrillContent = Annotated[
    Union[FallacyDrillContent, RebuttalDrillContent], Field(discriminator="kind")
]


class GymDrill(_Row):
    """Row from the gym_drills table."""

    id: str
    type: Literal["fallacy", "rebuttal"]
    title: str
    difficulty: Literal["Beginner", "Intermediate", "Advanced"]
    content: DrillContent
    xp_reward: int = Field(validation_alias=_alias("xp_reward", "xpReward"))


class FallacyFeedback(BaseModel):
    kind: Literal["fallacy"] = "fallacy"
    selected: str
    correct: bool


class RebuttalFeedback(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["rebuttal"] = "rebuttal"
    rebuttal_text: str = Field(validation_alias=_alias("rebuttal_text", "rebuttalText"))
    critique: str | None = None


class NoteFeedback(BaseModel):
    """Feedback of no known shape, kept as sent."""

    model_config = ConfigDict(extra="allow")

    kind: Literal["note"] = "note"


def _feedback_kind(value: Any) -> str | None:
    """Explicit ``kind`` wins; older clients omit it, so infer it from the fields."""
    if not isinstance(value, dict):
        return getattr(value, "kind", None)
    if "kind" in value:
        return value["kind"]
    if "rebuttal_text" in value or "rebuttalText" in value:
        return "rebuttal"
    if "selected" in value:
        return "fallacy"
    return "note"


DrillFeedback = Annotated[
    Union[
        Annotated[FallacyFeedback, Tag("fallacy")],
        Annotated[RebuttalFeedback, Tag("rebuttal")],
        Annotated[NoteFeedback, Tag("note")],
    ],
    Discriminator(_feedback_kind),
]


class DrillAttempt(_Row):
    """Row from the user_drill_attempts table."""

    id: str
    user_id: str = Field(validation_alias=_alias("user_id", "userId"))
    drill_id: str = Field(validation_alias=_alias("drill_id", "drillId"))
    score: float
    feedback: DrillFeedback | None = None
    created_at: datetime = Field(validation_alias=_alias("created_at", "createdAt"))


# --- Sparring ---


class AIPersona(_Row):
    id: str
    name: str
    avatar_url: str | None = Field(default=None, validation_alias=_alias("avatar_url", "avatarUrl"))
    system_prompt: str = Field(validation_alias=_alias("system_prompt", "systemPrompt"))
    difficulty_level: Literal["Easy", "Medium", "Hard", "Expert"] = Field(
        validation_alias=_alias("difficulty_level", "difficultyLevel")
    )


class TranscriptTurn(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class SparringSession(_Row):
    id: str
    user_id: str = Field(validation_alias=_alias("user_id", "userId"))
    persona_id: str | None = Field(default=None, validation_alias=_alias("persona_id", "personaId"))
    topic: str
    status: Literal["active", "completed", "abandoned"] = "active"
    transcript: list[TranscriptTurn] = Field(default_factory=list)
    created_at: datetime = Field(validation_alias=_alias("created_at", "createdAt"))
    updated_at: datetime = Field(validation_alias=_alias("updated_at", "updatedAt"))

    def append_turn(self, role: str, content: str) -> SparringSession:
        """Return a copy with one more turn; only active sessions accept turns."""
        if self.status != "active":
            raise InvalidTransition(f"Cannot add turns to a {self.status} session")
        turn = TranscriptTurn(role=role, content=content)
        return self.model_copy(update={"transcript": [*self.transcript, turn]})


# --- Prediction market ---

WagerStatus = Literal["pending", "won", "lost", "refunded"]


class Wager(_Row):
    id: str
    user_id: str = Field(validation_alias=_alias("user_id", "userId"))
    debate_id: str = Field(validation_alias=_alias("debate_id", "debateId"))
    amount: float
    prediction_side: Literal["PRO", "CON"] = Field(
        validation_alias=_alias("prediction_side", "predictionSide")
    )
    status: WagerStatus = "pending"
    payout: float | None = None
    created_at: datetime = Field(validation_alias=_alias("created_at", "createdAt"))

    def resolve(self, status: WagerStatus, payout: float | None = None) -> Wager:
        """Settle a pending wager. A wager is resolved exactly once."""
        if self.status != "pending":
            raise InvalidTransition(f"Wager {self.id} is already {self.status}")
        if status == "pending":
            raise InvalidTransition("A wager cannot be resolved back to pending")
        return self.model_copy(update={"status": status, "payout": payout})


# --- The Void ---


class VoidMask(BaseModel):
    """Row from the void_masks table. Columns beyond these are passed through."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None
    icon_type: str | None = None
    color: str | None = None
    is_active: bool
    created_at: datetime


class VoidSession(BaseModel):
    """Row from the void_sessions table."""

    id: str
    user_id: str
    mask_id: str
    mask_name: str
    session_token: str
    expires_at: datetime
    is_active: bool
    message_count: int = 0
    created_at: datetime | None = None


class VoidMessage(BaseModel):
    """Row from the void_messages table."""

    id: Any
    session_id: str
    mask_name: str
    content: str
    expires_at: datetime
    is_deleted: bool = False
    created_at: datetime | None = None
