"""Static lookup tables shared by the debate, gym and void features.

Every table is a frozen dataclass instance so values can be read as
``DEBATE_CONSTANTS.FACT_CHECK.DELAY_MS`` and never reassigned.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DAY_SECONDS = 24 * 60 * 60


# --- Debate ---


@dataclass(frozen=True)
class PersonaIdentity:
    id: str
    name: str
    role: str
    avatar_fallback: str


@dataclass(frozen=True)
class _Personas:
    SOCRATES: PersonaIdentity = PersonaIdentity(
        id="socrates",
        name="Socrates",
        role="Philosophical Challenger",
        avatar_fallback="S",
    )


@dataclass(frozen=True)
class _DebateMessages:
    INITIAL: str = "Welcome. I am Socrates. What truth do you seek to challenge today?"
    ERROR: str = "I apologize, but I'm having trouble processing that thought right now."
    THINKING: str = "Thinking..."
    VERIFYING: str = "Verifying..."


@dataclass(frozen=True)
class _FactCheck:
    DELAY_MS: int = 1500


@dataclass(frozen=True)
class _Gemini:
    MAX_TOKENS: int = 200


@dataclass(frozen=True)
class _DebateUI:
    MAX_INPUT_LENGTH: int = 1000


@dataclass(frozen=True)
class DebateConstants:
    PERSONA: _Personas = _Personas()
    DEFAULT_TOPIC: str = "General Debate"
    MESSAGES: _DebateMessages = _DebateMessages()
    FACT_CHECK: _FactCheck = _FactCheck()
    GEMINI: _Gemini = _Gemini()
    UI: _DebateUI = _DebateUI()


DEBATE_CONSTANTS = DebateConstants()


# --- Gym ---


@dataclass(frozen=True)
class _GymLimits:
    MAX_MESSAGE_LENGTH: int = 2000
    MAX_TOPIC_LENGTH: int = 200


@dataclass(frozen=True)
class GymConstants:
    LIMITS: _GymLimits = _GymLimits()
    MAX_SCORE: int = 100


GYM_CONSTANTS = GymConstants()


# --- Void ---


@dataclass(frozen=True)
class DefaultMask:
    name: str
    icon_type: str
    color: str


@dataclass(frozen=True)
class _MaskIconTypes:
    VENETIAN_MASK: str = "venetian_mask"
    USER: str = "user"
    GHOST: str = "ghost"
    SCAN_FACE: str = "scan_face"


@dataclass(frozen=True)
class _LengthBounds:
    MIN_LENGTH: int = 1
    MAX_LENGTH: int = 2000


@dataclass(frozen=True)
class _VoidValidation:
    MESSAGE_CONTENT: _LengthBounds = _LengthBounds()
    MASK_NAME: _LengthBounds = _LengthBounds(MIN_LENGTH=1, MAX_LENGTH=50)


@dataclass(frozen=True)
class _VoidUI:
    MESSAGES_PER_PAGE: int = 50
    MAX_MESSAGES_PER_PAGE: int = 100


@dataclass(frozen=True)
class VoidConstants:
    SESSION_DURATION_SECONDS: int = DAY_SECONDS
    MESSAGE_EXPIRATION_SECONDS: int = DAY_SECONDS
    VALIDATION: _VoidValidation = _VoidValidation()
    MASK_ICON_TYPES: _MaskIconTypes = _MaskIconTypes()
    DEFAULT_MASKS: tuple[DefaultMask, ...] = field(
        default=(
            DefaultMask(name="Neon Fox", icon_type="venetian_mask", color="#f97316"),
            DefaultMask(name="Cyber Monk", icon_type="user", color="#3b82f6"),
            DefaultMask(name="Null Pointer", icon_type="ghost", color="#a855f7"),
            DefaultMask(name="Glitch Face", icon_type="scan_face", color="#10b981"),
        )
    )
    UI: _VoidUI = _VoidUI()


VOID_CONSTANTS = VoidConstants()
