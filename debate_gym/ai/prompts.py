"""System prompts for AI opponents."""

from __future__ import annotations

DEFAULT_PERSONA_NAME = "a debater"
DEFAULT_DIFFICULTY = "Medium"
DEFAULT_STYLE = "Logical and precise."

SPARRING_SYSTEM_PROMPT = """You are playing the role of {name}.
Difficulty Level: {difficulty}.
Style: {style}
Your goal is to debate the user on the given topic. Keep responses concise (under 150 words)."""

FALLBACK_REPLY = "Interesting point."


def build_sparring_prompt(
    name: str | None = None,
    difficulty: str | None = None,
    style: str | None = None,
) -> str:
    return SPARRING_SYSTEM_PROMPT.format(
        name=name or DEFAULT_PERSONA_NAME,
        difficulty=difficulty or DEFAULT_DIFFICULTY,
        style=style or DEFAULT_STYLE,
    )


def to_gemini_role(role: str) -> str:
    """Gemini only knows ``user`` and ``model``; every non-user turn is the model's."""
    return "user" if role == "user" else "model"
