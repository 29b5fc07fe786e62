"""Text utilities for escaping and validation of user-submitted text."""

from __future__ import annotations

from dataclasses import dataclass

from debate_gym.constants import GYM_CONSTANTS

# Order matters: "&" first so later entities are not double-escaped.
_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("/", "&#x2F;"),
    ("\\", "&#x5C;"),
    ("`", "&#x60;"),
]


def sanitize_text(text: str | None) -> str:
    """Escape characters that are significant in HTML and JS string contexts."""
    if not text:
        return ""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


@dataclass
class ValidationResult:
    is_valid: bool
    error: str | None = None
    sanitized: str | None = None


def validate_message(
    message: str, max_length: int = GYM_CONSTANTS.LIMITS.MAX_MESSAGE_LENGTH
) -> ValidationResult:
    """Trim a message and check it is non-empty and within ``max_length``."""
    trimmed = message.strip()
    if not trimmed:
        return ValidationResult(False, error="Message cannot be empty")
    if len(trimmed) > max_length:
        return ValidationResult(False, error=f"Message must be {max_length} characters or less")
    return ValidationResult(True, sanitized=trimmed)
