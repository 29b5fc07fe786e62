"""Gemini text model handle."""

from __future__ import annotations

from functools import lru_cache

import structlog
from google import genai
from google.genai import errors, types

from debate_gym.config import get_settings
from debate_gym.constants import DEBATE_CONSTANTS

logger = structlog.get_logger()


class AIServiceError(Exception):
    """The generative text service failed to produce a reply."""


class GeminiModel:
    """A configured Gemini model bound to one model id.

    Without an API key the handle still exists but ``configured`` is False
    and no SDK client is built.
    """

    def __init__(self, api_key: str, model: str) -> None:
        self.model = model
        self._client = genai.Client(api_key=api_key) if api_key else None

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def generate(
        self,
        turns: list[tuple[str, str]],
        system_instruction: str | None = None,
        max_output_tokens: int = DEBATE_CONSTANTS.GEMINI.MAX_TOKENS,
    ) -> str:
        """Generate the next model turn for a ``(role, text)`` history.

        Roles are Gemini roles: ``user`` or ``model``.
        """
        if self._client is None:
            raise AIServiceError("Gemini API key not configured")

        contents = [
            types.Content(role=role, parts=[types.Part(text=text)]) for role, text in turns
        ]
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=types.GenerateContentConfig(
                    max_output_tokens=max_output_tokens,
                    system_instruction=system_instruction,
                ),
            )
        except errors.APIError as e:
            logger.error("gemini.request_failed", model=self.model, code=e.code, error=str(e))
            raise AIServiceError(str(e)) from e
        return response.text or ""


@lru_cache
def get_gemini_model() -> GeminiModel:
    """Get cached Gemini model handle."""
    settings = get_settings()
    model = GeminiModel(settings.gemini_api_key, settings.gemini_model)
    logger.info("gemini.ready", model=model.model, configured=model.configured)
    return model
