"""Training advice for the booking wizard."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from trainlikepros.integrations.gemini_client import GeminiClient, GeminiClientError

logger = logging.getLogger(__name__)

FALLBACK_ADVICE = (
    "I recommend starting with Hitting Fundamentals to build a strong base of "
    "confidence at the plate."
)

_PROMPT = (
    "You are a professional baseball and softball training consultant. Based on "
    'this player profile: "{profile}", provide a concise (max 3 sentences) '
    "recommendation on which type of lesson they should prioritize (Hitting, "
    "Pitching, or Fielding) and one specific drill they could start with."
)


@dataclass(slots=True, frozen=True)
class Advice:
    text: str
    source: str


def build_prompt(player_profile: str) -> str:
    return _PROMPT.format(profile=player_profile.strip())


async def get_training_advice(
    player_profile: str, *, client: GeminiClient | None
) -> Advice:
    """Ask the model for a lesson recommendation, falling back to a fixed tip."""
    if client is None:
        return Advice(text=FALLBACK_ADVICE, source="fallback")
    try:
        text = await client.generate_text(build_prompt(player_profile))
    except GeminiClientError:
        logger.exception("Training advice request failed; using fallback")
        return Advice(text=FALLBACK_ADVICE, source="fallback")
    return Advice(text=text, source="model")
