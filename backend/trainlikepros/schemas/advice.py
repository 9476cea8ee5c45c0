"""Training advice schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class AdviceRequest(BaseModel):
    player_profile: str = Field(min_length=1, max_length=2000)


class AdviceResponse(BaseModel):
    advice: str
    source: Literal["model", "fallback"]
