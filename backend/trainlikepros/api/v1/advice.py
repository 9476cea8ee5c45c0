"""Training advice endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from trainlikepros.api import deps
from trainlikepros.integrations.gemini_client import GeminiClient
from trainlikepros.schemas.advice import AdviceRequest, AdviceResponse
from trainlikepros.services import advice_service

router = APIRouter()


@router.post("", response_model=AdviceResponse, summary="Lesson recommendation")
async def request_advice(
    payload: AdviceRequest,
    client: Annotated[GeminiClient | None, Depends(deps.get_gemini_client)],
) -> AdviceResponse:
    advice = await advice_service.get_training_advice(
        payload.player_profile, client=client
    )
    return AdviceResponse(advice=advice.text, source=advice.source)
