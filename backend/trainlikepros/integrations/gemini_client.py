"""Thin async wrapper around the Gemini ``generateContent`` REST endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from trainlikepros.core.config import get_settings


class GeminiClientError(RuntimeError):
    """Raised when the text-generation call fails or returns no text."""


@dataclass(slots=True, frozen=True)
class GenerationConfig:
    temperature: float = 0.7
    top_p: float = 0.8

    def as_payload(self) -> dict[str, float]:
        return {"temperature": self.temperature, "topP": self.top_p}


class GeminiClient:
    """Generate short texts with a hosted Gemini model."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def model(self) -> str:
        return self._model

    def _endpoint(self) -> str:
        return f"{self._base_url}/models/{self._model}:generateContent"

    @staticmethod
    def _extract_text(body: dict[str, Any]) -> str:
        candidates = body.get("candidates") or []
        for candidate in candidates:
            parts = (candidate.get("content") or {}).get("parts") or []
            text = "".join(part.get("text", "") for part in parts).strip()
            if text:
                return text
        raise GeminiClientError("Response contained no text candidates")

    async def generate_text(
        self, prompt: str, *, config: GenerationConfig | None = None
    ) -> str:
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": (config or GenerationConfig()).as_payload(),
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._endpoint(),
                    params={"key": self._api_key},
                    json=payload,
                )
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise GeminiClientError(f"Gemini request failed: {exc}") from exc
        try:
            body = response.json()
        except ValueError as exc:
            raise GeminiClientError("Gemini returned a non-JSON body") from exc
        return self._extract_text(body)


def build_gemini_client(
    transport: httpx.AsyncBaseTransport | None = None,
) -> GeminiClient | None:
    """Return a configured client, or ``None`` when no API key is set."""
    settings = get_settings()
    if not settings.gemini_api_key:
        return None
    return GeminiClient(
        settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.advice_timeout_seconds,
        transport=transport,
    )
