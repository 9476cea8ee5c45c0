"""Integration shortcuts."""

from .gemini_client import GeminiClient, GeminiClientError, build_gemini_client

__all__ = ["GeminiClient", "GeminiClientError", "build_gemini_client"]
