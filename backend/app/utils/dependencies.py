"""
Request-scoped helpers — API keys from headers, with server-side defaults.
"""

from __future__ import annotations

from fastapi import Header
from typing import Optional

from app.config import settings

PROVIDERS = ("groq", "google", "openai", "openrouter")


class APIKeys:
    """Per-request API keys; a header wins over the server default."""

    def __init__(
        self,
        groq: str | None = None,
        google: str | None = None,
        openai: str | None = None,
        openrouter: str | None = None,
    ):
        self.groq = groq or settings.groq_api_key
        self.google = google or settings.gemini_api_key
        self.openai = openai or settings.openai_api_key
        self.openrouter = openrouter or settings.openrouter_api_key

    def get_key(self, provider: str) -> str | None:
        """Get the key for a specific provider, None for unknown providers."""
        if provider not in PROVIDERS:
            return None
        return getattr(self, provider)


async def get_api_keys(
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
    x_google_key: Optional[str] = Header(None, alias="X-Google-Key"),
    x_openai_key: Optional[str] = Header(None, alias="X-OpenAI-Key"),
    x_openrouter_key: Optional[str] = Header(None, alias="X-OpenRouter-Key"),
) -> APIKeys:
    """FastAPI dependency that extracts API keys from request headers."""
    return APIKeys(
        groq=x_groq_key or None,
        google=x_google_key or None,
        openai=x_openai_key or None,
        openrouter=x_openrouter_key or None,
    )
