"""
LLM Service — unified interface to all providers via LiteLLM.

Responsibilities:
  • Accept an API key + model identifier per-request (keys from frontend, not stored server-side)
  • Route to the correct provider (Groq, Google, OpenAI, OpenRouter) via LiteLLM
  • Expose the model registry to the frontend

Callers own failure handling: this module logs and re-raises.
"""

from __future__ import annotations

import logging
from typing import Any

import litellm
from litellm import acompletion

from app.config import MODELS, PROMPT_CONFIG

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs in dev
litellm.suppress_debug_info = True

# Maps our provider key → the env var name that LiteLLM expects
PROVIDER_KEY_ENV = {
    "groq": "GROQ_API_KEY",
    "google": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}


def resolve_model_id(provider: str, model_key: str) -> str:
    """Look up the LiteLLM model_id from our registry."""
    provider_models = MODELS.get(provider)
    if not provider_models:
        raise ValueError(f"Unknown provider: {provider}")
    model_entry = provider_models.get(model_key)
    if not model_entry:
        raise ValueError(f"Unknown model: {model_key} for provider {provider}")
    return model_entry["model_id"]


# ── Core Completion ──────────────────────────────────────────────────────────


async def complete(
    *,
    provider: str,
    model_key: str,
    api_key: str,
    messages: list[dict[str, str]],
    prompt_name: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> str:
    """
    Send one chat completion request via LiteLLM. No retries.

    Args:
        provider:    "groq" | "google" | "openai" | "openrouter"
        model_key:   Key from MODELS registry (e.g. "gemini-2.0-flash")
        api_key:     User's API key for the provider
        messages:    OpenAI-format message list
        prompt_name: Optional key into PROMPT_CONFIG for default temp/tokens
        temperature: Override temperature (takes precedence over prompt_name)
        max_tokens:  Override max_tokens (takes precedence over prompt_name)

    Returns:
        The assistant's response text ("" when the provider returns no content).
    """
    model_id = resolve_model_id(provider, model_key)

    config = PROMPT_CONFIG.get(prompt_name, {}) if prompt_name else {}
    temp = temperature if temperature is not None else config.get("temperature", 0.5)
    tokens = max_tokens if max_tokens is not None else config.get("max_tokens", 500)

    kwargs: dict[str, Any] = {
        "model": model_id,
        "messages": messages,
        "temperature": temp,
        "max_tokens": tokens,
        "api_key": api_key,
    }

    logger.info(f"LLM call: provider={provider} model={model_id} prompt={prompt_name} temp={temp}")

    try:
        response = await acompletion(**kwargs)
        content = response.choices[0].message.content or ""
        logger.info(f"LLM response: {len(content)} chars")
        return content
    except Exception as e:
        logger.error(f"LLM error ({provider}/{model_key}): {e}")
        raise


# ── Provider Info ────────────────────────────────────────────────────────────


def get_providers_info() -> list[dict[str, Any]]:
    """
    Provider and model metadata for the frontend.
    No secrets are exposed.
    """
    providers = []
    for provider_key, models in MODELS.items():
        providers.append({
            "id": provider_key,
            "models": [
                {
                    "key": model_key,
                    "name": info["name"],
                    "description": info["description"],
                    "recommended": info.get("recommended", False),
                }
                for model_key, info in models.items()
            ],
            "keyEnvVar": PROVIDER_KEY_ENV.get(provider_key, ""),
        })
    return providers
