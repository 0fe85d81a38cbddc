from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "ATS Resume Scorer"
    debug: bool = True
    log_level: str = "INFO"

    # CORS
    frontend_url: str = "http://localhost:3000"

    # LLM API Keys (provided by user per-request via headers, these are optional server defaults)
    groq_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None

    # Enhancement defaults
    default_provider: str = "google"
    default_model_key: str = "gemini-2.0-flash"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "groq": {
        "llama-3.3-70b": {
            "name": "LLaMA 3.3 70B",
            "model_id": "groq/llama-3.3-70b-versatile",
            "description": "Best all-rounder for bullet rewriting",
            "recommended": True,
        },
    },
    "google": {
        "gemini-2.0-flash": {
            "name": "Gemini 2.0 Flash",
            "model_id": "gemini/gemini-2.0-flash",
            "description": "Fast, keyword-aware rewrites",
            "recommended": True,
        },
        "gemini-1.5-flash": {
            "name": "Gemini 1.5 Flash",
            "model_id": "gemini/gemini-1.5-flash",
            "description": "Fallback when 2.0 hits rate limits",
            "recommended": False,
        },
    },
    "openai": {
        "gpt-4o-mini": {
            "name": "GPT-4o mini",
            "model_id": "openai/gpt-4o-mini",
            "description": "Concise, ATS-friendly phrasing",
            "recommended": True,
        },
        "gpt-4o": {
            "name": "GPT-4o",
            "model_id": "openai/gpt-4o",
            "description": "Highest quality rewrites",
            "recommended": False,
        },
    },
    "openrouter": {
        "deepseek-r1-0528": {
            "name": "DeepSeek R1 0528",
            "model_id": "openrouter/deepseek/deepseek-r1-0528:free",
            "description": "Free tier, slower",
            "recommended": False,
        },
    },
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "enhance_bullets": {"temperature": 0.7, "max_tokens": 500},
    "enhance_text": {"temperature": 0.5, "max_tokens": 600},
    "improvement_suggestions": {"temperature": 0.4, "max_tokens": 700},
}
