"""
Runtime configuration.

Settings are read from environment variables (a local .env file is loaded
first) once at startup:
- OPENAI_API_KEY / OPENAI_MODEL / OPENAI_BASE_URL: primary provider
- GOOGLE_API_KEY / GEMINI_MODELS / GEMINI_BASE_URL: secondary provider
- PROVIDER_TIMEOUT_SECONDS: per-attempt timeout (defaults to 30)
- CORS_ORIGINS: comma-separated allowed origins
- LOG_LEVEL, APP_ENV
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

DEFAULT_OPENAI_MODELS = ("gpt-3.5-turbo",)
DEFAULT_GEMINI_MODELS = (
    "models/gemini-2.5-flash",
    "models/gemini-2.5-pro",
    "models/gemini-flash-latest",
)


def _split_list(value: Optional[str], default: tuple[str, ...]) -> tuple[str, ...]:
    if not value:
        return default
    items = tuple(item.strip() for item in value.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    openai_api_key: str = ""
    openai_models: tuple[str, ...] = DEFAULT_OPENAI_MODELS
    openai_base_url: str = "https://api.openai.com/v1"
    google_api_key: str = ""
    gemini_models: tuple[str, ...] = DEFAULT_GEMINI_MODELS
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    provider_timeout: float = 30.0
    cors_origins: tuple[str, ...] = field(default=("http://localhost:5173",))
    log_level: str = "INFO"
    app_env: str = "development"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        env_file: Optional path to a .env file (defaults to ./.env lookup)
    """
    load_dotenv(env_file)

    timeout_raw = os.getenv("PROVIDER_TIMEOUT_SECONDS", "30")
    try:
        timeout = float(timeout_raw)
    except ValueError:
        raise ValueError(f"PROVIDER_TIMEOUT_SECONDS must be a number, got {timeout_raw!r}") from None
    if timeout <= 0:
        raise ValueError("PROVIDER_TIMEOUT_SECONDS must be positive")

    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", "").strip(),
        openai_models=_split_list(os.getenv("OPENAI_MODEL"), DEFAULT_OPENAI_MODELS),
        openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
        google_api_key=os.getenv("GOOGLE_API_KEY", "").strip(),
        gemini_models=_split_list(os.getenv("GEMINI_MODELS"), DEFAULT_GEMINI_MODELS),
        gemini_base_url=os.getenv(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        ).rstrip("/"),
        provider_timeout=timeout,
        cors_origins=_split_list(os.getenv("CORS_ORIGINS"), ("http://localhost:5173",)),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        app_env=os.getenv("APP_ENV", "development"),
    )
