"""
Provider adapters package.

Each adapter wraps one external answer-generating backend. The chain order
returned by `build_provider_chain` is the priority order the orchestrator uses.
"""

from typing import Optional

import httpx

from ..config import Settings
from .base import EmptyReplyError, ProviderAdapter
from .gemini import GeminiAdapter
from .openai import OpenAIAdapter


def build_provider_chain(
    settings: Settings, client: Optional[httpx.AsyncClient] = None
) -> list[ProviderAdapter]:
    """
    Build the adapters in priority order: OpenAI first, then Gemini.

    Adapters without a credential are still returned; the orchestrator skips
    them without counting them as failures.
    """
    return [
        OpenAIAdapter(
            api_key=settings.openai_api_key,
            models=settings.openai_models,
            base_url=settings.openai_base_url,
            timeout=settings.provider_timeout,
            client=client,
        ),
        GeminiAdapter(
            api_key=settings.google_api_key,
            models=settings.gemini_models,
            base_url=settings.gemini_base_url,
            timeout=settings.provider_timeout,
            client=client,
        ),
    ]


__all__ = [
    "EmptyReplyError",
    "GeminiAdapter",
    "OpenAIAdapter",
    "ProviderAdapter",
    "build_provider_chain",
]
