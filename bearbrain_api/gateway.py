"""
Chat gateway entrypoint.

Wires the policy, provider chain and fallback responder into a single
ChatRequest -> ChatResponse function used by the HTTP route.
"""

import logging
from typing import Optional

from .config import Settings, load_settings
from .gateway_types import GatewayResponse, ResponseOrigin, TutorRequest
from .logging_config import excerpt
from .models import build_provider_chain
from .orchestrator import FallbackOrchestrator
from .schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

# Global orchestrator instance
_orchestrator: Optional[FallbackOrchestrator] = None


def build_orchestrator(settings: Settings) -> FallbackOrchestrator:
    """Create an orchestrator with the provider chain described by settings."""
    return FallbackOrchestrator(
        providers=build_provider_chain(settings),
        timeout=settings.provider_timeout,
    )


def get_orchestrator() -> FallbackOrchestrator:
    """
    Get the process-wide orchestrator, building it from the environment on
    first use.
    """
    global _orchestrator

    if _orchestrator is None:
        _orchestrator = build_orchestrator(load_settings())

    return _orchestrator


def set_orchestrator(orchestrator: Optional[FallbackOrchestrator]) -> None:
    """
    Set a custom orchestrator (useful for testing). Passing None resets it.
    """
    global _orchestrator
    _orchestrator = orchestrator


def to_chat_response(result: GatewayResponse) -> ChatResponse:
    """Map an orchestrator result onto the wire response flags."""
    if result.origin == ResponseOrigin.RESTRICTED:
        return ChatResponse(reply=result.reply, restricted=True)
    if result.origin == ResponseOrigin.FALLBACK:
        return ChatResponse(reply=result.reply, fallback=True)
    return ChatResponse(reply=result.reply, ai=result.provider_id, model=result.model_id)


async def handle_chat(
    request: ChatRequest, orchestrator: Optional[FallbackOrchestrator] = None
) -> ChatResponse:
    """Classify and route one chat request."""
    orchestrator = orchestrator or get_orchestrator()
    tutor_request = TutorRequest.from_chat_request(request)

    engines = [p.provider_id for p in orchestrator.providers if p.is_configured]
    logger.info(
        "Chat request: subject=%s messages=%d engine=%s last=%r",
        tutor_request.subject_name,
        len(tutor_request.messages),
        engines[0] if engines else "fallback",
        excerpt(tutor_request.question),
    )

    result = await orchestrator.resolve(tutor_request)
    return to_chat_response(result)
