"""
Fallback Orchestrator

Resolves a chat request into a reply:
1. REJECTED: the policy finds the question off-topic -> redirect message
2. TRY_PROVIDER: each configured adapter, each of its models, in order
3. DONE: first non-empty reply wins
4. EXHAUSTED: every attempt failed -> templated fallback answer

Attempts run one after another; there is no fan-out.
"""

import asyncio
import logging
from typing import Iterator, Optional, Sequence

from .fallback import FallbackResponder
from .gateway_types import (
    GatewayResponse,
    ProviderFailure,
    ProviderResult,
    ResponseOrigin,
    TutorRequest,
)
from .models.base import ProviderAdapter
from .policy import SubjectPolicy

logger = logging.getLogger(__name__)


class FallbackOrchestrator:
    """Drives one request through the policy and the provider chain."""

    def __init__(
        self,
        providers: Sequence[ProviderAdapter],
        policy: Optional[SubjectPolicy] = None,
        fallback: Optional[FallbackResponder] = None,
        timeout: float = 30.0,
    ):
        """
        Args:
            providers: Adapters in priority order
            policy: Subject policy (defaults to SubjectPolicy())
            fallback: Last-resort responder (defaults to FallbackResponder())
            timeout: Upper bound in seconds for a single provider attempt
        """
        self.providers = tuple(providers)
        self.policy = policy or SubjectPolicy()
        self.fallback = fallback or FallbackResponder()
        self.timeout = timeout

    def attempts(self) -> Iterator[tuple[ProviderAdapter, str]]:
        """Yield (adapter, model) pairs in the order they will be tried."""
        for provider in self.providers:
            if not provider.is_configured:
                continue
            for model in provider.models:
                yield provider, model

    async def resolve(self, request: TutorRequest) -> GatewayResponse:
        """Produce a reply for the request. Never raises for provider faults."""
        classification = self.policy.classify(request.subject, request.question)
        if not classification.admissible:
            logger.info("Question redirected as off-topic for subject=%s", request.subject_name)
            return GatewayResponse(
                reply=classification.redirect_message,
                origin=ResponseOrigin.RESTRICTED,
            )

        for provider, model in self.attempts():
            result = await self._attempt(provider, model, request)
            if result.ok:
                return GatewayResponse(
                    reply=result.reply,
                    origin=ResponseOrigin.PROVIDER,
                    provider_id=result.provider_id,
                    model_id=result.model_id,
                )
            logger.info(
                "Attempt %s/%s failed (%s), moving on",
                result.provider_id, result.model_id, result.reason,
            )

        logger.info("All providers exhausted, using fallback responder for subject=%s", request.subject_name)
        return GatewayResponse(
            reply=self.fallback.generate(request.subject_name, request.question),
            origin=ResponseOrigin.FALLBACK,
        )

    async def _attempt(
        self, provider: ProviderAdapter, model: str, request: TutorRequest
    ) -> ProviderResult:
        try:
            result = await asyncio.wait_for(provider.call(request, model), timeout=self.timeout)
        except asyncio.TimeoutError:
            return ProviderFailure(
                provider_id=provider.provider_id,
                reason=f"no reply within {self.timeout:g}s",
                model_id=model,
            )
        except Exception as e:
            logger.exception("Provider %s/%s raised unexpectedly", provider.provider_id, model)
            return ProviderFailure(
                provider_id=provider.provider_id,
                reason=f"unexpected error ({e.__class__.__name__})",
                model_id=model,
            )

        if result.ok and not result.reply.strip():
            return ProviderFailure(
                provider_id=provider.provider_id, reason="empty reply", model_id=model
            )
        return result
