"""
Base Provider Adapter Interface

This module defines the interface every answer-generating backend implements.
Adapters turn a normalized TutorRequest into one HTTP call per attempt and
normalize whatever comes back into a ProviderResult.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from ..gateway_types import ProviderFailure, ProviderResult, ProviderSuccess, TutorRequest
from ..logging_config import excerpt

logger = logging.getLogger(__name__)


class EmptyReplyError(ValueError):
    """The provider answered but the reply held no text."""


class ProviderAdapter(ABC):
    """
    Abstract base class for provider adapters.

    Subclasses implement `_send`, which may raise; `call` is the error boundary
    that turns every fault into a ProviderFailure.
    """

    provider_id: str = "base"

    def __init__(
        self,
        api_key: str,
        models: tuple[str, ...],
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the adapter.

        Args:
            api_key: Provider credential; an empty key disables the adapter
            models: Model ids to try, in order
            timeout: Per-request timeout in seconds
            client: Optional pre-built HTTP client (useful for testing)
        """
        self._api_key = api_key
        self.models = tuple(models)
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def is_configured(self) -> bool:
        """Whether a credential is present and at least one model is listed."""
        return bool(self._api_key) and bool(self.models)

    async def call(self, request: TutorRequest, model: str) -> ProviderResult:
        """
        Make a single attempt against one model.

        Never raises for transport, status or payload problems.
        """
        try:
            reply = await self._send(request, model)
        except httpx.HTTPStatusError as e:
            reason = f"HTTP {e.response.status_code}{self._error_detail(e.response)}"
        except httpx.TimeoutException as e:
            reason = f"timeout ({e.__class__.__name__})"
        except httpx.HTTPError as e:
            reason = f"transport error ({e.__class__.__name__})"
        except EmptyReplyError:
            reason = "empty reply"
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            reason = f"unparseable reply ({e.__class__.__name__})"
        else:
            logger.info(
                "Provider %s/%s answered (question=%r)",
                self.provider_id, model, excerpt(request.question),
            )
            return ProviderSuccess(reply=reply, provider_id=self.provider_id, model_id=model)

        logger.warning(
            "Provider %s/%s failed: %s (question=%r)",
            self.provider_id, model, reason, excerpt(request.question),
        )
        return ProviderFailure(provider_id=self.provider_id, reason=reason, model_id=model)

    @abstractmethod
    async def _send(self, request: TutorRequest, model: str) -> str:
        """
        Issue the provider call and return the non-empty reply text.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status
            EmptyReplyError: If the reply has no text
            ValueError, KeyError, IndexError, TypeError, AttributeError: If the body is malformed
        """
        pass

    def _error_detail(self, response: httpx.Response) -> str:
        """Pull the provider's error message out of an error body, if any."""
        try:
            message = response.json().get("error", {}).get("message")
        except (ValueError, AttributeError):
            return ""
        if not message:
            return ""
        if self._api_key:
            message = str(message).replace(self._api_key, "***")
        return f": {excerpt(message, 120)}"

    def get_model_info(self) -> dict:
        """Get information about this adapter. Never includes the credential."""
        return {
            "name": self.__class__.__name__,
            "provider": self.provider_id,
            "models": list(self.models),
            "configured": self.is_configured,
        }

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
