"""
Type definitions for the chat gateway.

This module contains the request-scoped dataclasses passed between the policy,
the provider adapters and the orchestrator. None of them outlive a request.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .schemas import ChatMessage, ChatRequest
from .subjects import Subject


class ResponseOrigin(str, Enum):
    """Where a reply came from."""

    PROVIDER = "provider"
    FALLBACK = "fallback"
    RESTRICTED = "restricted"


@dataclass(frozen=True)
class TutorRequest:
    """Normalized chat request handed to the orchestrator and adapters."""

    subject_name: str
    subject: Optional[Subject]
    messages: tuple[ChatMessage, ...]

    @property
    def question(self) -> str:
        """The last message in the history, i.e. the question under evaluation."""
        if not self.messages:
            return ""
        return self.messages[-1].content

    @classmethod
    def from_chat_request(cls, request: ChatRequest) -> "TutorRequest":
        subject = Subject.from_name(request.subject)
        return cls(
            subject_name=subject.display_name if subject else request.subject,
            subject=subject,
            messages=tuple(request.messages),
        )


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of the subject policy check."""

    admissible: bool
    redirect_message: str = ""


@dataclass(frozen=True)
class ProviderSuccess:
    reply: str
    provider_id: str
    model_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ProviderFailure:
    """A transient provider fault. Never raised, only returned."""

    provider_id: str
    reason: str
    model_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False


ProviderResult = Union[ProviderSuccess, ProviderFailure]


@dataclass(frozen=True)
class GatewayResponse:
    """Final answer produced by the orchestrator."""

    reply: str
    origin: ResponseOrigin
    provider_id: Optional[str] = None
    model_id: Optional[str] = None
