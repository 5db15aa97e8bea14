"""
Gemini Provider Adapter

Secondary provider. Calls Google's generateContent endpoint with a short,
bullet-point tutoring prompt. Several interchangeable models are configured
and tried in order by the orchestrator.

The API key is sent in the x-goog-api-key header so it never shows up in
request URLs or in the exception messages that embed them.
"""

from typing import Optional

import httpx

from ..gateway_types import TutorRequest
from .base import EmptyReplyError, ProviderAdapter


class GeminiAdapter(ProviderAdapter):
    """Google Gemini adapter."""

    provider_id = "gemini"

    def __init__(
        self,
        api_key: str,
        models: tuple[str, ...] = (
            "models/gemini-2.5-flash",
            "models/gemini-2.5-pro",
            "models/gemini-flash-latest",
        ),
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        max_output_tokens: int = 1024,
        temperature: float = 0.7,
    ):
        super().__init__(api_key, models, timeout=timeout, client=client)
        self.base_url = base_url.rstrip("/")
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature

    async def _send(self, request: TutorRequest, model: str) -> str:
        response = await self.client.post(
            f"{self.base_url}/{model}:generateContent",
            headers={"x-goog-api-key": self._api_key},
            json={
                "contents": [{"parts": [{"text": self._build_prompt(request)}]}],
                "generationConfig": {
                    "temperature": self.temperature,
                    "maxOutputTokens": self.max_output_tokens,
                },
            },
        )
        response.raise_for_status()
        data = response.json()

        parts = data["candidates"][0]["content"]["parts"]
        reply = "".join(part.get("text", "") for part in parts)
        if not reply.strip():
            raise EmptyReplyError()
        return reply.strip()

    def _build_prompt(self, request: TutorRequest) -> str:
        """Combine the system prompt with the joined chat history."""
        history = "\n".join(m.content for m in request.messages)
        return f"{self._build_system_prompt(request.subject_name)}\n\nUser question: {history}"

    def _build_system_prompt(self, subject_name: str) -> str:
        """Build the concise tutor prompt for the given subject."""
        return f"""You are BearBrain.ai, a friendly and clear tutor specialized in {subject_name}.

IMPORTANT: Only answer questions related to {subject_name}. If asked about other subjects, politely redirect them.

Response Format Requirements:
- Keep explanations SHORT and EASY-TO-UNDERSTAND
- Use BULLET POINTS (•) for main points
- Write in simple, clear language
- Structure your response like this:

**Topic Name**
Brief 1-2 sentence introduction.

**Main Points:**
• First key point - simple explanation
• Second key point - simple explanation
• Third key point - simple explanation
• Fourth key point - simple explanation

**Why it matters:**
Quick sentence about importance or real-world application.

Keep responses concise but informative. Focus on the most important concepts students need to know."""
