"""
OpenAI Provider Adapter

Primary provider. Uses the Chat Completions API with a detailed, heavily
formatted tutoring prompt and sends the full chat history.
"""

from typing import Optional

import httpx

from ..gateway_types import TutorRequest
from .base import EmptyReplyError, ProviderAdapter


class OpenAIAdapter(ProviderAdapter):
    """OpenAI Chat Completions adapter."""

    provider_id = "openai"

    def __init__(
        self,
        api_key: str,
        models: tuple[str, ...] = ("gpt-3.5-turbo",),
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
        max_tokens: int = 1200,
        temperature: float = 0.7,
    ):
        super().__init__(api_key, models, timeout=timeout, client=client)
        self.base_url = base_url.rstrip("/")
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def _send(self, request: TutorRequest, model: str) -> str:
        messages = [{"role": "system", "content": self._build_system_prompt(request.subject_name)}]
        messages.extend({"role": m.role, "content": m.content} for m in request.messages)

        response = await self.client.post(
            f"{self.base_url}/chat/completions",
            headers={"Authorization": f"Bearer {self._api_key}"},
            json={
                "model": model,
                "messages": messages,
                "max_tokens": self.max_tokens,
                "temperature": self.temperature,
            },
        )
        response.raise_for_status()
        data = response.json()

        reply = data["choices"][0]["message"]["content"]
        if not isinstance(reply, str) or not reply.strip():
            raise EmptyReplyError()
        return reply.strip()

    def _build_system_prompt(self, subject_name: str) -> str:
        """Build the comprehensive tutor prompt for the given subject."""
        return f"""You are BearBrain.ai, a comprehensive and detailed tutor specialized in {subject_name}.

IMPORTANT: Only answer questions related to {subject_name}. If asked about other subjects, politely redirect them to use the appropriate subject tab.

FORMAT YOUR RESPONSES FOR EASY READING:
- Use clear headings (## Main Topic, ### Subtopic)
- Break information into bullet points using •
- Add blank lines between sections for breathing room
- Use numbered steps for processes (1., 2., 3.)
- Keep paragraphs short and digestible (2-3 sentences max)
- Use **bold** for key concepts and important terms
- Add proper spacing between different topics

Your responses should include:
1. **Clear Definition** - What is the concept?
2. **Step-by-Step Explanation** - How does it work?
3. **Real-World Examples** - Where do we see this?
4. **Key Formulas/Principles** (if relevant) - Important equations
5. **Common Misconceptions** - What students often get wrong
6. **Study Tips** - How to remember and practice this
7. **Practice Question** - A simple problem to try

Keep everything clean, well-spaced, and easy to scan."""
