"""
Pydantic schemas for the BearBrain Tutor API.

These schemas describe the JSON exchanged with the chat client.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single turn of the conversation."""

    role: Literal["user", "assistant"] = Field(..., description="Who wrote the message")
    content: str = Field(..., description="Message text")

    model_config = {"frozen": True}


class ChatRequest(BaseModel):
    """Request schema for the /api/chat endpoint."""

    subject: str = Field("General", description="Display name of the selected subject")
    messages: list[ChatMessage] = Field(
        ...,
        min_length=1,
        description="Chronological chat history; the last message is the question",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "subject": "Physics",
                    "messages": [{"role": "user", "content": "Explain Newton's second law"}],
                }
            ]
        }
    }


class ChatResponse(BaseModel):
    """
    Response schema for the /api/chat endpoint.

    Flags are only serialized when set; a missing flag means false/unset.
    """

    reply: str = Field(..., description="The tutor's reply")
    fallback: Optional[bool] = Field(None, description="Reply came from the built-in fallback")
    restricted: Optional[bool] = Field(None, description="Question was redirected as off-topic")
    ai: Optional[str] = Field(None, description="Provider that produced the reply")
    model: Optional[str] = Field(None, description="Provider model that produced the reply")

    model_config = {
        "protected_namespaces": (),
        "json_schema_extra": {
            "examples": [
                {
                    "reply": "**Newton's Second Law**\nForce equals mass times acceleration...",
                    "ai": "gemini",
                    "model": "models/gemini-2.5-flash",
                }
            ]
        },
    }
