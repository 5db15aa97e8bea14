"""
Chat route handler.

This module handles the /api/chat endpoint. Off-topic questions and provider
outages both come back as normal replies; only unexpected faults produce an
error status.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..gateway import handle_chat
from ..schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    responses={500: {"description": "Server error"}},
)
async def chat(request: ChatRequest):
    """
    Process a tutoring chat request.

    This endpoint:
    1. Checks if the question fits the selected subject
    2. Tries the configured AI providers in priority order
    3. Falls back to a built-in study guide if every provider fails
    """
    try:
        return await handle_chat(request)
    except Exception:
        logger.exception("Chat error")
        return JSONResponse(status_code=500, content={"error": "Server error"})
