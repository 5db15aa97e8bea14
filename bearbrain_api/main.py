"""
BearBrain Tutor API - Main FastAPI Application

This is the entry point for the FastAPI backend. It provides the /api/chat
endpoint for the tutoring interface plus health and status endpoints.
"""

import logging
import time
from contextlib import AsyncExitStack, asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import load_settings
from .gateway import build_orchestrator, set_orchestrator
from .logging_config import setup_logging
from .routes import chat

settings = load_settings()
setup_logging(settings.log_level)
logger = logging.getLogger("bearbrain_api.main")

_started_at = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    orchestrator = build_orchestrator(settings)
    active = [p.provider_id for p in orchestrator.providers if p.is_configured]

    async with AsyncExitStack() as stack:
        for provider in orchestrator.providers:
            await stack.enter_async_context(provider)
        set_orchestrator(orchestrator)
        logger.info("Starting BearBrain Tutor API (providers: %s)", ", ".join(active) or "fallback only")
        yield
        logger.info("Shutting down BearBrain Tutor API")

    set_orchestrator(None)


app = FastAPI(
    title="BearBrain Tutor API",
    description="Subject-scoped tutoring chat with AI provider fallback",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every incoming request."""
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


app.include_router(chat.router)


@app.get("/")
async def root():
    """Root endpoint - API status check."""
    return {
        "name": "BearBrain Tutor API",
        "version": __version__,
        "status": "running",
    }


@app.get("/api/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "uptime": round(time.monotonic() - _started_at, 3),
        "env": settings.app_env,
    }
