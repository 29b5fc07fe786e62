"""FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debate_gym.ai.gemini import get_gemini_model
from debate_gym.api.errors import register_error_handlers
from debate_gym.api.router import api_router
from debate_gym.config import get_settings
from debate_gym.db.client import get_supabase_client
from debate_gym.utils.logging import setup_logging

logger = structlog.get_logger()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("debate_gym.starting", port=settings.port)

    # Both service handles are built once and shared by every request
    get_supabase_client()
    get_gemini_model()

    yield

    logger.info("debate_gym.shutdown")


app = FastAPI(
    title="Debate Gym",
    description="Backend for the debate gym, dojo and the anonymous Void",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Service info endpoint."""
    return {"service": "debate-gym", "version": VERSION}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "debate-gym", "version": VERSION}
