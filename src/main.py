"""Movie Bot - Telegram keyword movie recommendations.

FastAPI application entry point with lifespan management.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from pydantic import BaseModel

from src.core.config import settings
from src.core.logging import setup_logging
from src.core.telegram import telegram_client
from src.services.movie_finder import router as movie_finder_router
from src.services.movie_finder import update_handler

# Setup logging first
setup_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown."""
    logger.info(f"Starting {settings.app_name}...")
    if not settings.telegram_bot_token:
        logger.warning("TELEGRAM_BOT_TOKEN is not set, replies will be rejected")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="Movie Bot",
    description="Telegram bot recommending movies from comma-delimited keywords",
    version="0.1.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# Include service routers
app.include_router(movie_finder_router)


# Health check models
class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    telegram_connected: bool


@app.get("/")
async def root() -> dict:
    """Root endpoint with service info."""
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "description": "Telegram keyword movie recommendations",
        "services": ["movie_finder"],
    }


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health including the Telegram Bot API."""
    telegram_healthy = await telegram_client.check_health()

    return HealthResponse(
        status="healthy" if telegram_healthy else "degraded",
        telegram_connected=telegram_healthy,
    )


@app.post("/webhook")
async def handle_webhook(request: Request) -> dict:
    """
    Handle incoming Telegram updates.

    Always answers 200 so Telegram doesn't redeliver; the outcome is logged.
    """
    body = await request.body()

    try:
        result = await update_handler.handle(body)
        logger.info(f"Webhook handled: status={result.status}, chat={result.chat_id}")
    except Exception as e:
        logger.exception(f"Failed to process webhook: {e}")

    return {"status": "ok"}
