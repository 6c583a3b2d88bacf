"""
Health and Readiness Endpoints

Kubernetes-compatible health probes for load balancers and orchestration.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

router = APIRouter(tags=["Health"])

# API version - single source of truth
API_VERSION = "1.0.0"


@router.get("/health")
async def health_check():
    """
    Basic health check endpoint.

    Returns 200 if service is running.
    Used by load balancers and monitoring systems.
    """
    return {
        "status": "healthy",
        "service": "sonequa-bot",
        "version": API_VERSION
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """
    Readiness probe - checks if the bot can take chat events.

    Verifies:
    - Chat bot is initialized
    - Inbound worker is running

    Returns 200 if ready, 503 if not ready.
    The notification hub is best-effort and does not affect readiness.
    """
    bot = getattr(request.app.state, "bot", None)
    if bot is None:
        logger.warning("Readiness check failed: chat bot not initialized")
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "reason": "Chat bot not initialized"
            }
        )

    if not bot.is_running:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "reason": "Inbound worker not running"
            }
        )

    return {
        "status": "ready",
        "channel": bot.channel,
        "pending_messages": bot.pending
    }
