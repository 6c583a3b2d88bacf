"""
API Routes

Modular route definitions for the chat mood bot API.
"""
from src.api.routes.health import router as health_router
from src.api.routes.webhooks import router as webhooks_router
from src.api.routes.mood import router as mood_router

__all__ = [
    "health_router",
    "webhooks_router",
    "mood_router",
]
