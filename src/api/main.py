"""
FastAPI Application

Main entry point for the chat mood bot API.
Handles application lifecycle and router mounting.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from loguru import logger

from src.core.chat_bot import build_chat_bot
from src.services.notification_sink import HubNotificationSink
from src.services.chat_transport import ChatRelayTransport
from src.utils.observability import configure_logging
from src.api.routes import health_router, webhooks_router, mood_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle: startup and shutdown events.

    Startup:
    - Build the chat bot (classifier, registry, pipeline, dispatcher)
    - Start the hub sender and its reconnect loop
    - Start the inbound message worker

    Shutdown:
    - Stop the inbound worker
    - Stop the hub sender and close outbound connections
    """
    configure_logging()
    logger.info("Starting chat mood bot server...")

    bot = build_chat_bot()

    if isinstance(bot.sink, HubNotificationSink):
        # Hub connectivity never blocks startup
        await bot.sink.start()

    await bot.start()
    app.state.bot = bot

    logger.info("API server ready to receive chat events")

    yield

    # Shutdown
    logger.info("Shutting down API server...")

    await bot.stop()

    if isinstance(bot.sink, HubNotificationSink):
        await bot.sink.stop()
    if isinstance(bot.transport, ChatRelayTransport):
        await bot.transport.aclose()

    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Sonequa Bot API",
    description="Live chat bot with command dispatch and rolling chat mood",
    version="1.0.0",
    lifespan=lifespan
)

# Mount routers
app.include_router(health_router)
app.include_router(webhooks_router)
app.include_router(mood_router)
