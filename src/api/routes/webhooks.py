"""
Webhook Endpoints

Inbound chat relay events. Messages are queued for the sequential worker
and acknowledged immediately.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from src.models.chat import ChatEvent

router = APIRouter(prefix="/webhooks", tags=["Webhooks"])


@router.post("/chat")
async def chat_webhook(event: ChatEvent, request: Request):
    """
    Chat relay webhook endpoint.

    Flow:
    1. Receive a message, join, leave or connected event from the relay
    2. Presence events are applied immediately
    3. Messages are queued for the bot's single worker
    4. Return 200 OK to acknowledge receipt

    Returns:
        JSON acknowledgment, 422 for events missing a required username,
        503 if the bot is not initialized
    """
    bot = getattr(request.app.state, "bot", None)
    if bot is None:
        logger.error("Chat event received before bot initialization")
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "error": "Chat bot not initialized"}
        )

    try:
        await bot.handle_event(event)
    except ValueError as e:
        logger.warning(f"Rejected chat event: {e}")
        return JSONResponse(
            status_code=422,
            content={"status": "rejected", "error": str(e)}
        )

    return {"status": "accepted", "event": event.event.value}
