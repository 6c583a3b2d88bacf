"""
Mood Endpoints

Current smoothed chat mood and channel presence.
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(prefix="/metrics", tags=["Metrics"])


@router.get("/mood")
async def chat_mood(request: Request):
    """
    Current chat mood.

    Returns the latest smoothed mood (null before the first organic
    message), window fill, queue depth and connected users.
    """
    bot = getattr(request.app.state, "bot", None)
    if bot is None:
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "error": "Chat bot not initialized"}
        )

    pipeline = bot.dispatcher.pipeline
    mood = pipeline.current_mood

    return {
        "mood": mood.model_dump(mode="json") if mood else None,
        "window": {
            "samples": len(pipeline.window),
            "max_samples": pipeline.window.max_samples,
        },
        "pending_messages": bot.pending,
        "processed_messages": bot.processed,
        "connected_users": sorted(bot.connected_users),
    }
