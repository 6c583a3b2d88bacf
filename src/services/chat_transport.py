"""
Chat transport services.
Handles outbound channel messages and private whispers.
"""
from typing import Optional, Protocol

import httpx

from src.config import get_settings
from src.utils.observability import logger


class ChatTransport(Protocol):
    """Outbound side of the chat connection."""

    async def send_message(self, channel: str, text: str) -> None:
        ...

    async def send_whisper(self, username: str, text: str) -> None:
        ...


class ChatRelayTransport:
    """
    Sends chat output through an HTTP chat relay.

    This service is responsible for:
    - Posting channel messages
    - Posting private whispers
    - Logging (not raising) delivery failures
    """

    def __init__(
        self,
        base_url: str,
        bot_token: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.base_url = base_url.rstrip("/")
        headers = {"Authorization": f"Bearer {bot_token}"} if bot_token else {}
        self._client = client or httpx.AsyncClient(
            headers=headers,
            timeout=settings.hub_request_timeout_seconds
        )

    async def send_message(self, channel: str, text: str) -> None:
        await self._post("/messages", {"channel": channel, "text": text})

    async def send_whisper(self, username: str, text: str) -> None:
        await self._post("/whispers", {"username": username, "text": text})

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, payload: dict) -> None:
        logger.bind(text_length=len(payload["text"])).info(f"📤 Sending to chat relay {path}")

        try:
            response = await self._client.post(f"{self.base_url}{path}", json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.bind(path=path, error=str(e)).error(f"❌ Chat relay send failed ({path}): {e}")


class ConsoleChatTransport:
    """Prints bot output. Used by the CLI runner and when no relay is configured."""

    def __init__(self, bot_username: str = "sonequabot"):
        self.bot_username = bot_username
        self.messages: list[tuple[str, str]] = []
        self.whispers: list[tuple[str, str]] = []

    async def send_message(self, channel: str, text: str) -> None:
        self.messages.append((channel, text))
        print(f"[#{channel}] {self.bot_username}: {text}")

    async def send_whisper(self, username: str, text: str) -> None:
        self.whispers.append((username, text))
        print(f"[whisper -> {username}] {text}")


def build_chat_transport() -> ChatRelayTransport | ConsoleChatTransport:
    """Relay transport when a URL is configured, console otherwise."""
    settings = get_settings()
    if settings.chat_relay_url:
        return ChatRelayTransport(base_url=settings.chat_relay_url, bot_token=settings.bot_token)

    logger.warning("Chat relay URL not configured - bot output will be printed")
    return ConsoleChatTransport(bot_username=settings.bot_username)
