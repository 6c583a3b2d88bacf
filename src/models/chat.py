import datetime as dt
from enum import StrEnum
from typing import Optional
from pydantic import BaseModel, Field


class ChatEventType(StrEnum):
    MESSAGE = "message"
    JOIN = "join"
    LEAVE = "leave"
    CONNECTED = "connected"


class ChatMessage(BaseModel):
    """
    The context handed to commands.
    Carries the sender identity and the raw message text.
    """
    username: str
    message: str
    channel: str
    received_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.UTC))

    @property
    def arguments(self) -> list[str]:
        """Whitespace-separated words after the first one."""
        return self.message.split()[1:]


class ChatEvent(BaseModel):
    """Inbound event pushed by the chat relay."""
    event: ChatEventType
    username: Optional[str] = None
    message: Optional[str] = None


class ConnectedUser(BaseModel):
    username: str
    joined_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.UTC))
