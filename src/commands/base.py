"""
Command Contract

A command is activated by raw message text and answers in exactly one way:
either a chat-visible text reply or a named visual event for the
notification hub.
"""
from abc import ABC, abstractmethod

from src.models.chat import ChatMessage


class Command(ABC):
    """
    Base for every chat command.

    `is_activated` must be cheap and must not mutate shared state; the
    registry may call it on every incoming message.
    """

    name: str = ""

    @abstractmethod
    def is_activated(self, message: str) -> bool:
        """
        Check whether raw message text triggers this command.

        Args:
            message: Raw chat message text

        Returns:
            True if this command should handle the message
        """
        pass


class TextCommand(Command):
    """Command that answers with a chat message."""

    @abstractmethod
    def get_message(self, context: ChatMessage) -> str:
        """
        Build the reply for the channel.

        Args:
            context: Sender and raw message

        Returns:
            Text to send to the channel
        """
        pass


class VisualCommand(Command):
    """Command that triggers a named event on the visualization frontend."""

    @abstractmethod
    def get_visual_event(self, context: ChatMessage) -> str:
        """
        Name the hub task to fire.

        Args:
            context: Sender and raw message

        Returns:
            Hub task name (sent with an empty payload)
        """
        pass


def starts_with_keyword(message: str, keyword: str) -> bool:
    """True if the first word of `message` is `!keyword`, case-insensitive."""
    words = message.strip().split(maxsplit=1)
    return bool(words) and words[0].lower() == f"!{keyword.lower()}"
