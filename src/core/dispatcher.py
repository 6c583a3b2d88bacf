"""
Chat Dispatcher
Decides whether each message is a command or organic text.

Architecture:
    Incoming Message → CommandRegistry → (Text reply | Visual event)
                                       ↘ (no match) → SentimentPipeline
"""
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional
from loguru import logger

from src.commands.base import Command, TextCommand, VisualCommand
from src.commands.registry import CommandRegistry
from src.core.sentiment_pipeline import SentimentPipeline
from src.models.chat import ChatMessage
from src.models.sentiment import ChatMood
from src.services.chat_transport import ChatTransport
from src.services.notification_sink import NotificationSink
from src.utils.observability import log_command_execution


class DispatchOutcome(StrEnum):
    COMMAND = "command"
    ORGANIC = "organic"
    FAILED = "failed"


@dataclass
class DispatchResult:
    """What happened to one message."""
    outcome: DispatchOutcome
    command_name: Optional[str] = None
    response: Optional[str] = None
    mood: Optional[ChatMood] = None
    error: Optional[str] = None


class ChatDispatcher:
    """
    Single entry point for incoming chat messages.

    The first activated command consumes the message; nothing else runs for
    it. Errors raised while checking activation or building the response
    are whispered to the sender and the message is treated as consumed,
    never as organic text.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        pipeline: SentimentPipeline,
        transport: ChatTransport,
        sink: NotificationSink,
    ):
        self.registry = registry
        self.pipeline = pipeline
        self.transport = transport
        self.sink = sink

    async def on_message(self, context: ChatMessage) -> DispatchResult:
        """
        Route one message.

        Args:
            context: Sender, channel and raw text

        Returns:
            DispatchResult describing the outcome
        """
        start_time = time.time()
        command: Optional[Command] = None

        try:
            command = self.registry.resolve(context.message)
            if command is not None:
                response = await self._respond(command, context)

                log_command_execution(
                    command_name=command.name,
                    username=context.username,
                    response_kind="text" if isinstance(command, TextCommand) else "visual",
                    duration_ms=(time.time() - start_time) * 1000,
                )
                return DispatchResult(
                    outcome=DispatchOutcome.COMMAND,
                    command_name=command.name,
                    response=response,
                )

        except Exception as e:
            logger.error(f"❌ Command handling failed for {context.username}: {e}")
            if command is not None:
                log_command_execution(
                    command_name=command.name,
                    username=context.username,
                    response_kind="text" if isinstance(command, TextCommand) else "visual",
                    duration_ms=(time.time() - start_time) * 1000,
                    success=False,
                    error=str(e),
                )
            try:
                await self.transport.send_whisper(context.username, str(e))
            except Exception as whisper_error:
                logger.error(f"Whisper to {context.username} failed: {whisper_error}")
            return DispatchResult(
                outcome=DispatchOutcome.FAILED,
                command_name=command.name if command else None,
                error=str(e),
            )

        mood = await self.pipeline.process(context.message)
        return DispatchResult(outcome=DispatchOutcome.ORGANIC, mood=mood)

    async def _respond(self, command: Command, context: ChatMessage) -> str:
        if isinstance(command, TextCommand):
            reply = command.get_message(context)
            await self.transport.send_message(context.channel, reply)
            return reply

        if isinstance(command, VisualCommand):
            event = command.get_visual_event(context)
            self.sink.send(event, "")
            return event

        raise TypeError(f"{type(command).__name__} has no responder")
