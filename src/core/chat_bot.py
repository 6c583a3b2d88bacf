"""
Chat Bot
Channel-level behavior around the dispatcher: presence tracking, the
greeting on connect, and the sequential inbound worker.
"""
import asyncio
from typing import Optional
from loguru import logger

from src.agents.sentiment_agent import SentimentAgent, SentimentClassifier
from src.commands import Command, CommandRegistry, default_commands
from src.config import get_settings
from src.core.dispatcher import ChatDispatcher, DispatchResult
from src.core.sentiment_pipeline import SentimentPipeline
from src.models.chat import ChatEvent, ChatEventType, ChatMessage, ConnectedUser
from src.services.chat_transport import ChatTransport, build_chat_transport
from src.services.notification_sink import (
    NotificationSink,
    SEND_USER_APPEAR,
    build_notification_sink,
)
from src.utils.observability import log_chat_event


class ChatBot:
    """
    Processes one channel's chat, one message at a time, in arrival order.

    Messages are queued by `submit` and drained by a single worker task, so
    the sentiment window only ever has one mutator. Join and leave events
    touch the presence map only and are handled inline.

    Attributes:
        dispatcher: Routes messages to commands or sentiment
        transport: Outbound chat connection
        sink: Notification hub
        connected_users: Presence map keyed by username
    """

    def __init__(
        self,
        dispatcher: ChatDispatcher,
        transport: ChatTransport,
        sink: NotificationSink,
        channel: Optional[str] = None,
        bot_users: Optional[list[str]] = None,
        greeting: Optional[str] = None,
    ):
        settings = get_settings()
        self.dispatcher = dispatcher
        self.transport = transport
        self.sink = sink
        self.channel = channel or settings.channel_name
        self.bot_users = {name.lower() for name in (bot_users if bot_users is not None else settings.bot_users)}
        self.greeting = greeting or settings.bot_greeting
        self.connected_users: dict[str, ConnectedUser] = {}
        self.processed = 0
        self._inbound: asyncio.Queue[ChatMessage] = asyncio.Queue()
        self._running = False
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> int:
        return self._inbound.qsize()

    @property
    def is_running(self) -> bool:
        return self._running

    async def on_connected(self) -> None:
        await self.transport.send_message(self.channel, self.greeting)
        logger.info(f"Connected to #{self.channel}")

    async def on_user_joined(self, username: str) -> None:
        if username not in self.connected_users:
            self.connected_users[username] = ConnectedUser(username=username)

        self.sink.send(SEND_USER_APPEAR, username)
        log_chat_event("user_joined", username, total_users=len(self.connected_users))

    async def on_user_left(self, username: str) -> None:
        self.connected_users.pop(username, None)
        log_chat_event("user_left", username, total_users=len(self.connected_users))

    def is_bot_user(self, username: str) -> bool:
        return username.lower() in self.bot_users

    async def submit(self, username: str, message: str) -> bool:
        """
        Queue a chat message for processing.

        Returns:
            False if the sender is a bot account and the message was ignored
        """
        if self.is_bot_user(username):
            logger.debug(f"Ignoring message from bot account {username}")
            return False

        await self._inbound.put(
            ChatMessage(username=username, message=message, channel=self.channel)
        )
        return True

    async def handle_event(self, event: ChatEvent) -> None:
        """Apply a relay event. Messages are queued, presence is immediate."""
        if event.event == ChatEventType.CONNECTED:
            await self.on_connected()
            return

        if not event.username:
            raise ValueError(f"'{event.event}' event requires a username")

        if event.event == ChatEventType.JOIN:
            await self.on_user_joined(event.username)
        elif event.event == ChatEventType.LEAVE:
            await self.on_user_left(event.username)
        elif event.event == ChatEventType.MESSAGE:
            await self.submit(event.username, event.message or "")

    async def process_next(self) -> DispatchResult:
        """Dispatch the next queued message, waiting if none is pending."""
        context = await self._inbound.get()
        try:
            result = await self.dispatcher.on_message(context)
            self.processed += 1
            return result
        finally:
            self._inbound.task_done()

    async def start(self) -> None:
        """Start the inbound worker."""
        if self._running:
            logger.warning("Chat bot already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run())
        logger.info(f"🚀 Chat bot started for #{self.channel}")

    async def stop(self) -> None:
        """Stop the worker. Messages still queued are dropped."""
        if not self._running:
            return

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info(f"🛑 Chat bot stopped ({self.pending} messages dropped)")

    async def _run(self) -> None:
        while self._running:
            try:
                await self.process_next()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                # The dispatcher already contains command errors; this is a last resort
                logger.exception(f"Message processing failed: {e}")


def build_chat_bot(
    classifier: Optional[SentimentClassifier] = None,
    transport: Optional[ChatTransport] = None,
    sink: Optional[NotificationSink] = None,
    commands: Optional[list[Command]] = None,
) -> ChatBot:
    """
    Wire a bot from settings. Any collaborator can be injected for testing.
    """
    settings = get_settings()
    transport = transport or build_chat_transport()
    sink = sink or build_notification_sink()
    classifier = classifier or SentimentAgent(model_override=settings.sentiment_model)

    registry = CommandRegistry(commands if commands is not None else default_commands())
    pipeline = SentimentPipeline(classifier=classifier, sink=sink)
    dispatcher = ChatDispatcher(
        registry=registry,
        pipeline=pipeline,
        transport=transport,
        sink=sink,
    )
    return ChatBot(dispatcher=dispatcher, transport=transport, sink=sink)
