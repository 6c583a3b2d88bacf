"""
Notification Hub Sink

Fire-and-forget pushes to the visualization frontend. Callers enqueue named
tasks; a background sender delivers them and reconnects on its own after a
randomized delay, so chat processing never waits on the hub.
"""
import asyncio
import random
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Protocol

import httpx

from src.config import get_settings
from src.utils.observability import logger

# Hub task names
SEND_SENTIMENT = "SendSentiment"
SEND_GAUGE_SENTIMENT = "SendGaugeSentiment"
SEND_USER_APPEAR = "SendUserAppear"


@dataclass
class HubTask:
    """A named task and its positional arguments."""
    name: str
    args: tuple[Any, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        return {"task": self.name, "args": list(self.args)}


class NotificationSink(Protocol):
    """
    Protocol for visualization push channels.

    `send` must not block and must not raise for delivery problems.
    """

    def send(self, task_name: str, *args: Any) -> None:
        ...


class LogOnlyNotificationSink:
    """
    Sink that only logs pushes.

    Used when no hub URL is configured, and by the CLI runner.
    """

    def __init__(self):
        self.sent: list[HubTask] = []

    def send(self, task_name: str, *args: Any) -> None:
        task = HubTask(name=task_name, args=args)
        self.sent.append(task)
        logger.bind(**task.to_payload()).info(f"Hub task (log only): {task_name} {list(args)}")


class HubNotificationSink:
    """
    HTTP client for the notification hub with an independent reconnect loop.

    Delivery:
    - `send` enqueues and returns immediately
    - A sender task POSTs each task as {"task": name, "args": [...]}
    - Transport errors and 5xx replies drop the connection, re-create it
      after randint(0, max_reconnect_delay) seconds and retry, forever
    - A 4xx reply drops that task only; later tasks still go out
    - Any other sender error is logged and drops that task only
    - When the queue is full the oldest pending task is dropped

    Attributes:
        url: Hub endpoint
        connected: Whether the last delivery attempt succeeded
    """

    def __init__(
        self,
        url: str,
        max_reconnect_delay: Optional[int] = None,
        queue_size: Optional[int] = None,
        timeout: Optional[float] = None,
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: Optional[random.Random] = None,
    ):
        settings = get_settings()
        self.url = url
        self._max_reconnect_delay = (
            max_reconnect_delay if max_reconnect_delay is not None
            else settings.hub_reconnect_max_delay_seconds
        )
        self._timeout = timeout or settings.hub_request_timeout_seconds
        self._queue: asyncio.Queue[HubTask] = asyncio.Queue(
            maxsize=queue_size or settings.hub_queue_size
        )
        self._client_factory = client_factory or (lambda: httpx.AsyncClient(timeout=self._timeout))
        self._client: Optional[httpx.AsyncClient] = None
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._task: Optional[asyncio.Task] = None
        self.connected = False
        self.dropped = 0
        self.rejected = 0
        self.failed = 0
        self.reconnects = 0

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def send(self, task_name: str, *args: Any) -> None:
        """Enqueue a hub task without waiting for delivery."""
        task = HubTask(name=task_name, args=args)

        if self._queue.full():
            self._queue.get_nowait()
            self._queue.task_done()
            self.dropped += 1
            logger.warning(f"Hub queue full, dropped oldest task (total dropped: {self.dropped})")

        self._queue.put_nowait(task)

    async def start(self) -> None:
        """Start the background sender."""
        if self._task and not self._task.done():
            logger.warning("Hub sink already running")
            return

        self._task = asyncio.create_task(self._run())
        logger.info(f"🚀 Hub sink started for {self.url}")

    async def stop(self) -> None:
        """Cancel the sender and close the connection. Pending tasks are discarded."""
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        await self._disconnect()
        logger.info("🛑 Hub sink stopped")

    async def _run(self) -> None:
        while True:
            task = await self._queue.get()
            try:
                await self._deliver(task)
            except Exception as e:
                self.failed += 1
                logger.exception(f"Hub sender error, dropping {task.name}: {e}")
            finally:
                self._queue.task_done()

    async def _deliver(self, task: HubTask) -> None:
        """
        Push one task.

        Transport errors and 5xx replies reconnect and retry the same task.
        A 4xx reply means the hub rejected the task itself: it is dropped.
        """
        while True:
            if self._client is None:
                self._client = self._client_factory()

            try:
                response = await self._client.post(self.url, json=task.to_payload())
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                if e.response.status_code >= 500:
                    self.connected = False
                    logger.error(f"Hub push failed for {task.name}: {e}")
                    await self._reconnect()
                    continue

                self.connected = True
                self.rejected += 1
                logger.warning(f"Hub rejected {task.name}, dropping it: {e}")
                return
            except httpx.TransportError as e:
                self.connected = False
                logger.error(f"Hub push failed for {task.name}: {e}")
                await self._reconnect()
                continue

            if not self.connected:
                logger.info("Hub connection established")
            self.connected = True
            logger.debug(f"Hub task delivered: {task.name}")
            return

    async def _reconnect(self) -> None:
        await self._disconnect()
        delay = self._rng.randint(0, self._max_reconnect_delay)
        self.reconnects += 1
        logger.warning(f"Reconnecting to hub in {delay}s (attempt {self.reconnects})")
        await self._sleep(delay)

    async def _disconnect(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def build_notification_sink() -> HubNotificationSink | LogOnlyNotificationSink:
    """Hub sink when a URL is configured, log-only otherwise."""
    settings = get_settings()
    if settings.notification_hub_url:
        return HubNotificationSink(url=settings.notification_hub_url)

    logger.warning("Notification hub URL not configured - hub pushes will only be logged")
    return LogOnlyNotificationSink()
