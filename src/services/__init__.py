"""Services package."""
from src.services.chat_transport import (
    ChatTransport,
    ChatRelayTransport,
    ConsoleChatTransport,
    build_chat_transport,
)
from src.services.notification_sink import (
    NotificationSink,
    HubNotificationSink,
    LogOnlyNotificationSink,
    HubTask,
    build_notification_sink,
)

__all__ = [
    "ChatTransport",
    "ChatRelayTransport",
    "ConsoleChatTransport",
    "build_chat_transport",
    "NotificationSink",
    "HubNotificationSink",
    "LogOnlyNotificationSink",
    "HubTask",
    "build_notification_sink",
]
