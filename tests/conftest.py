import pytest
from unittest.mock import AsyncMock, MagicMock

from src.commands import CommandRegistry, default_commands
from src.core.dispatcher import ChatDispatcher
from src.core.sentiment_pipeline import SentimentPipeline
from src.core.sentiment_window import RollingSentimentWindow
from src.models.chat import ChatMessage
from src.models.sentiment import SentimentScores, TextSentiment


class ScriptedClassifier:
    """Classifier that returns queued scores in order, or a fixed default."""

    def __init__(self, *scores: SentimentScores):
        self.queue = list(scores)
        self.calls: list[str] = []
        self.default = SentimentScores(neutral=1.0, sentiment=TextSentiment.NEUTRAL)

    async def classify(self, text: str) -> SentimentScores:
        self.calls.append(text)
        if self.queue:
            return self.queue.pop(0)
        return self.default


@pytest.fixture
def classifier():
    """Returns a scripted classifier with an empty script."""
    return ScriptedClassifier()


@pytest.fixture
def sink():
    """Returns a mock notification sink."""
    return MagicMock()


@pytest.fixture
def transport():
    """Returns a mock chat transport."""
    transport = MagicMock()
    transport.send_message = AsyncMock()
    transport.send_whisper = AsyncMock()
    return transport


@pytest.fixture
def pipeline(classifier, sink):
    """Returns a pipeline with the standard 10-sample window."""
    return SentimentPipeline(
        classifier=classifier,
        sink=sink,
        window=RollingSentimentWindow(10),
        min_message_length=10,
    )


@pytest.fixture
def dispatcher(pipeline, transport, sink):
    """Returns a dispatcher over the default command roster."""
    return ChatDispatcher(
        registry=CommandRegistry(default_commands()),
        pipeline=pipeline,
        transport=transport,
        sink=sink,
    )


@pytest.fixture
def make_message():
    """Factory for chat message contexts."""
    def _make(message: str, username: str = "viewer42", channel: str = "sonequa") -> ChatMessage:
        return ChatMessage(username=username, message=message, channel=channel)
    return _make
