"""
Sentiment Pipeline
Turns organic chat messages into a smoothed chat-wide mood.

Architecture:
    Organic Message → Noise Filter → Classifier → Raw Label Push
                    → Rolling Window → Smoothed Mood → Gauge Push
"""
from typing import Optional
from loguru import logger

from src.agents.sentiment_agent import SentimentClassifier
from src.config import get_settings
from src.core.sentiment_window import RollingSentimentWindow
from src.models.sentiment import ChatMood
from src.services.notification_sink import (
    NotificationSink,
    SEND_GAUGE_SENTIMENT,
    SEND_SENTIMENT,
)
from src.utils.observability import log_mood_update


class SentimentPipeline:
    """
    Owns the rolling window and the current mood.

    Responsibilities:
    1. Drop short messages as noise
    2. Push each message's own classifier label immediately
    3. Feed the dominant magnitude into the window
    4. Push the smoothed gauge value

    Exactly two hub pushes happen per processed message, none when the
    message is filtered or the classifier fails.

    Usage:
        >>> pipeline = SentimentPipeline(classifier=SentimentAgent(), sink=sink)
        >>> mood = await pipeline.process("this stream is great today")
        >>> print(mood.gauge)
    """

    def __init__(
        self,
        classifier: SentimentClassifier,
        sink: NotificationSink,
        window: RollingSentimentWindow | None = None,
        min_message_length: int | None = None,
    ):
        settings = get_settings()
        self.classifier = classifier
        self.sink = sink
        self.window = window or RollingSentimentWindow(settings.sentiment_window_size)
        self.min_message_length = (
            min_message_length if min_message_length is not None
            else settings.min_message_length
        )
        self._current_mood: Optional[ChatMood] = None

    @property
    def current_mood(self) -> Optional[ChatMood]:
        """Last computed mood, None until the first organic message."""
        return self._current_mood

    async def process(self, raw_text: str) -> Optional[ChatMood]:
        """
        Process one organic message.

        Args:
            raw_text: The message text, as received

        Returns:
            The recomputed mood, or the previous one if the message was
            skipped (noise or classifier failure)
        """
        if len(raw_text) < self.min_message_length:
            logger.debug(f"Skipping short message ({len(raw_text)} chars)")
            return self._current_mood

        try:
            scores = await self.classifier.classify(raw_text)
        except Exception as e:
            logger.error(f"Sentiment classification failed, skipping message: {e}")
            return self._current_mood

        # Per-message signal, independent of the window
        self.sink.send(SEND_SENTIMENT, scores.sentiment.value.lower())

        logger.info(
            "currentScore: "
            + " | ".join(f"{label}: {value}" for label, value in self._ranked(scores))
        )

        sample = self.window.add(scores)
        logger.debug(f"Window sample: {sample.sentiment} {sample.magnitude(sample.sentiment)}")

        mood = self.window.mood()
        self._current_mood = mood

        log_mood_update(
            sentiment=mood.sentiment.value,
            gauge=mood.gauge,
            sample_count=mood.sample_count,
            averages={
                "positive": mood.positive,
                "neutral": mood.neutral,
                "negative": mood.negative,
            },
        )

        self.sink.send(SEND_GAUGE_SENTIMENT, mood.gauge)
        return mood

    @staticmethod
    def _ranked(scores) -> list[tuple[str, float]]:
        return sorted(
            [
                ("Positive", scores.positive),
                ("Neutral", scores.neutral),
                ("Negative", scores.negative),
            ],
            key=lambda item: item[1]
        )
