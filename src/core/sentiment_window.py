"""
Rolling Sentiment Window
Bounded FIFO of per-message dominant magnitudes and the smoothing that turns
them into a chat-wide mood.
"""
from collections import deque
from typing import Iterator

from src.models.sentiment import (
    ChatMood,
    RANKED_SENTIMENTS,
    SentimentScores,
    TextSentiment,
)

DEFAULT_MAX_SAMPLES = 10


class RollingSentimentWindow:
    """
    Keeps the most recent processed samples, oldest first.

    Each stored sample carries only its winning magnitude (the other two
    fields are zero). When full, the oldest sample is evicted before the
    new one is appended.

    Usage:
        >>> window = RollingSentimentWindow()
        >>> window.add(SentimentScores(positive=0.9, neutral=0.05, negative=0.05))
        >>> window.mood().gauge
        0.9
    """

    def __init__(self, max_samples: int = DEFAULT_MAX_SAMPLES):
        if max_samples < 1:
            raise ValueError("max_samples must be at least 1")
        self.max_samples = max_samples
        self._samples: deque[SentimentScores] = deque()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[SentimentScores]:
        return iter(self._samples)

    @property
    def is_full(self) -> bool:
        return len(self._samples) >= self.max_samples

    def add(self, scores: SentimentScores) -> SentimentScores:
        """
        Store the dominant magnitude of `scores`.

        Args:
            scores: Raw classifier output for one message

        Returns:
            The isolated sample that was appended
        """
        sample = scores.isolate_dominant()

        while self.is_full:
            self._samples.popleft()

        self._samples.append(sample)
        return sample

    def averages(self) -> dict[TextSentiment, float]:
        """Per-label mean over every entry in the window, zeros included."""
        count = len(self._samples)
        if count == 0:
            return {label: 0.0 for label in RANKED_SENTIMENTS}

        return {
            label: sum(sample.magnitude(label) for sample in self._samples) / count
            for label in RANKED_SENTIMENTS
        }

    def mood(self) -> ChatMood:
        """
        Recompute the smoothed mood from the current contents.

        Raises:
            ValueError: If the window is empty
        """
        if not self._samples:
            raise ValueError("Cannot compute mood of an empty window")

        averages = self.averages()
        smoothed = SentimentScores(
            positive=averages[TextSentiment.POSITIVE],
            neutral=averages[TextSentiment.NEUTRAL],
            negative=averages[TextSentiment.NEGATIVE],
        )
        dominant_label, _ = smoothed.dominant()

        # Lean toward positive minus lean toward negative, both against neutral
        gauge = (smoothed.positive - smoothed.neutral) - (smoothed.negative - smoothed.neutral)

        return ChatMood(
            positive=smoothed.positive,
            neutral=smoothed.neutral,
            negative=smoothed.negative,
            sentiment=dominant_label,
            gauge=gauge,
            sample_count=len(self._samples),
        )
