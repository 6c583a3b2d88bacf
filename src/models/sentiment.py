from enum import StrEnum
from pydantic import BaseModel, ConfigDict, Field


class TextSentiment(StrEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    MIXED = "mixed"


# Ranking order for dominant-label derivation. Mixed is never ranked.
RANKED_SENTIMENTS = (TextSentiment.POSITIVE, TextSentiment.NEUTRAL, TextSentiment.NEGATIVE)


class SentimentScores(BaseModel):
    """
    A single message's three-way sentiment distribution.

    The magnitudes are classifier scores, not probabilities: they are not
    required to sum to 1. `sentiment` is whatever label the classifier
    reported and is never re-derived from the magnitudes.
    """
    model_config = ConfigDict(frozen=True)

    positive: float = Field(default=0.0, ge=0)
    neutral: float = Field(default=0.0, ge=0)
    negative: float = Field(default=0.0, ge=0)
    sentiment: TextSentiment = TextSentiment.NEUTRAL

    def magnitude(self, label: TextSentiment) -> float:
        if label == TextSentiment.MIXED:
            raise ValueError("Mixed has no magnitude")
        return getattr(self, label.value)

    def dominant(self) -> tuple[TextSentiment, float]:
        """
        Label with the largest magnitude.

        Stable ascending sort over (positive, neutral, negative), last entry
        wins, so ties go to the label later in that order.
        """
        ranked = sorted(
            ((label, self.magnitude(label)) for label in RANKED_SENTIMENTS),
            key=lambda item: item[1]
        )
        return ranked[-1]

    def isolate_dominant(self) -> "SentimentScores":
        """New sample holding only the dominant magnitude, relabeled."""
        label, value = self.dominant()
        return SentimentScores(sentiment=label, **{label.value: value})


class ChatMood(BaseModel):
    """Smoothed chat-wide mood, recomputed from the rolling window."""
    model_config = ConfigDict(frozen=True)

    positive: float
    neutral: float
    negative: float
    sentiment: TextSentiment
    gauge: float = Field(..., description="Lean toward positive vs negative, relative to neutral.")
    sample_count: int = Field(..., ge=1)
