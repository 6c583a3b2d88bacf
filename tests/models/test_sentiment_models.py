"""Tests for sentiment value types."""
import pytest
from pydantic import ValidationError

from src.models.sentiment import ChatMood, SentimentScores, TextSentiment


class TestSentimentScores:
    """Tests for SentimentScores."""

    def test_dominant_picks_largest_magnitude(self):
        scores = SentimentScores(positive=0.1, neutral=0.2, negative=0.7)
        assert scores.dominant() == (TextSentiment.NEGATIVE, 0.7)

    def test_tie_positive_neutral_resolves_to_neutral(self):
        scores = SentimentScores(positive=0.5, neutral=0.5, negative=0.0)
        label, value = scores.dominant()
        assert label == TextSentiment.NEUTRAL
        assert value == 0.5

    def test_tie_neutral_negative_resolves_to_negative(self):
        scores = SentimentScores(positive=0.0, neutral=0.4, negative=0.4)
        assert scores.dominant()[0] == TextSentiment.NEGATIVE

    def test_three_way_tie_resolves_to_negative(self):
        scores = SentimentScores(positive=0.3, neutral=0.3, negative=0.3)
        assert scores.dominant()[0] == TextSentiment.NEGATIVE

    def test_dominant_ignores_classifier_label(self):
        """The classifier's own label is metadata, not an input to ranking."""
        scores = SentimentScores(
            positive=0.8, neutral=0.1, negative=0.1, sentiment=TextSentiment.MIXED
        )
        assert scores.dominant()[0] == TextSentiment.POSITIVE

    def test_isolate_dominant_zeroes_other_labels(self):
        scores = SentimentScores(
            positive=0.9, neutral=0.05, negative=0.05, sentiment=TextSentiment.NEUTRAL
        )
        isolated = scores.isolate_dominant()

        assert isolated.positive == 0.9
        assert isolated.neutral == 0.0
        assert isolated.negative == 0.0
        assert isolated.sentiment == TextSentiment.POSITIVE
        # Original is untouched
        assert scores.sentiment == TextSentiment.NEUTRAL
        assert scores.neutral == 0.05

    def test_scores_are_immutable(self):
        scores = SentimentScores(positive=0.5)
        with pytest.raises(ValidationError):
            scores.positive = 0.1

    def test_scores_need_not_sum_to_one(self):
        scores = SentimentScores(positive=0.9, neutral=0.9, negative=0.9)
        assert scores.positive + scores.neutral + scores.negative > 1

    def test_mixed_has_no_magnitude(self):
        with pytest.raises(ValueError):
            SentimentScores().magnitude(TextSentiment.MIXED)

    def test_parses_classifier_json(self):
        scores = SentimentScores.model_validate(
            {"positive": 0.2, "neutral": 0.7, "negative": 0.1, "sentiment": "neutral"}
        )
        assert scores.sentiment == TextSentiment.NEUTRAL


class TestChatMood:
    """Tests for ChatMood."""

    def test_requires_at_least_one_sample(self):
        with pytest.raises(ValidationError):
            ChatMood(
                positive=0.0, neutral=0.0, negative=0.0,
                sentiment=TextSentiment.NEUTRAL, gauge=0.0, sample_count=0
            )

    def test_serializes_label_as_string(self):
        mood = ChatMood(
            positive=0.5, neutral=0.0, negative=0.0,
            sentiment=TextSentiment.POSITIVE, gauge=0.5, sample_count=1
        )
        assert mood.model_dump(mode="json")["sentiment"] == "positive"
