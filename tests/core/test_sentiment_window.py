"""Tests for RollingSentimentWindow."""
import pytest

from src.core.sentiment_window import RollingSentimentWindow
from src.models.sentiment import SentimentScores, TextSentiment


def positive(value: float = 0.9) -> SentimentScores:
    return SentimentScores(positive=value, neutral=(1 - value) / 2, negative=(1 - value) / 2)


def negative(value: float = 0.95) -> SentimentScores:
    return SentimentScores(positive=(1 - value) / 2, neutral=(1 - value) / 2, negative=value)


class TestRollingSentimentWindow:
    """Test suite for the bounded window and its smoothing."""

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            RollingSentimentWindow(0)

    def test_add_stores_only_winning_magnitude(self):
        window = RollingSentimentWindow()
        sample = window.add(SentimentScores(positive=0.9, neutral=0.05, negative=0.05))

        assert sample.positive == 0.9
        assert sample.neutral == 0.0
        assert sample.negative == 0.0
        assert list(window) == [sample]

    def test_single_sample_gauge(self):
        window = RollingSentimentWindow()
        window.add(SentimentScores(positive=0.9, neutral=0.05, negative=0.05))

        mood = window.mood()

        assert mood.sentiment == TextSentiment.POSITIVE
        assert mood.positive == pytest.approx(0.9)
        assert mood.neutral == 0.0
        assert mood.negative == 0.0
        assert mood.gauge == pytest.approx(0.9)
        assert mood.sample_count == 1

    def test_never_exceeds_max_samples(self):
        window = RollingSentimentWindow(10)
        for _ in range(25):
            window.add(positive())
            assert len(window) <= 10

        assert len(window) == 10
        assert window.is_full

    def test_oldest_evicted_first(self):
        window = RollingSentimentWindow(10)
        window.add(negative(0.8))
        for _ in range(10):
            window.add(positive(0.6))

        # The negative sample was the 1st of 11 and is gone
        mood = window.mood()
        assert mood.negative == 0.0
        assert mood.positive == pytest.approx(0.6)
        assert all(sample.negative == 0.0 for sample in window)

    def test_averages_use_full_window_length(self):
        window = RollingSentimentWindow()
        window.add(SentimentScores(positive=0.8))
        window.add(SentimentScores(negative=0.6))

        averages = window.averages()

        assert averages[TextSentiment.POSITIVE] == pytest.approx(0.4)
        assert averages[TextSentiment.NEGATIVE] == pytest.approx(0.3)
        assert averages[TextSentiment.NEUTRAL] == 0.0

    def test_gauge_is_positive_minus_negative(self):
        window = RollingSentimentWindow()
        window.add(SentimentScores(positive=0.8))
        window.add(SentimentScores(neutral=0.7))
        window.add(SentimentScores(negative=0.5))

        mood = window.mood()

        assert mood.gauge == pytest.approx(mood.positive - mood.negative)
        assert mood.gauge == pytest.approx((0.8 - 0.5) / 3)

    def test_smoothed_tie_uses_enumeration_order(self):
        window = RollingSentimentWindow()
        window.add(SentimentScores(positive=0.5))
        window.add(SentimentScores(neutral=0.5))

        assert window.mood().sentiment == TextSentiment.NEUTRAL

    def test_empty_window_has_no_mood(self):
        window = RollingSentimentWindow()
        with pytest.raises(ValueError):
            window.mood()
        assert window.averages()[TextSentiment.POSITIVE] == 0.0

    def test_one_negative_after_ten_positive_keeps_positive_dominant(self):
        baseline = RollingSentimentWindow()
        for _ in range(10):
            baseline.add(positive())
        baseline_gauge = baseline.mood().gauge

        window = RollingSentimentWindow()
        for _ in range(10):
            window.add(positive())
        window.add(negative(0.95))

        mood = window.mood()
        assert mood.sentiment == TextSentiment.POSITIVE
        assert mood.gauge < baseline_gauge
        assert mood.sample_count == 10
