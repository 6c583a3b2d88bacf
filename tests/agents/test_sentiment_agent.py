"""Tests for the LLM-backed sentiment classifier."""
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock

from src.agents.sentiment_agent import SentimentAgent, SentimentClassificationError
from src.models.sentiment import SentimentScores, TextSentiment


@pytest.fixture
def agent(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    return SentimentAgent()


class TestSentimentAgent:

    @pytest.mark.asyncio
    async def test_returns_model_output(self, agent):
        scores = SentimentScores(positive=0.8, neutral=0.15, negative=0.05, sentiment=TextSentiment.POSITIVE)
        agent.agent = SimpleNamespace(run=AsyncMock(return_value=SimpleNamespace(output=scores)))

        assert await agent.classify("great stream tonight") is scores
        agent.agent.run.assert_awaited_once_with("great stream tonight")

    @pytest.mark.asyncio
    async def test_wraps_model_errors(self, agent):
        agent.agent = SimpleNamespace(run=AsyncMock(side_effect=RuntimeError("rate limited")))

        with pytest.raises(SentimentClassificationError):
            await agent.classify("great stream tonight")

    def test_model_defaults_to_settings(self, monkeypatch):
        from src.config import get_settings

        captured = {}

        def fake_agent(model_name, **kwargs):
            captured["model"] = model_name
            return SimpleNamespace(run=AsyncMock())

        monkeypatch.setattr("src.agents.sentiment_agent.Agent", fake_agent)
        monkeypatch.setenv("SENTIMENT_MODEL", "openai:gpt-4.1-nano")
        get_settings.cache_clear()
        try:
            SentimentAgent()
        finally:
            get_settings.cache_clear()

        assert captured["model"] == "openai:gpt-4.1-nano"
