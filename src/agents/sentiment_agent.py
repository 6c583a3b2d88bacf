from typing import Protocol
from pydantic_ai import Agent
from loguru import logger
from src.config import get_settings
from src.models.sentiment import SentimentScores


class SentimentClassificationError(Exception):
    """Raised when the classifier cannot score a message."""
    pass


class SentimentClassifier(Protocol):
    """Maps raw chat text to a three-way sentiment distribution."""

    async def classify(self, text: str) -> SentimentScores:
        ...


class SentimentAgent:
    """
    LLM-backed sentiment classifier for live chat messages.
    Aligned with PydanticAI v1.x specifications.
    """

    def __init__(self, model_override: str | None = None):
        model_name = model_override or get_settings().sentiment_model

        self.agent: Agent[None, SentimentScores] = Agent(
            model_name,
            output_type=SentimentScores,
            instructions=(
                "You score the sentiment of single live-stream chat messages. "
                "Return a confidence between 0 and 1 for positive, neutral and negative, "
                "and the overall label. Use 'mixed' only when the message clearly carries "
                "both positive and negative sentiment. Chat slang, emotes and irony are common."
            )
        )
        logger.info(f"SentimentAgent initialized with model: {model_name}")

    async def classify(self, text: str) -> SentimentScores:
        """
        Scores one chat message.

        Raises:
            SentimentClassificationError: If the model call fails
        """
        logger.debug(f"Classifying chat message ({len(text)} chars)")

        try:
            result = await self.agent.run(text)
        except Exception as e:
            logger.error(f"Sentiment agent failed: {str(e)}")
            raise SentimentClassificationError(str(e)) from e

        logger.debug(f"Sentiment classified: {result.output.sentiment}")
        return result.output
