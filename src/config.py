"""
Centralized Configuration System
Environment-aware settings for the chat bot and its collaborators.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal, Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow"
    )
    """
    Production-grade configuration management.
    Loads from environment variables with sensible defaults.
    """

    # ============================================
    # CHAT CHANNEL
    # ============================================
    bot_username: str = "sonequabot"
    bot_token: Optional[str] = None
    channel_name: str = "sonequa"
    bot_greeting: str = "Hi to everyone. I am Sonequabot and I am alive. Again."
    bot_users: list[str] = ["sonequabot", "streamelements"]  # Senders the bot never reacts to

    # ============================================
    # EXTERNAL COLLABORATORS
    # ============================================
    chat_relay_url: Optional[str] = None        # Outbound chat relay (send/whisper)
    notification_hub_url: Optional[str] = None  # Visualization frontend hub
    hub_reconnect_max_delay_seconds: int = 5
    hub_queue_size: int = 1000
    hub_request_timeout_seconds: float = 5.0

    # ============================================
    # SENTIMENT
    # ============================================
    sentiment_model: str = "openai:gpt-4o-mini"
    sentiment_window_size: int = 10  # Samples kept for smoothing
    min_message_length: int = 10     # Shorter organic messages are noise

    # ============================================
    # OBSERVABILITY
    # ============================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    enable_structured_logging: bool = False  # Set to True for production JSON logs

    # ============================================
    # ENVIRONMENT
    # ============================================
    environment: Literal["development", "staging", "production"] = "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Singleton pattern for settings.
    Uses LRU cache to ensure only one Settings instance exists.
    """
    return Settings()


# Convenience accessor for common use
settings = get_settings()
