"""
Structured Logging & Observability
Production-grade logging that's both human-readable and machine-parseable.
"""
import sys
from loguru import logger
from typing import Any
from src.config import get_settings


def configure_logging():
    """
    Configure loguru for production observability.

    In development: Human-readable colorized output
    In production: Structured JSON logs for ingestion (ELK, Datadog, etc.)
    """
    settings = get_settings()

    # Remove default handler
    logger.remove()

    # Development mode: Beautiful console output
    if not settings.enable_structured_logging:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "{message}"
            ),
            level=settings.log_level,
            colorize=True,
        )
    # Production mode: JSON structured logs
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=settings.log_level,
            serialize=True,  # Output as JSON
        )

    logger.info(f"Logging configured: level={settings.log_level}, structured={settings.enable_structured_logging}")


def log_command_execution(
    command_name: str,
    username: str,
    response_kind: str,
    duration_ms: float | None = None,
    success: bool = True,
    error: str | None = None,
    **context
):
    """
    Structured logging for chat command executions.

    Args:
        command_name: Name of the command (e.g., "slap")
        username: Chat user that triggered it
        response_kind: "text" or "visual"
        duration_ms: Execution time in milliseconds
        success: Whether the command produced a response
        error: Error message if it failed
        **context: Additional context

    Example:
        >>> log_command_execution(
        ...     command_name="diceroll",
        ...     username="viewer42",
        ...     response_kind="text",
        ...     duration_ms=0.4
        ... )
    """
    log_data = {
        "event_type": "command",
        "command": command_name,
        "username": username,
        "response_kind": response_kind,
        "success": success,
    }

    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)
    if error:
        log_data["error"] = error

    log_data.update(context)

    level = "info" if success else "error"
    logger.bind(**log_data).log(level.upper(), f"Command !{command_name} | {username} | {response_kind}")


def log_mood_update(
    sentiment: str,
    gauge: float,
    sample_count: int,
    averages: dict[str, float],
):
    """
    Log a smoothed chat mood recomputation.

    Args:
        sentiment: Dominant smoothed label
        gauge: Gauge value pushed to the hub
        sample_count: Samples currently in the window
        averages: Per-label averages
    """
    log_data = {
        "event_type": "mood_update",
        "sentiment": sentiment,
        "gauge": round(gauge, 4),
        "sample_count": sample_count,
        "averages": {label: round(value, 4) for label, value in averages.items()},
    }

    logger.bind(**log_data).info(
        f"Chat mood: {sentiment} | ({sample_count}) - Absolute sentiment: {gauge:.4f}"
    )


def log_chat_event(
    event_type: str,
    username: str,
    **details: Any
):
    """
    Log channel presence events.

    Examples:
        - User joined
        - User left

    Args:
        event_type: Type of event (e.g., "user_joined")
        username: The user involved
        **details: Event-specific data
    """
    log_data = {
        "event_type": event_type,
        "username": username,
        **details
    }

    logger.bind(**log_data).warning(f"Chat Event: {event_type} | {username}")
