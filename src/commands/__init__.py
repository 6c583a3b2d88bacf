"""Chat commands package."""
from src.commands.base import Command, TextCommand, VisualCommand
from src.commands.canned import (
    KeywordTextCommand,
    KeywordVisualCommand,
    SlapCommand,
    DiceRollCommand,
    default_commands,
)
from src.commands.registry import CommandRegistry

__all__ = [
    "Command",
    "TextCommand",
    "VisualCommand",
    "KeywordTextCommand",
    "KeywordVisualCommand",
    "SlapCommand",
    "DiceRollCommand",
    "default_commands",
    "CommandRegistry",
]
