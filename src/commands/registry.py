"""
Command Registry

Ordered, first-match-wins lookup. Registration order is priority order and
the registry never changes after construction.
"""
from typing import Iterable, Iterator, Optional
from loguru import logger

from src.commands.base import Command, TextCommand, VisualCommand


class CommandRegistry:
    """
    Immutable ordered list of commands.

    Usage:
        >>> registry = CommandRegistry(default_commands())
        >>> registry.resolve("!slap someone")
    """

    def __init__(self, commands: Iterable[Command]):
        commands = tuple(commands)
        seen: set[str] = set()

        for command in commands:
            if not isinstance(command, (TextCommand, VisualCommand)):
                raise ValueError(
                    f"{type(command).__name__} must be a TextCommand or a VisualCommand"
                )
            if isinstance(command, TextCommand) and isinstance(command, VisualCommand):
                raise ValueError(f"{type(command).__name__} cannot respond both ways")
            if command.name in seen:
                raise ValueError(f"Duplicate command name: {command.name}")
            seen.add(command.name)

        self._commands: tuple[Command, ...] = commands
        logger.info(f"Command registry built with {len(commands)} commands")

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    @property
    def names(self) -> list[str]:
        return [command.name for command in self._commands]

    def resolve(self, message: str) -> Optional[Command]:
        """
        First command activated by `message`, in registration order.

        Activation errors propagate to the caller.

        Returns:
            The winning command, or None for organic text
        """
        for command in self._commands:
            if command.is_activated(message):
                return command
        return None
