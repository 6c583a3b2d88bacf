"""
Canned Commands

The bot's built-in roster. Text commands answer in chat, visual commands
fire a `Send<Name>` task on the notification hub.
"""
import random

from src.commands.base import TextCommand, VisualCommand, starts_with_keyword
from src.models.chat import ChatMessage


class KeywordTextCommand(TextCommand):
    """Fixed reply to `!<name>`. `{username}` in the reply is the sender."""

    def __init__(self, name: str, reply: str):
        self.name = name
        self.reply = reply

    def is_activated(self, message: str) -> bool:
        return starts_with_keyword(message, self.name)

    def get_message(self, context: ChatMessage) -> str:
        return self.reply.format(username=context.username)


class KeywordVisualCommand(VisualCommand):
    """Fires a hub event on `!<name>`."""

    def __init__(self, name: str, event: str | None = None):
        self.name = name
        self.event = event or f"Send{name.capitalize()}"

    def is_activated(self, message: str) -> bool:
        return starts_with_keyword(message, self.name)

    def get_visual_event(self, context: ChatMessage) -> str:
        return self.event


class SlapCommand(TextCommand):
    name = "slap"

    def is_activated(self, message: str) -> bool:
        return starts_with_keyword(message, self.name)

    def get_message(self, context: ChatMessage) -> str:
        target = context.arguments[0].lstrip("@") if context.arguments else context.username
        return f"{context.username} slaps {target} around a bit with a large trout"


class DiceRollCommand(TextCommand):
    """`!diceroll` rolls a d6, `!diceroll N` an N-sided die."""

    name = "diceroll"
    min_sides = 2
    max_sides = 100

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def is_activated(self, message: str) -> bool:
        return starts_with_keyword(message, self.name)

    def get_message(self, context: ChatMessage) -> str:
        sides = 6
        if context.arguments:
            # Non-numeric argument raises ValueError, reported to the sender
            sides = int(context.arguments[0])
            if not self.min_sides <= sides <= self.max_sides:
                raise ValueError(
                    f"Dice must have between {self.min_sides} and {self.max_sides} sides"
                )

        return f"{context.username} rolled a d{sides}: {self._rng.randint(1, sides)}"


def default_commands() -> list[TextCommand | VisualCommand]:
    """Built-in roster in priority order."""
    return [
        KeywordVisualCommand("java"),
        KeywordVisualCommand("php"),
        KeywordVisualCommand("devastante"),
        SlapCommand(),
        DiceRollCommand(),
        KeywordTextCommand("friday", "It's Friday, {username}! Deploy to production and go home."),
        KeywordVisualCommand("disagio"),
        KeywordVisualCommand("gren"),
        KeywordTextCommand("debug", "Have you tried turning it off and on again, {username}?"),
        KeywordVisualCommand("dio"),
        KeywordVisualCommand("paura"),
        KeywordVisualCommand("kasu"),
        KeywordVisualCommand("merda"),
        KeywordVisualCommand("ansia"),
        KeywordTextCommand("accompagnare", "{username} accompanies the stream. Thanks for being here!"),
        KeywordVisualCommand("zinghero"),
    ]
