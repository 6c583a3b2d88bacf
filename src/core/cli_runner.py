"""
CLI Runner for the Chat Bot
Command-line tool to try the dispatcher and the mood pipeline against a
simulated chat, without a chat relay or notification hub.
"""
import asyncio
from loguru import logger
from src.core.chat_bot import build_chat_bot
from src.services.chat_transport import ConsoleChatTransport
from src.services.notification_sink import LogOnlyNotificationSink
from src.utils.observability import configure_logging


SIMULATED_CHAT = [
    ("viewer42", "hello everyone, happy to be here tonight!"),
    ("viewer42", "!slap sonequa"),
    ("lurker", "gg"),
    ("coder99", "this refactoring is honestly really clean, love it"),
    ("coder99", "!diceroll 20"),
    ("troll", "this code is terrible and the stream is boring"),
    ("lurker", "!devastante"),
    ("coder99", "what editor theme are you using right now?"),
    ("troll", "!diceroll banana"),
]


async def run_simulation():
    """
    Feed a scripted chat through the bot and print the mood after each message.
    """
    configure_logging()

    logger.info("=" * 70)
    logger.info("🤖 Sonequa Bot - Chat Simulation")
    logger.info("=" * 70)

    transport = ConsoleChatTransport()
    sink = LogOnlyNotificationSink()
    bot = build_chat_bot(transport=transport, sink=sink)

    await bot.on_connected()
    for username in sorted({username for username, _ in SIMULATED_CHAT}):
        await bot.on_user_joined(username)

    for i, (username, message) in enumerate(SIMULATED_CHAT, 1):
        print(f"\n{'─' * 70}")
        print(f"🗣️  {username} ({i}/{len(SIMULATED_CHAT)}): {message}")
        print(f"{'─' * 70}")

        await bot.submit(username, message)
        result = await bot.process_next()

        print(f"   Outcome: {result.outcome}")
        if result.command_name:
            print(f"   Command: !{result.command_name}")
        if result.mood:
            print(f"   Mood: {result.mood.sentiment} | gauge {result.mood.gauge:+.3f} "
                  f"| {result.mood.sample_count} samples")

    print(f"\n{'=' * 70}")
    print("📈 Final State")
    print(f"{'=' * 70}")
    mood = bot.dispatcher.pipeline.current_mood
    print(f"Chat mood: {mood.sentiment if mood else 'n/a'}")
    print(f"Hub tasks pushed: {len(sink.sent)}")
    print(f"Whispers sent: {len(transport.whispers)}")
    print(f"Connected users: {', '.join(sorted(bot.connected_users))}\n")


async def run_interactive():
    """
    Read `username: message` lines from stdin until EOF or an empty line.
    """
    configure_logging()

    transport = ConsoleChatTransport()
    bot = build_chat_bot(transport=transport, sink=LogOnlyNotificationSink())
    await bot.on_connected()

    loop = asyncio.get_running_loop()
    while True:
        try:
            line = await loop.run_in_executor(None, input, "> ")
        except EOFError:
            break
        if not line.strip():
            break

        username, _, message = line.partition(":")
        if not message:
            username, message = "viewer", line

        if await bot.submit(username.strip(), message.strip()):
            result = await bot.process_next()
            if result.mood:
                print(f"   Mood: {result.mood.sentiment} | gauge {result.mood.gauge:+.3f}")


if __name__ == "__main__":
    import sys

    # Choose demo mode
    if len(sys.argv) > 1 and sys.argv[1] == "interactive":
        asyncio.run(run_interactive())
    else:
        asyncio.run(run_simulation())
