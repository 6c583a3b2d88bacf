"""Tests for chat transports."""
import json
import pytest
import httpx

from src.services.chat_transport import ChatRelayTransport, ConsoleChatTransport


class TestChatRelayTransport:

    @pytest.mark.asyncio
    async def test_posts_message_and_whisper(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        transport = ChatRelayTransport(base_url="http://relay.test/", client=client)

        await transport.send_message("sonequa", "hello chat")
        await transport.send_whisper("alice", "that failed")
        await transport.aclose()

        assert str(requests[0].url) == "http://relay.test/messages"
        assert json.loads(requests[0].content) == {"channel": "sonequa", "text": "hello chat"}
        assert str(requests[1].url) == "http://relay.test/whispers"
        assert json.loads(requests[1].content) == {"username": "alice", "text": "that failed"}

    @pytest.mark.asyncio
    async def test_delivery_failure_is_not_raised(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        transport = ChatRelayTransport(base_url="http://relay.test", client=client)

        await transport.send_message("sonequa", "hello chat")
        await transport.aclose()


class TestConsoleChatTransport:

    @pytest.mark.asyncio
    async def test_records_output(self, capsys):
        transport = ConsoleChatTransport(bot_username="bot")

        await transport.send_message("sonequa", "hi")
        await transport.send_whisper("alice", "psst")

        assert transport.messages == [("sonequa", "hi")]
        assert transport.whispers == [("alice", "psst")]
        assert "[#sonequa] bot: hi" in capsys.readouterr().out
