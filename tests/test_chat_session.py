"""Unit tests for the single-flight chat session."""

import asyncio

import pytest

from akyanpay_planner.exceptions import (
    EmptyResponseError,
    LLMServiceError,
    SendInFlightError,
    SessionClosedError,
)
from akyanpay_planner.interview.chat_session import ChatSession
from akyanpay_planner.mock_client import MockLLMClient


class TestChatSession:
    """Tests for ChatSession."""

    def test_open_passes_system_instruction(self, client):
        ChatSession.open(client, "You are a consultant")

        assert client.chats[0].system_instruction == "You are a consultant"

    def test_open_wraps_errors(self):
        mock = MockLLMClient()
        mock.set_start_error(RuntimeError("no network"))

        with pytest.raises(LLMServiceError):
            ChatSession.open(mock, "sys")

    @pytest.mark.asyncio
    async def test_send_returns_reply(self, client):
        session = ChatSession.open(client, "sys")

        reply = await session.send("hello")

        assert reply.startswith("Q1")
        assert client.chats[0].sent == ["hello"]
        assert not session.is_pending

    @pytest.mark.asyncio
    async def test_second_send_rejected_while_pending(self):
        mock = MockLLMClient(delay=0.05)
        session = ChatSession.open(mock, "sys")

        first = asyncio.create_task(session.send("first"))
        await asyncio.sleep(0)
        assert session.is_pending

        with pytest.raises(SendInFlightError):
            await session.send("second")

        await first
        assert mock.chats[0].sent == ["first"]
        assert not session.is_pending

    @pytest.mark.asyncio
    async def test_send_after_failure_is_allowed(self):
        mock = MockLLMClient()
        mock.set_chat_replies([RuntimeError("boom"), "recovered"])
        session = ChatSession.open(mock, "sys")

        with pytest.raises(LLMServiceError):
            await session.send("one")

        assert await session.send("two") == "recovered"

    @pytest.mark.asyncio
    async def test_empty_reply(self):
        mock = MockLLMClient()
        mock.set_chat_replies(["   "])
        session = ChatSession.open(mock, "sys")

        with pytest.raises(EmptyResponseError):
            await session.send("hello")

    @pytest.mark.asyncio
    async def test_closed_session(self, client):
        session = ChatSession.open(client, "sys")
        session.close()

        assert session.is_closed
        with pytest.raises(SessionClosedError):
            await session.send("hello")
