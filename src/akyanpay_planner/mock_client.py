"""
Mock LLM client for testing and offline demos.

Provides configurable responses without making actual API calls.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional, Union

from .llm_client import ChatHandle, LLMClient

Reply = Union[str, BaseException]


def _resolve(reply: Reply) -> str:
    if isinstance(reply, BaseException):
        raise reply
    return reply


class MockChatHandle(ChatHandle):
    """Chat handle that replays the owning client's scripted replies."""

    def __init__(self, client: "MockLLMClient", system_instruction: str):
        self.client = client
        self.system_instruction = system_instruction
        self.sent: List[str] = []

    async def send_message(self, text: str) -> str:
        self.sent.append(text)
        self.client.calls.append({"kind": "chat", "text": text})
        if self.client.delay:
            await asyncio.sleep(self.client.delay)
        return _resolve(self.client._next_chat_reply())


class MockLLMClient(LLMClient):
    """
    Mock LLM client for testing.

    Can be configured with:
    - A sequence of chat replies (strings or exceptions to raise)
    - Completion replies keyed by a keyword found in the prompt's first line
    - A custom completion function
    - Simulated delays
    """

    def __init__(
        self,
        config: Any = None,
        default_reply: str = "This is a mock response.",
        delay: float = 0.0,
    ):
        """
        Initialize the mock client.

        Args:
            config: Configuration object (model name is read from it if present)
            default_reply: Reply used when nothing more specific is configured
            delay: Simulated latency in seconds for every call
        """
        super().__init__(config)
        self.default_reply = default_reply
        self.delay = delay

        self._chat_replies: List[Reply] = []
        self._chat_index = 0
        self._completions: Dict[str, Reply] = {}
        self._completion_function: Optional[Callable[[str, Optional[Dict[str, Any]]], str]] = None
        self._start_error: Optional[BaseException] = None

        # Call tracking
        self.calls: List[Dict[str, Any]] = []
        self.chats: List[MockChatHandle] = []

    def set_chat_replies(self, replies: List[Reply]) -> None:
        """Set the replies returned by chat sends, in order.

        Once exhausted, ``default_reply`` is returned.
        """
        self._chat_replies = list(replies)
        self._chat_index = 0

    def set_start_error(self, error: Optional[BaseException]) -> None:
        """Make :meth:`start_chat` raise ``error``."""
        self._start_error = error

    def set_completion(self, keyword: str, reply: Reply) -> None:
        """Answer one-shot prompts whose first line contains ``keyword``."""
        self._completions[keyword] = reply

    def set_completion_function(self, func: Callable[[str, Optional[Dict[str, Any]]], str]) -> None:
        """Set a function receiving ``(prompt, response_schema)`` that builds replies."""
        self._completion_function = func

    def _next_chat_reply(self) -> Reply:
        if self._chat_index < len(self._chat_replies):
            reply = self._chat_replies[self._chat_index]
            self._chat_index += 1
            return reply
        return self.default_reply

    def start_chat(self, system_instruction: str) -> ChatHandle:
        self.calls.append({"kind": "start_chat", "system_instruction": system_instruction})
        if self._start_error is not None:
            raise self._start_error
        handle = MockChatHandle(self, system_instruction)
        self.chats.append(handle)
        return handle

    async def generate_completion(
        self,
        prompt: str,
        response_schema: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        self.calls.append({"kind": "completion", "prompt": prompt, "response_schema": response_schema})
        if self.delay:
            await asyncio.sleep(self.delay)

        if self._completion_function is not None:
            return self._completion_function(prompt, response_schema)

        lines = prompt.strip().splitlines()
        first_line = lines[0] if lines else ""
        for keyword, reply in self._completions.items():
            if keyword in first_line:
                return _resolve(reply)

        return self.default_reply

    @property
    def completion_calls(self) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c["kind"] == "completion"]
