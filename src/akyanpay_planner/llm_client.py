"""Abstract LLM client interface for provider-agnostic usage.

This module defines the minimal async interface the interview and the document
pipeline expect from a hosted generative-language service. Two call shapes are
covered: a conversational call against a session handle that keeps its own
history server-side, and a stateless one-shot completion. Concrete provider
clients implement both.
"""

from __future__ import annotations

import abc
from typing import Any, Dict, Optional


class ChatHandle(abc.ABC):
    """A server-retained conversation opened by :meth:`LLMClient.start_chat`."""

    @abc.abstractmethod
    async def send_message(self, text: str) -> str:
        """Send one utterance and return the model's reply text."""


class LLMClient(abc.ABC):
    """Abstract base class for all LLM clients.

    Concrete implementations accept a configuration object in their
    constructor (e.g., a ``PlannerConfig`` with ``.model`` and ``.timeout``).
    """

    def __init__(self, config: Any) -> None:
        self._config = config

    @property
    def model(self) -> str:
        return getattr(self._config, "model", "")

    @abc.abstractmethod
    def start_chat(self, system_instruction: str) -> ChatHandle:
        """Open a new conversational session governed by ``system_instruction``."""

    @abc.abstractmethod
    async def generate_completion(
        self,
        prompt: str,
        response_schema: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        """Generate a single completion for the provided prompt.

        When ``response_schema`` is given the provider is asked for JSON text
        matching it. The returned text is still untrusted.
        """
