"""Gemini LLM client for the business planner.

This module implements the LLM client on top of the ``google-genai`` SDK's
async surface. Conversational calls use ``client.aio.chats`` so the service
keeps the interview history; document generation uses one-shot
``client.aio.models.generate_content`` calls, optionally schema-constrained.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from .config import PlannerConfig
from .exceptions import LLMServiceError
from .llm_client import ChatHandle, LLMClient

logger = logging.getLogger(__name__)


class GeminiChatHandle(ChatHandle):
    """Wraps one ``AsyncChat`` object returned by the SDK."""

    def __init__(self, chat: Any, timeout: float):
        self._chat = chat
        self._timeout = timeout

    async def send_message(self, text: str) -> str:
        try:
            response = await asyncio.wait_for(
                self._chat.send_message(text),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            raise LLMServiceError(f"Chat request timed out after {self._timeout} seconds")
        except Exception as e:
            raise LLMServiceError(f"Chat request failed: {e}") from e

        return response.text or ""


class GeminiLLMClient(LLMClient):
    """LLM client backed by the Gemini API.

    Example usage:
        config = load_config()
        client = GeminiLLMClient(config)
        chat = client.start_chat("You are a business consultant.")
        reply = await chat.send_message("Hello")
    """

    def __init__(self, config: Optional[PlannerConfig] = None, client: Optional[genai.Client] = None):
        """Initialize the Gemini client.

        Args:
            config: PlannerConfig with model, api_key and timeout
            client: Pre-built SDK client. Built from ``config.api_key`` if None.

        Raises:
            ValueError: If no client is given and no API key is configured
        """
        config = config or PlannerConfig()
        super().__init__(config)
        self.timeout = config.timeout

        if client is None:
            if not config.api_key:
                raise ValueError("GEMINI_API_KEY environment variable is required")
            client = genai.Client(api_key=config.api_key)
        self.client = client

        logger.info("Gemini client initialized for model %s", self.model)

    def start_chat(self, system_instruction: str) -> ChatHandle:
        chat = self.client.aio.chats.create(
            model=self.model,
            config=types.GenerateContentConfig(system_instruction=system_instruction),
        )
        return GeminiChatHandle(chat, self.timeout)

    async def generate_completion(
        self,
        prompt: str,
        response_schema: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        """Generate a completion with the one-shot endpoint.

        Args:
            prompt: Fully rendered prompt
            response_schema: Optional JSON schema constraint
            **kwargs: Extra ``GenerateContentConfig`` fields (e.g. temperature)

        Returns:
            The generated text, possibly empty

        Raises:
            LLMServiceError: On transport failure, service error or timeout
        """
        config_kwargs: Dict[str, Any] = dict(kwargs)
        if response_schema is not None:
            config_kwargs["response_mime_type"] = "application/json"
            config_kwargs["response_schema"] = response_schema

        try:
            response = await asyncio.wait_for(
                self.client.aio.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(**config_kwargs) if config_kwargs else None,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise LLMServiceError(f"Generation request timed out after {self.timeout} seconds")
        except Exception as e:
            logger.error("Model generation error: %s", e)
            raise LLMServiceError(f"Generation request failed: {e}") from e

        return response.text or ""


def create_gemini_client(config: Optional[PlannerConfig] = None) -> GeminiLLMClient:
    """Create a Gemini client from configuration (environment by default)."""
    if config is None:
        from .config import load_config

        config = load_config()
    return GeminiLLMClient(config)
