"""Single-flight adapter over one conversational handle."""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import (
    EmptyResponseError,
    LLMServiceError,
    SendInFlightError,
    SessionClosedError,
)
from ..llm_client import ChatHandle, LLMClient

logger = logging.getLogger(__name__)


class ChatSession:
    """Sends one utterance at a time over a server-retained conversation.

    A second ``send`` while one is pending is rejected rather than queued, so
    turn order is fixed by the caller awaiting each reply.
    """

    def __init__(self, handle: ChatHandle):
        self._handle: Optional[ChatHandle] = handle
        self._pending = False

    @classmethod
    def open(cls, llm_client: LLMClient, system_instruction: str) -> "ChatSession":
        """Create a new conversation on ``llm_client``."""
        try:
            handle = llm_client.start_chat(system_instruction)
        except LLMServiceError:
            raise
        except Exception as e:
            raise LLMServiceError(f"Could not open chat session: {e}") from e
        return cls(handle)

    @property
    def is_pending(self) -> bool:
        return self._pending

    @property
    def is_closed(self) -> bool:
        return self._handle is None

    async def send(self, text: str) -> str:
        """Send ``text`` and return the model's reply.

        Raises:
            SendInFlightError: If another send has not resolved yet
            SessionClosedError: If the session was closed
            EmptyResponseError: If the service replied with no text
            LLMServiceError: On any transport or service failure
        """
        if self._handle is None:
            raise SessionClosedError("Chat session has been closed")
        if self._pending:
            raise SendInFlightError("A message is already being sent")

        self._pending = True
        try:
            reply = await self._handle.send_message(text)
        except LLMServiceError:
            raise
        except Exception as e:
            raise LLMServiceError(f"Chat send failed: {e}") from e
        finally:
            self._pending = False

        if not reply or not reply.strip():
            raise EmptyResponseError("Model returned an empty reply")
        return reply

    def close(self) -> None:
        """Discard the underlying handle."""
        if self._handle is not None:
            logger.debug("Closing chat session")
        self._handle = None
