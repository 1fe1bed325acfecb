"""Recover JSON objects from model replies.

Schema-constrained replies are still untrusted text. The service may return
nothing, fence the object in Markdown, or wrap it in a sentence of prose.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)

JSONValue = Optional[Dict[str, Any] | List[Any]]

logger = logging.getLogger(__name__)


class JSONExtractor:
    """Pull a JSON value out of free-form reply text.

    Strategies run in order until one parses:

    1. the whole reply
    2. each fenced code block (```json ... ``` or a bare ``` fence)
    3. the span from the first ``{`` to the last ``}``

    Example:
        canvas = JSONExtractor().extract_to_model(reply, BusinessModelCanvas)
        if canvas is None:
            ...  # render the "no data" placeholder
    """

    FENCE_PATTERN = re.compile(r"```(?:json)?\s*\n?(.*?)\n?```", re.DOTALL | re.IGNORECASE)

    def __init__(self) -> None:
        self._strategies: List[Callable[[str], JSONValue]] = [
            self._parse_whole,
            self._parse_fenced,
            self._parse_braced_span,
        ]

    def extract_json(self, response: str) -> JSONValue:
        """Return the first JSON value found in ``response``, or None."""
        if not response or not response.strip():
            return None

        for strategy in self._strategies:
            value = strategy(response)
            if value is not None:
                return value
        return None

    def extract_to_model(self, response: str, model_class: Type[M]) -> Optional[M]:
        """Parse ``response`` into ``model_class``.

        Returns:
            A validated instance, or None when no JSON object is present or
            it does not validate. Never raises for malformed text.
        """
        value = self.extract_json(response)
        if not isinstance(value, dict):
            logger.warning("Reply for %s held no JSON object", model_class.__name__)
            return None

        try:
            return model_class.model_validate(value)
        except ValidationError as e:
            logger.warning("%s rejected: %s", model_class.__name__, e.errors(include_url=False))
            return None

    @staticmethod
    def _loads(text: str) -> JSONValue:
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return None

    def _parse_whole(self, text: str) -> JSONValue:
        return self._loads(text.strip())

    def _parse_fenced(self, text: str) -> JSONValue:
        for block in self.FENCE_PATTERN.findall(text):
            value = self._loads(block.strip())
            if value is not None:
                return value
        return None

    def _parse_braced_span(self, text: str) -> Optional[Dict[str, Any]]:
        start, end = text.find("{"), text.rfind("}")
        if start == -1 or end <= start:
            return None
        value = self._loads(text[start:end + 1])
        return value if isinstance(value, dict) else None
