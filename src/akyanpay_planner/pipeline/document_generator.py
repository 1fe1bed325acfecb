"""Templated one-shot document generators."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from ..interview.conversation_history import Turn, render_dialogue
from ..interview.json_extractor import JSONExtractor
from ..llm_client import LLMClient
from ..models import BusinessModelCanvas
from ..templates import render_template

logger = logging.getLogger(__name__)


class TemplatedGenerator:
    """Render a fixed template around the transcript and run one stateless call.

    Nothing from the interview's chat session is reused; the rendered
    transcript is the only context the model sees.
    """

    response_schema: Optional[Dict[str, Any]] = None

    def __init__(self, llm_client: LLMClient, name: str, template: str, language: str = "Burmese"):
        self.llm_client = llm_client
        self.name = name
        self.template = template
        self.language = language

    def build_prompt(self, turns: Sequence[Turn]) -> str:
        context = {
            "transcript": render_dialogue(list(turns)),
            "language": self.language,
        }
        return render_template(self.template, context)

    async def _complete(self, turns: Sequence[Turn]) -> str:
        prompt = self.build_prompt(turns)
        logger.debug("Generating %s (%d prompt chars)", self.name, len(prompt))
        return await self.llm_client.generate_completion(prompt, response_schema=self.response_schema)


class MarkdownDocumentGenerator(TemplatedGenerator):
    """Generate a Markdown document; an empty reply yields ``fallback``."""

    def __init__(
        self,
        llm_client: LLMClient,
        name: str,
        template: str,
        language: str = "Burmese",
        fallback: str = "",
    ):
        super().__init__(llm_client, name, template, language)
        self.fallback = fallback

    async def generate(self, turns: Sequence[Turn]) -> str:
        response = await self._complete(turns)
        if not response or not response.strip():
            logger.warning("Empty response for %s, using fallback", self.name)
            return self.fallback
        return response


class CanvasGenerator(TemplatedGenerator):
    """Generate the Business Model Canvas as schema-constrained JSON.

    Transport and service errors propagate. A reply that does not parse or
    validate against all nine slots yields None instead of a partial canvas.
    """

    response_schema = BusinessModelCanvas.response_schema()

    def __init__(self, llm_client: LLMClient, name: str = "bmc", template: str = "business_model_canvas.jinja", language: str = "Burmese"):
        super().__init__(llm_client, name, template, language)
        self.extractor = JSONExtractor()

    async def generate(self, turns: Sequence[Turn]) -> Optional[BusinessModelCanvas]:
        response = await self._complete(turns)
        canvas = self.extractor.extract_to_model(response, BusinessModelCanvas)
        if canvas is None:
            logger.warning("Business Model Canvas unavailable: reply did not validate")
        return canvas
