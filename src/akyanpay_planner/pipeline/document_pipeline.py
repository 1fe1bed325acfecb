"""Fan-out of the nine document generators into one bundle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from ..concurrency import ConcurrencyManager
from ..config import PlannerConfig
from ..interview.conversation_history import Turn
from ..llm_client import LLMClient
from ..models import DocumentBundle
from .document_generator import CanvasGenerator, MarkdownDocumentGenerator, TemplatedGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentSpec:
    """One entry of the document registry."""
    name: str
    template: str
    structured: bool = False


DOCUMENT_SPECS: Tuple[DocumentSpec, ...] = (
    DocumentSpec("summary_note", "summary_note.jinja"),
    DocumentSpec("bmc", "business_model_canvas.jinja", structured=True),
    DocumentSpec("one_page_plan", "one_page_plan.jinja"),
    DocumentSpec("financial_plan", "financial_plan.jinja"),
    DocumentSpec("strategic_plan", "strategic_plan.jinja"),
    DocumentSpec("gtm_strategy", "gtm_strategy.jinja"),
    DocumentSpec("marketing_plan", "marketing_plan.jinja"),
    DocumentSpec("ops_plan", "ops_plan.jinja"),
    DocumentSpec("hr_plan", "hr_plan.jinja"),
)


class DocumentPipeline:
    """Run every document generator against one transcript snapshot.

    Either all nine generators succeed and a complete :class:`DocumentBundle`
    is returned, or one :class:`~akyanpay_planner.exceptions.BatchGenerationError`
    is raised and every partial result is dropped.
    """

    def __init__(self, llm_client: LLMClient, config: Optional[PlannerConfig] = None):
        self.llm_client = llm_client
        self.config = config or PlannerConfig()
        self.generators: Dict[str, TemplatedGenerator] = {
            spec.name: self._build_generator(spec) for spec in DOCUMENT_SPECS
        }

    def _build_generator(self, spec: DocumentSpec) -> TemplatedGenerator:
        language = self.config.language
        if spec.structured:
            return CanvasGenerator(self.llm_client, spec.name, spec.template, language)
        fallback = self.config.messages.summary_fallback if spec.name == "summary_note" else ""
        return MarkdownDocumentGenerator(self.llm_client, spec.name, spec.template, language, fallback)

    async def generate_bundle(self, turns: Sequence[Turn]) -> DocumentBundle:
        """Generate all documents concurrently and assemble the bundle.

        Raises:
            BatchGenerationError: If any generator raised
        """
        snapshot = tuple(turns)
        logger.info("Generating %d documents from %d turns", len(self.generators), len(snapshot))

        manager = ConcurrencyManager(self.config)
        coros: Dict[str, Any] = {
            name: generator.generate(snapshot) for name, generator in self.generators.items()
        }
        results = await manager.gather_all_or_fail(coros, message=self.config.messages.generation_failed)

        return DocumentBundle(**results)
