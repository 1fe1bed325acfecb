"""Conversational business-plan generator.

Interviews a user about a business idea, then turns the transcript into nine
business documents through a hosted language model.
"""

from .config import LocalizedMessages, PlannerConfig, load_config
from .exceptions import (
    BatchGenerationError,
    EmptyInputError,
    GenerationPreconditionError,
    LLMServiceError,
    PlannerError,
    SendInFlightError,
)
from .interview import InterviewManager, Phase, Speaker, Transcript, Turn
from .llm_client import ChatHandle, LLMClient
from .models import BusinessModelCanvas, DocumentBundle

__version__ = "0.1.0"

__all__ = [
    "LocalizedMessages",
    "PlannerConfig",
    "load_config",
    "BatchGenerationError",
    "EmptyInputError",
    "GenerationPreconditionError",
    "LLMServiceError",
    "PlannerError",
    "SendInFlightError",
    "InterviewManager",
    "Phase",
    "Speaker",
    "Transcript",
    "Turn",
    "ChatHandle",
    "LLMClient",
    "BusinessModelCanvas",
    "DocumentBundle",
]
