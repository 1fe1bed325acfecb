"""Interview module for conversational business-plan generation.

This module provides the conversational side of the planner. Users chat with
a consultant model that asks one question at a time, then request the
business documents once enough has been said.

Key components:
- InterviewManager: Main orchestrator for the interview state machine
- Transcript: Append-only record of the interview turns
- PhaseCoordinator: Guards transitions between the four phases
- ChatSession: Single-flight adapter over the conversational handle
- JSONExtractor: Parses structured data from LLM responses
"""

from .conversation_history import Speaker, Transcript, Turn
from .json_extractor import JSONExtractor
from .phase_coordinator import Phase, PhaseCoordinator
from .chat_session import ChatSession
from .interview_manager import InterviewManager

__all__ = [
    "Speaker",
    "Transcript",
    "Turn",
    "JSONExtractor",
    "Phase",
    "PhaseCoordinator",
    "ChatSession",
    "InterviewManager",
]
