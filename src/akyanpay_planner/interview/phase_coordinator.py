"""Phase coordination for the interview state machine.

This module tracks which screen of the planner is active, enforces the allowed
transitions between them, and renders the interviewer's system prompt.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

from ..exceptions import InvalidTransitionError
from ..templates import render_template

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Interview phases.

    - INTRO: No session exists yet
    - INTERVIEWING: Chatting with the consultant
    - GENERATING: Documents are being produced, input is closed
    - RESULTS: Read-only view of the generated documents
    """
    INTRO = "intro"
    INTERVIEWING = "interviewing"
    GENERATING = "generating"
    RESULTS = "results"

    @property
    def display_name(self) -> str:
        """Human-readable phase name."""
        return {
            Phase.INTRO: "Introduction",
            Phase.INTERVIEWING: "Interview",
            Phase.GENERATING: "Generating Documents",
            Phase.RESULTS: "Results",
        }[self]

    @property
    def accepts_input(self) -> bool:
        return self is Phase.INTERVIEWING


TRANSITIONS: Dict[Phase, FrozenSet[Phase]] = {
    Phase.INTRO: frozenset({Phase.INTERVIEWING}),
    Phase.INTERVIEWING: frozenset({Phase.GENERATING, Phase.INTRO}),
    Phase.GENERATING: frozenset({Phase.RESULTS, Phase.INTERVIEWING}),
    Phase.RESULTS: frozenset({Phase.INTRO}),
}

# Topic and example answers offered by the interviewer, in asking order.
INTERVIEW_ROADMAP: List[Tuple[str, List[str]]] = [
    ("Business Idea: Ask what business they want to start.",
     ["Online Clothing Shop", "Coffee Shop", "Car Rental Service", "Grocery Store"]),
    ("Target Customers: Ask who is the main customer.",
     ["University Students", "Office Workers", "Housewives", "High-income individuals"]),
    ("Value Proposition: Ask why customers should buy from them (Unique Selling Point).",
     ["Lowest Price", "Premium Quality", "Fast Delivery", "24/7 Customer Service"]),
    ("Revenue Models: Ask how they will make money.",
     ["Selling products directly", "Service fees", "Monthly Subscription", "Commission"]),
    ("Channels: Ask how they will reach customers.",
     ["Facebook Page & Ads", "TikTok Shop", "Physical Storefront", "Agent Network"]),
    ("Team & Operations: Ask about the team size and setup.",
     ["Solo Founder (1 person)", "Family Business", "Small Team (3-5 staff)"]),
    ("Cost Structure: Ask about major initial expenses.",
     ["Shop Rent & Decoration", "Stock Inventory", "Marketing Costs", "Staff Salaries"]),
]


class PhaseCoordinator:
    """Tracks the current phase and guards transitions.

    Example:
        coordinator = PhaseCoordinator()
        coordinator.transition(Phase.INTERVIEWING)
        coordinator.transition(Phase.RESULTS)  # raises InvalidTransitionError
    """

    def __init__(self, initial: Phase = Phase.INTRO):
        self._current_phase = initial
        self._history: List[Phase] = [initial]
        self._on_phase_change: Optional[Callable[[Phase, Phase], None]] = None

    @property
    def current_phase(self) -> Phase:
        return self._current_phase

    def set_on_phase_change(self, callback: Callable[[Phase, Phase], None]) -> None:
        """Set callback invoked as ``callback(old, new)`` after every transition."""
        self._on_phase_change = callback

    def can_transition(self, target: Phase) -> bool:
        return target in TRANSITIONS[self._current_phase]

    def require(self, *phases: Phase) -> None:
        """Raise unless the current phase is one of ``phases``."""
        if self._current_phase not in phases:
            raise InvalidTransitionError(self._current_phase.value, "/".join(p.value for p in phases))

    def transition(self, target: Phase) -> None:
        """Move to ``target``.

        Raises:
            InvalidTransitionError: If the edge is not part of the state machine
        """
        if not self.can_transition(target):
            raise InvalidTransitionError(self._current_phase.value, target.value)

        old = self._current_phase
        self._current_phase = target
        self._history.append(target)
        logger.info("Phase change: %s -> %s", old.value, target.value)

        if self._on_phase_change:
            self._on_phase_change(old, target)

    def get_system_prompt(self, language: str) -> str:
        """Render the interviewer's system instruction."""
        return render_template(
            "interviewer_system.jinja",
            {"language": language, "roadmap": INTERVIEW_ROADMAP},
        )

    def get_progress(self) -> Dict[str, Any]:
        """Get current progress information."""
        order = list(Phase)
        idx = order.index(self._current_phase)
        return {
            "phase": self._current_phase.value,
            "phase_name": self._current_phase.display_name,
            "transitions": len(self._history) - 1,
            "progress_percent": int(idx / (len(order) - 1) * 100),
        }
