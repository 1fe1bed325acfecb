"""Exception hierarchy for the business planner."""

from __future__ import annotations

from typing import Dict, Optional


class PlannerError(Exception):
    """Base exception for the business planner."""

    pass


class LLMServiceError(PlannerError):
    """Raised when the hosted language model call fails."""

    pass


class EmptyResponseError(LLMServiceError):
    """Raised when the service answers with no text."""

    pass


class SendInFlightError(PlannerError):
    """Raised when a chat send is issued while another one is pending."""

    pass


class SessionClosedError(PlannerError):
    """Raised when a discarded chat session is used again."""

    pass


class EmptyInputError(PlannerError):
    """Raised when the user submits blank input."""

    pass


class InvalidTransitionError(PlannerError):
    """Raised on a phase change the interview state machine does not allow."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move from '{current}' to '{requested}'")


class GenerationPreconditionError(PlannerError):
    """Raised when document generation is requested too early."""

    def __init__(self, message: str, turn_count: int, required: int):
        self.turn_count = turn_count
        self.required = required
        super().__init__(message)


class BatchGenerationError(PlannerError):
    """Raised when any document in a generation batch fails.

    Carries every failure keyed by document name; the message is the single
    user-facing error.
    """

    def __init__(self, message: str, failures: Optional[Dict[str, BaseException]] = None):
        self.failures: Dict[str, BaseException] = dict(failures or {})
        super().__init__(message)
