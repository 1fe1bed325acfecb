"""Interview manager for conversational business-plan generation.

This is the main orchestrator that drives the interview state machine, from
the opening question through to the generated document bundle.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

from ..config import PlannerConfig
from ..exceptions import (
    BatchGenerationError,
    EmptyInputError,
    EmptyResponseError,
    GenerationPreconditionError,
    InvalidTransitionError,
    LLMServiceError,
    SendInFlightError,
)
from ..export import save_bundle
from ..llm_client import LLMClient
from ..models import DocumentBundle
from .chat_session import ChatSession
from .conversation_history import Transcript, Turn
from .phase_coordinator import Phase, PhaseCoordinator

if TYPE_CHECKING:
    from ..pipeline.document_pipeline import DocumentPipeline

logger = logging.getLogger(__name__)


class InterviewManager:
    """Main orchestrator for the business interview.

    Manages the flow across the four phases:
    1. Intro - Nothing started yet
    2. Interviewing - Chat with the consultant, one message at a time
    3. Generating - All nine documents are produced in parallel
    4. Results - The finished bundle, read-only

    Every failure either degrades inside the current phase (an error turn in
    the transcript) or returns to a phase that is still valid.

    Example:
        manager = InterviewManager(GeminiLLMClient(load_config()))
        await manager.start()

        while ...:
            turn = await manager.send(user_input)
            print(turn.text)

        bundle = await manager.finish()
    """

    def __init__(
        self,
        llm_client: LLMClient,
        config: Optional[PlannerConfig] = None,
        pipeline: Optional["DocumentPipeline"] = None,
    ):
        """Initialize interview manager.

        Args:
            llm_client: Collaborator used for both chat and one-shot calls
            config: Planner configuration
            pipeline: Document pipeline. Built from ``llm_client`` if None.
        """
        self.config = config or PlannerConfig()
        self.llm_client = llm_client

        if pipeline is None:
            from ..pipeline.document_pipeline import DocumentPipeline

            pipeline = DocumentPipeline(llm_client, self.config)
        self.pipeline = pipeline

        self.coordinator = PhaseCoordinator()

        # Session state
        self._transcript = Transcript()
        self._session: Optional[ChatSession] = None
        self._bundle: Optional[DocumentBundle] = None
        self._last_error: Optional[str] = None
        self._busy = False

        # Callbacks
        self._on_phase_change: Optional[Callable[[Phase, Phase], None]] = None
        self._on_progress: Optional[Callable[[Dict[str, Any]], None]] = None

        self.coordinator.set_on_phase_change(self._handle_phase_change)

    @property
    def phase(self) -> Phase:
        return self.coordinator.current_phase

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def turns(self) -> Tuple[Turn, ...]:
        return self._transcript.snapshot()

    @property
    def bundle(self) -> Optional[DocumentBundle]:
        return self._bundle

    @property
    def is_busy(self) -> bool:
        """True while a chat send or document generation is in flight."""
        return self._busy

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    def set_on_phase_change(self, callback: Callable[[Phase, Phase], None]) -> None:
        """Set callback for phase changes."""
        self._on_phase_change = callback

    def set_on_progress(self, callback: Callable[[Dict[str, Any]], None]) -> None:
        """Set callback for progress updates."""
        self._on_progress = callback

    async def start(self) -> Turn:
        """Start the interview.

        Opens a fresh chat session and sends the opening utterance. On failure
        the transcript is seeded with the localized start-error turn instead.

        Returns:
            The first assistant turn
        """
        self.coordinator.require(Phase.INTRO)

        self._transcript = Transcript()
        self._bundle = None
        self._last_error = None
        self.coordinator.transition(Phase.INTERVIEWING)

        transcript = self._transcript
        self._busy = True
        try:
            self._session = ChatSession.open(
                self.llm_client,
                self.coordinator.get_system_prompt(self.config.language),
            )
            reply = await self._session.send(self.config.opening_message)
        except LLMServiceError as e:
            logger.error("Failed to start chat: %s", e)
            reply = self.config.messages.start_error
        finally:
            self._busy = False

        return transcript.add_assistant_turn(reply)

    async def send(self, text: str) -> Turn:
        """Send one user utterance and record the reply.

        The user turn is appended before the request is issued. A failed
        request appends a localized error turn in place of the reply.

        Args:
            text: User's input

        Returns:
            The assistant turn appended for this round

        Raises:
            EmptyInputError: If ``text`` is blank
            SendInFlightError: If a previous send has not resolved
            InvalidTransitionError: If the interview is not in progress
        """
        if not text or not text.strip():
            raise EmptyInputError("Message is empty")
        self.coordinator.require(Phase.INTERVIEWING)
        if self._busy:
            raise SendInFlightError("A message is already being sent")

        transcript = self._transcript
        self._busy = True
        try:
            transcript.add_user_turn(text)
            try:
                session = self._ensure_session()
                reply = await session.send(text)
            except EmptyResponseError:
                logger.warning("Empty chat reply, using placeholder")
                reply = self.config.messages.empty_reply
            except LLMServiceError as e:
                logger.error("Chat error: %s", e)
                reply = self.config.messages.send_error
            return transcript.add_assistant_turn(reply)
        finally:
            self._busy = False

    def check_can_finish(self) -> None:
        """Raise if document generation may not start yet.

        Raises:
            InvalidTransitionError: If not interviewing
            SendInFlightError: If a send is pending
            GenerationPreconditionError: If the transcript is too short
        """
        self.coordinator.require(Phase.INTERVIEWING)
        if self._busy:
            raise SendInFlightError("Wait for the current reply before finishing")
        if len(self._transcript) < self.config.min_turns:
            raise GenerationPreconditionError(
                self.config.messages.finish_too_early,
                turn_count=len(self._transcript),
                required=self.config.min_turns,
            )

    async def finish(self) -> DocumentBundle:
        """Generate every document from the current transcript.

        Returns:
            The complete bundle; the phase is then RESULTS

        Raises:
            GenerationPreconditionError: If fewer than ``min_turns`` turns exist
            BatchGenerationError: If any document failed; the phase is back to
                INTERVIEWING with the transcript untouched
        """
        self.check_can_finish()

        snapshot = self._transcript.snapshot()
        self._last_error = None

        try:
            self._busy = True
            self.coordinator.transition(Phase.GENERATING)
            self._notify_progress("Generating documents...")
            bundle = await self.pipeline.generate_bundle(snapshot)
        except BatchGenerationError as e:
            logger.error("Generation failed: %s", ", ".join(sorted(e.failures)) or e)
            self._abort_generation(str(e))
            raise
        except Exception as e:
            logger.exception("Generation failed")
            self._abort_generation(self.config.messages.generation_failed)
            raise BatchGenerationError(self.config.messages.generation_failed, {"bundle": e}) from e
        except BaseException:
            logger.warning("Generation cancelled")
            self._abort_generation(self.config.messages.generation_failed)
            raise
        finally:
            self._busy = False

        self._bundle = bundle
        self.coordinator.transition(Phase.RESULTS)
        self._notify_progress("Documents ready!")
        return bundle

    def reset(self) -> None:
        """Discard transcript, chat session and bundle and return to INTRO."""
        if self._busy:
            raise SendInFlightError("Cannot reset while a request is pending")
        if self.phase == Phase.INTRO:
            return
        if not self.coordinator.can_transition(Phase.INTRO):
            raise InvalidTransitionError(self.phase.value, Phase.INTRO.value)

        if self._session is not None:
            self._session.close()
        self._session = None
        self._transcript = Transcript()
        self._bundle = None
        self._last_error = None

        self.coordinator.transition(Phase.INTRO)

    def save_results(self, save_dir: Path) -> Path:
        """Write the generated documents and transcript under ``save_dir``.

        Returns:
            The folder that was written
        """
        self.coordinator.require(Phase.RESULTS)
        if self._bundle is None:
            raise InvalidTransitionError(self.phase.value, "save")
        return save_bundle(
            self._bundle,
            self._transcript.snapshot(),
            Path(save_dir),
            placeholder=self.config.messages.no_canvas,
        )

    def get_progress(self) -> Dict[str, Any]:
        """Get current progress information."""
        progress = self.coordinator.get_progress()
        progress["turns"] = len(self._transcript)
        progress["busy"] = self._busy
        progress["has_bundle"] = self._bundle is not None
        return progress

    def _ensure_session(self) -> ChatSession:
        # A failed start leaves no session; typing retries opening one.
        if self._session is None or self._session.is_closed:
            self._session = ChatSession.open(
                self.llm_client,
                self.coordinator.get_system_prompt(self.config.language),
            )
        return self._session

    def _abort_generation(self, message: str) -> None:
        self._last_error = message
        # A failing GENERATING transition leaves the phase at INTERVIEWING.
        if self.phase == Phase.GENERATING:
            self.coordinator.transition(Phase.INTERVIEWING)

    def _handle_phase_change(self, old_phase: Phase, new_phase: Phase) -> None:
        """Handle phase change event."""
        if self._on_phase_change:
            self._on_phase_change(old_phase, new_phase)

        if self._on_progress:
            self._on_progress(self.get_progress())

    def _notify_progress(self, message: str) -> None:
        """Notify progress callback."""
        if self._on_progress:
            progress = self.get_progress()
            progress["message"] = message
            self._on_progress(progress)
