"""Conversation transcript for the business interview.

This module stores the ordered turns exchanged during the interview and
renders them for the document prompts. The transcript is append-only: turns
are never removed, reordered or edited once recorded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterator, List, Tuple


class Speaker(str, Enum):
    """Who produced a turn."""
    USER = "user"
    ASSISTANT = "assistant"

    @property
    def label(self) -> str:
        """Label used when rendering the dialogue for prompts."""
        return "User" if self is Speaker.USER else "Consultant"


@dataclass(frozen=True)
class Turn:
    """A single utterance in the interview.

    Attributes:
        speaker: Who said it
        text: The utterance
        timestamp: When the turn was recorded
    """
    speaker: Speaker
    text: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert turn to dictionary format."""
        return {
            "speaker": self.speaker.value,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
        }


class Transcript:
    """Ordered, append-only record of the interview.

    Example:
        transcript = Transcript()
        transcript.add_assistant_turn("What business do you want to start?")
        transcript.add_user_turn("A coffee shop")

        prompt_context = transcript.render_dialogue()
    """

    def __init__(self) -> None:
        self._turns: List[Turn] = []

    def add_turn(self, speaker: Speaker, text: str) -> Turn:
        """Append a new turn and return it."""
        turn = Turn(speaker=speaker, text=text)
        self._turns.append(turn)
        return turn

    def add_user_turn(self, text: str) -> Turn:
        """Convenience method to add a user turn."""
        return self.add_turn(Speaker.USER, text)

    def add_assistant_turn(self, text: str) -> Turn:
        """Convenience method to add an assistant turn."""
        return self.add_turn(Speaker.ASSISTANT, text)

    def snapshot(self) -> Tuple[Turn, ...]:
        """Frozen copy of the turns recorded so far."""
        return tuple(self._turns)

    @property
    def last_turn(self) -> Turn | None:
        return self._turns[-1] if self._turns else None

    def to_list(self) -> List[Dict[str, Any]]:
        return [t.to_dict() for t in self._turns]

    def render_dialogue(self) -> str:
        """Render the transcript as speaker-labelled lines."""
        return render_dialogue(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))

    def __bool__(self) -> bool:
        return len(self._turns) > 0


def render_dialogue(turns: Tuple[Turn, ...] | List[Turn]) -> str:
    """Render turns chronologically as ``Label: text`` lines."""
    return "\n".join(f"{t.speaker.label}: {t.text}" for t in turns)
