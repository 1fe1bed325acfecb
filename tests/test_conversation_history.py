"""Unit tests for the interview transcript."""

import dataclasses

import pytest

from akyanpay_planner.interview.conversation_history import Speaker, Transcript, Turn, render_dialogue


class TestTranscript:
    """Tests for the append-only transcript."""

    def test_turns_kept_in_append_order(self):
        transcript = Transcript()
        transcript.add_assistant_turn("Q1")
        transcript.add_user_turn("A1")
        transcript.add_assistant_turn("Q2")

        assert [t.text for t in transcript] == ["Q1", "A1", "Q2"]
        assert [t.speaker for t in transcript] == [Speaker.ASSISTANT, Speaker.USER, Speaker.ASSISTANT]
        assert len(transcript) == 3

    def test_turn_is_immutable(self):
        turn = Transcript().add_user_turn("hello")

        with pytest.raises(dataclasses.FrozenInstanceError):
            turn.text = "changed"

    def test_snapshot_is_not_affected_by_later_turns(self):
        transcript = Transcript()
        transcript.add_assistant_turn("Q1")
        snapshot = transcript.snapshot()
        transcript.add_user_turn("A1")

        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_empty_transcript_is_falsy(self):
        transcript = Transcript()

        assert not transcript
        assert transcript.last_turn is None

    def test_to_list(self):
        transcript = Transcript()
        transcript.add_user_turn("hi")
        data = transcript.to_list()

        assert data[0]["speaker"] == "user"
        assert data[0]["text"] == "hi"
        assert "timestamp" in data[0]


class TestRenderDialogue:
    """Tests for the prompt rendering of turns."""

    def test_labels_user_and_consultant(self):
        transcript = Transcript()
        transcript.add_assistant_turn("What business?")
        transcript.add_user_turn("Coffee shop")

        assert transcript.render_dialogue() == "Consultant: What business?\nUser: Coffee shop"

    def test_empty(self):
        assert render_dialogue([]) == ""

    def test_accepts_tuple(self):
        turns = (Turn(Speaker.USER, "a"), Turn(Speaker.ASSISTANT, "b"))
        assert render_dialogue(turns) == "User: a\nConsultant: b"
