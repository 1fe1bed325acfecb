"""Unit tests for Markdown rendering and saving of documents."""

import json

from akyanpay_planner.export import bundle_to_markdown, canvas_to_markdown, save_bundle
from akyanpay_planner.interview.conversation_history import Transcript
from akyanpay_planner.models import BusinessModelCanvas, DocumentBundle


def make_bundle(bmc=None):
    return DocumentBundle(
        summary_note="note",
        bmc=bmc,
        one_page_plan="one page",
        financial_plan="| Revenue | 1 |",
        strategic_plan="strategy",
        gtm_strategy="gtm",
        marketing_plan="marketing",
        ops_plan="ops",
        hr_plan="hr",
    )


class TestCanvasToMarkdown:
    """Tests for canvas_to_markdown."""

    def test_placeholder_when_missing(self):
        assert canvas_to_markdown(None, "No data available") == "No data available"

    def test_sections(self, canvas_data):
        text = canvas_to_markdown(BusinessModelCanvas.model_validate(canvas_data))

        assert text.startswith("### Key Partners")
        assert "- Bean suppliers" in text
        assert text.count("### ") == 9

    def test_empty_slot(self, canvas_data):
        canvas_data["channels"] = []
        text = canvas_to_markdown(BusinessModelCanvas.model_validate(canvas_data))

        assert "### Channels (ဖြန့်ဖြူးရေးလမ်းကြောင်းများ)\n-" in text


class TestSaveBundle:
    """Tests for bundle_to_markdown and save_bundle."""

    def test_bundle_markdown_in_display_order(self):
        text = bundle_to_markdown(make_bundle(), placeholder="none")

        assert text.index("# Summary Note") < text.index("# Business Model Canvas")
        assert text.index("# HR Plan") < text.index("# Financial Plan")
        assert "none" in text

    def test_save_without_canvas(self, tmp_path):
        transcript = Transcript()
        transcript.add_assistant_turn("Q1")

        output_dir = save_bundle(make_bundle(), transcript.snapshot(), tmp_path, placeholder="none")

        assert not (output_dir / "bmc.json").exists()
        assert (output_dir / "bmc.md").read_text(encoding="utf-8") == "none"
        assert (output_dir / "financial_plan.md").read_text(encoding="utf-8") == "| Revenue | 1 |"
        assert (output_dir / "business_plan.md").exists()
        assert json.loads((output_dir / "transcript.json").read_text(encoding="utf-8"))[0]["text"] == "Q1"

    def test_save_with_canvas(self, tmp_path, canvas_data):
        bundle = make_bundle(bmc=BusinessModelCanvas.model_validate(canvas_data))

        output_dir = save_bundle(bundle, (), tmp_path)

        assert json.loads((output_dir / "bmc.json").read_text(encoding="utf-8")) == canvas_data
