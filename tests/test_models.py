"""Unit tests for document models."""

import pytest
from pydantic import ValidationError

from akyanpay_planner.models import (
    CANVAS_TITLES,
    DOCUMENT_TITLES,
    BusinessModelCanvas,
    DocumentBundle,
)


def make_bundle(**overrides):
    fields = {
        "summary_note": "note",
        "bmc": None,
        "one_page_plan": "one page",
        "financial_plan": "finance",
        "strategic_plan": "strategy",
        "gtm_strategy": "gtm",
        "marketing_plan": "marketing",
        "ops_plan": "ops",
        "hr_plan": "hr",
    }
    fields.update(overrides)
    return DocumentBundle(**fields)


class TestBusinessModelCanvas:
    """Tests for the nine-slot canvas."""

    def test_accepts_camel_case_keys(self, canvas_data):
        canvas = BusinessModelCanvas.model_validate(canvas_data)

        assert canvas.key_partners == ["Bean suppliers"]
        assert canvas.revenue_streams == ["Drinks"]

    def test_accepts_snake_case_names(self):
        canvas = BusinessModelCanvas(**{name: [name] for name in CANVAS_TITLES})
        assert canvas.channels == ["channels"]

    def test_missing_slot_is_invalid(self, canvas_data):
        del canvas_data["costStructure"]

        with pytest.raises(ValidationError):
            BusinessModelCanvas.model_validate(canvas_data)

    def test_wrong_type_is_invalid(self, canvas_data):
        canvas_data["channels"] = "Storefront"

        with pytest.raises(ValidationError):
            BusinessModelCanvas.model_validate(canvas_data)

    def test_json_round_trip_uses_service_keys(self, canvas_data):
        canvas = BusinessModelCanvas.model_validate(canvas_data)
        text = canvas.to_json()

        assert '"keyPartners"' in text
        assert BusinessModelCanvas.from_json(text) == canvas

    def test_response_schema_requires_all_nine(self):
        schema = BusinessModelCanvas.response_schema()

        assert schema["type"] == "OBJECT"
        assert len(schema["required"]) == 9
        assert set(schema["properties"]) == set(schema["required"])
        assert schema["properties"]["valuePropositions"]["items"]["type"] == "STRING"


class TestDocumentBundle:
    """Tests for the bundle of generated documents."""

    def test_all_nine_fields_required(self):
        with pytest.raises(ValidationError):
            DocumentBundle(summary_note="x", bmc=None)

    def test_bmc_must_be_given_even_if_none(self):
        fields = make_bundle().model_dump()
        del fields["bmc"]

        with pytest.raises(ValidationError):
            DocumentBundle(**fields)

    def test_bundle_is_frozen(self):
        bundle = make_bundle()

        with pytest.raises(ValidationError):
            bundle.summary_note = "changed"

    def test_documents_in_display_order(self):
        bundle = make_bundle()
        names = [name for name, _title, _content in bundle.documents()]

        assert names == list(DOCUMENT_TITLES)
        assert len(names) == 9

    def test_round_trip_with_canvas(self, canvas_data):
        bundle = make_bundle(bmc=BusinessModelCanvas.model_validate(canvas_data))
        restored = DocumentBundle.from_json(bundle.to_json())

        assert restored == bundle
