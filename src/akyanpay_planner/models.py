"""Pydantic models for the generated business documents."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class BusinessModelCanvas(BaseModel):
    """The nine-slot Business Model Canvas.

    Every slot is required. The service returns camelCase keys, which are
    accepted as aliases; Python code uses the snake_case names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key_partners: List[str] = Field(alias="keyPartners")
    key_activities: List[str] = Field(alias="keyActivities")
    key_resources: List[str] = Field(alias="keyResources")
    value_propositions: List[str] = Field(alias="valuePropositions")
    customer_relationships: List[str] = Field(alias="customerRelationships")
    channels: List[str] = Field(alias="channels")
    customer_segments: List[str] = Field(alias="customerSegments")
    cost_structure: List[str] = Field(alias="costStructure")
    revenue_streams: List[str] = Field(alias="revenueStreams")

    def to_json(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True)

    @classmethod
    def from_json(cls, data: str) -> "BusinessModelCanvas":
        return cls.model_validate_json(data)

    @classmethod
    def response_schema(cls) -> Dict[str, Any]:
        """Output constraint sent with the structured one-shot call."""
        keys = [f.alias for f in cls.model_fields.values()]
        return {
            "type": "OBJECT",
            "properties": {key: {"type": "ARRAY", "items": {"type": "STRING"}} for key in keys},
            "required": keys,
        }


CANVAS_TITLES: Dict[str, str] = {
    "key_partners": "Key Partners (မိတ်ဖက်များ)",
    "key_activities": "Key Activities (အဓိကလုပ်ဆောင်ချက်များ)",
    "key_resources": "Key Resources (အဓိကအရင်းအမြစ်များ)",
    "value_propositions": "Value Propositions (တန်ဖိုးထားမှုများ)",
    "customer_relationships": "Customer Relationships (ဖောက်သည်ဆက်ဆံရေး)",
    "channels": "Channels (ဖြန့်ဖြူးရေးလမ်းကြောင်းများ)",
    "customer_segments": "Customer Segments (ဖောက်သည်အမျိုးအစားများ)",
    "cost_structure": "Cost Structure (ကုန်ကျစရိတ်ဖွဲ့စည်းပုံ)",
    "revenue_streams": "Revenue Streams (ဝင်ငွေရလမ်းများ)",
}

# Display order matches the results tabs.
DOCUMENT_TITLES: Dict[str, str] = {
    "summary_note": "Summary Note",
    "bmc": "Business Model Canvas",
    "one_page_plan": "One Page Business Plan (စာမျက်နှာတစ်မျက်နှာ လုပ်ငန်းအစီအစဉ်)",
    "strategic_plan": "Strategic Plan (မဟာဗျူဟာ စီမံကိန်း)",
    "gtm_strategy": "Go-To-Market Strategy (ဈေးကွက်ဝင်ရောက်ရေး မဟာဗျူဟာ)",
    "marketing_plan": "1-Page Marketing Plan (ဈေးကွက်အစီအစဉ်)",
    "ops_plan": "Operational Plan (လုပ်ငန်းလည်ပတ်မှု အစီအစဉ်)",
    "hr_plan": "HR Plan (လူ့စွမ်းအားအရင်းအမြစ် စီမံခန့်ခွဲမှု)",
    "financial_plan": "Financial Plan & Projections (ဘဏ္ဍာရေးအစီအစဉ်)",
}


class DocumentBundle(BaseModel):
    """The nine generated documents from one interview.

    Built only once every generator has succeeded; ``bmc`` is None when the
    canvas could not be parsed.
    """

    model_config = ConfigDict(frozen=True)

    summary_note: str
    bmc: Optional[BusinessModelCanvas] = Field(...)
    one_page_plan: str
    financial_plan: str
    strategic_plan: str
    gtm_strategy: str
    marketing_plan: str
    ops_plan: str
    hr_plan: str

    def documents(self) -> Iterator[Tuple[str, str, Any]]:
        """Yield ``(field, title, content)`` in display order."""
        for name, title in DOCUMENT_TITLES.items():
            yield name, title, getattr(self, name)

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str) -> "DocumentBundle":
        return cls.model_validate_json(data)
