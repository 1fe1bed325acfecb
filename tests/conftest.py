"""Shared fixtures for the planner test suite."""

import json

import pytest

from akyanpay_planner.config import PlannerConfig
from akyanpay_planner.interview import InterviewManager
from akyanpay_planner.mock_client import MockLLMClient

# Keyword found on the first line of each document prompt.
DOC_KEYWORDS = {
    "summary_note": "Summary Note",
    "bmc": "Business Model Canvas",
    "one_page_plan": "One Page Business Plan",
    "financial_plan": "Financial Projections",
    "strategic_plan": "Strategic Plan",
    "gtm_strategy": "Go-To-Market",
    "marketing_plan": "1-Page Marketing Plan",
    "ops_plan": "Operational Plan",
    "hr_plan": "Human Resources Plan",
}

CANVAS_DATA = {
    "keyPartners": ["Bean suppliers"],
    "keyActivities": ["Brewing"],
    "keyResources": ["Baristas"],
    "valuePropositions": ["Premium coffee"],
    "customerRelationships": ["Loyalty cards"],
    "channels": ["Storefront"],
    "customerSegments": ["Students"],
    "costStructure": ["Rent"],
    "revenueStreams": ["Drinks"],
}


@pytest.fixture
def doc_keywords():
    return dict(DOC_KEYWORDS)


@pytest.fixture
def canvas_data():
    return json.loads(json.dumps(CANVAS_DATA))


@pytest.fixture
def config():
    return PlannerConfig(language="English")


@pytest.fixture
def configure_documents():
    """Return a function that scripts every document reply on a mock client."""

    def _configure(client, **overrides):
        for name, keyword in DOC_KEYWORDS.items():
            if name == "bmc":
                reply = json.dumps(CANVAS_DATA)
            else:
                reply = f"## {name}\n\ncontent for {name}"
            client.set_completion(keyword, overrides.get(name, reply))
        return client

    return _configure


@pytest.fixture
def client(config, configure_documents):
    mock = MockLLMClient(config)
    mock.set_chat_replies([
        "Q1: What business? Options: coffee shop, clothing store",
        "Q2: Who are your customers? Options: students, office workers",
        "Q3: Why would they buy? Options: price, quality",
    ])
    return configure_documents(mock)


@pytest.fixture
def manager(client, config):
    return InterviewManager(client, config)
