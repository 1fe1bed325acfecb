"""Tests for the offline demo client used by the CLI."""

import pytest

from akyanpay_planner.cli import build_mock_client
from akyanpay_planner.interview import InterviewManager, Phase


class TestMockDemo:
    """The --mock client drives a whole interview offline."""

    @pytest.mark.asyncio
    async def test_full_flow(self, config):
        client = build_mock_client(config)
        manager = InterviewManager(client, config)

        first = await manager.start()
        await manager.send("Coffee Shop")
        bundle = await manager.finish()

        assert "What business" in first.text
        assert manager.phase == Phase.RESULTS
        assert bundle.bmc.channels == ["Storefront", "Facebook Page"]
        assert bundle.hr_plan.startswith("## Human Resources Plan")
