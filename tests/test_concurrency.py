"""Unit tests for the concurrency helpers."""

import asyncio

import pytest

from akyanpay_planner.concurrency import ConcurrencyManager
from akyanpay_planner.config import PlannerConfig
from akyanpay_planner.exceptions import BatchGenerationError


async def _value(value, delay=0.0):
    await asyncio.sleep(delay)
    return value


async def _fail(message, delay=0.0):
    await asyncio.sleep(delay)
    raise ValueError(message)


class TestConcurrencyManager:
    """Tests for ConcurrencyManager."""

    def test_limit_from_config(self):
        assert ConcurrencyManager(PlannerConfig(max_concurrent_requests=3)).limit == 3
        assert ConcurrencyManager().limit == 9
        assert ConcurrencyManager(max_concurrent=2).limit == 2

    @pytest.mark.asyncio
    async def test_results_keep_input_order(self):
        manager = ConcurrencyManager()

        results = await manager.gather_all_or_fail({
            "slow": _value(1, 0.02),
            "fast": _value(2),
            "medium": _value(3, 0.01),
        })

        assert list(results.items()) == [("slow", 1), ("fast", 2), ("medium", 3)]

    @pytest.mark.asyncio
    async def test_limit_is_respected(self):
        manager = ConcurrencyManager(max_concurrent=2)
        active = 0
        peak = 0

        async def tracked(i):
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1
            return i

        results = await manager.gather_all_or_fail({str(i): tracked(i) for i in range(6)})

        assert peak == 2
        assert len(results) == 6

    @pytest.mark.asyncio
    async def test_any_failure_raises_with_all_failures(self):
        manager = ConcurrencyManager()

        with pytest.raises(BatchGenerationError) as exc_info:
            await manager.gather_all_or_fail(
                {"ok": _value(1), "bad": _fail("x"), "worse": _fail("y")},
                message="Generation Failed",
            )

        assert str(exc_info.value) == "Generation Failed"
        assert set(exc_info.value.failures) == {"bad", "worse"}

    @pytest.mark.asyncio
    async def test_siblings_settle_before_error(self):
        manager = ConcurrencyManager()
        finished = []

        async def slow():
            await asyncio.sleep(0.02)
            finished.append("slow")
            return "done"

        with pytest.raises(BatchGenerationError):
            await manager.gather_all_or_fail({"bad": _fail("early"), "slow": slow()})

        assert finished == ["slow"]

    @pytest.mark.asyncio
    async def test_gather_settled_returns_exceptions(self):
        manager = ConcurrencyManager()

        outcomes = await manager.gather_settled({"a": _value("a"), "b": _fail("b")})

        assert outcomes["a"] == "a"
        assert isinstance(outcomes["b"], ValueError)
