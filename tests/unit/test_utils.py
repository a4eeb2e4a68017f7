"""
Unit tests for join combinators and helpers.
"""
import asyncio

import pytest

from productgen.utils import join_best_effort, join_required, to_slug


async def _value(v, delay=0.0):
    await asyncio.sleep(delay)
    return v


async def _fail(message, delay=0.0):
    await asyncio.sleep(delay)
    raise RuntimeError(message)


class TestJoinRequired:
    def test_returns_all_in_order(self):
        assert asyncio.run(join_required(_value(1, 0.02), _value(2), _value(3, 0.01))) == [1, 2, 3]

    def test_failure_propagates(self):
        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(join_required(_value(1), _fail("boom")))

    def test_empty(self):
        assert asyncio.run(join_required()) == []

    def test_first_failure_in_input_order(self):
        with pytest.raises(RuntimeError, match="first"):
            asyncio.run(join_required(_fail("first", 0.03), _value(2), _fail("second")))

    def test_waits_for_siblings_before_raising(self):
        finished = []

        async def slow():
            await asyncio.sleep(0.05)
            finished.append("slow")
            return "slow"

        async def main():
            with pytest.raises(RuntimeError, match="fast"):
                await join_required(_fail("fast"), slow())
            at_raise = list(finished)
            await asyncio.sleep(0.1)
            return at_raise, list(finished)

        at_raise, later = asyncio.run(main())
        assert at_raise == ["slow"]
        assert later == at_raise


class TestJoinBestEffort:
    def test_keeps_successes_in_order(self):
        aws = [_value("a", 0.02), _fail("x"), _value("c"), _fail("y", 0.01)]
        assert asyncio.run(join_best_effort(aws)) == ["a", "c"]

    def test_waits_for_slow_successes(self):
        aws = [_fail("fast"), _value("slow", 0.05)]
        assert asyncio.run(join_best_effort(aws)) == ["slow"]

    def test_all_fail_returns_empty(self):
        assert asyncio.run(join_best_effort([_fail("x"), _fail("y")])) == []

    def test_runs_concurrently(self):
        async def main():
            loop = asyncio.get_running_loop()
            start = loop.time()
            await join_best_effort([_value(i, 0.1) for i in range(5)])
            return loop.time() - start

        assert asyncio.run(main()) < 0.4


def test_to_slug():
    assert to_slug("Digital Planner") == "digitalplanner"
    assert to_slug("A/B Notebook") == "a-bnotebook"
