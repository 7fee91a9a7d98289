"""Tests for propose, collect_settled, race_first and fold_settled."""

import asyncio
import gc
import operator

import pytest
from kungfu import Error, LazyCoroResult, Ok

from drills.lift import attempt, rejected, resolved
from drills.promises import (
    NO,
    YES,
    RacePolicy,
    collect_settled,
    fold_settled,
    propose,
    race_first,
)
from drills._errors import NothingToFoldError, WrongParameterError


def later(value, seconds):
    async def run():
        await asyncio.sleep(seconds)
        return Ok(value)

    return LazyCoroResult(run)


def later_error(error, seconds):
    async def run():
        await asyncio.sleep(seconds)
        return Error(error)

    return LazyCoroResult(run)


def error_of(result):
    match result:
        case Error(err):
            return err
        case Ok(value):
            pytest.fail(f"expected rejection, got Ok({value!r})")


# ---------------------------------------------------------------------------
# propose
# ---------------------------------------------------------------------------


class TestPropose:
    @pytest.mark.asyncio
    async def test_true(self):
        result = await propose(True)
        assert result.unwrap() == 'Hooray!!! She said "Yes"!'
        assert result.unwrap() == YES

    @pytest.mark.asyncio
    async def test_false(self):
        result = await propose(False)
        assert result.unwrap() == 'Oh no, she said "No".'
        assert result.unwrap() == NO

    @pytest.mark.asyncio
    async def test_no_argument(self):
        err = error_of(await propose())
        assert isinstance(err, WrongParameterError)
        assert str(err) == "Wrong parameter is passed! Ask her again."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("answer", [1, "yes", 0, []])
    async def test_non_boolean(self, answer):
        assert isinstance(error_of(await propose(answer)), WrongParameterError)


# ---------------------------------------------------------------------------
# collect_settled
# ---------------------------------------------------------------------------


class TestCollectSettled:
    @pytest.mark.asyncio
    async def test_all_fulfilled(self):
        result = await collect_settled([resolved(1), resolved(3), resolved(12)])
        assert result.unwrap() == [1, 3, 12]

    @pytest.mark.asyncio
    async def test_drops_rejection_keeps_order(self):
        result = await collect_settled([resolved(1), rejected("boom"), resolved(3)])
        assert result.unwrap() == [1, 3]

    @pytest.mark.asyncio
    async def test_order_is_input_order_not_completion_order(self):
        result = await collect_settled([later("slow", 0.03), later("fast", 0.0), later_error("x", 0.01)])
        assert result.unwrap() == ["slow", "fast"]

    @pytest.mark.asyncio
    async def test_all_rejected(self):
        result = await collect_settled([rejected(1), rejected(2)])
        assert result.unwrap() == []

    @pytest.mark.asyncio
    async def test_empty(self):
        assert (await collect_settled([])).unwrap() == []

    @pytest.mark.asyncio
    async def test_native_awaitables_through_attempt(self):
        async def ok():
            return "fine"

        async def boom():
            raise RuntimeError("boom")

        result = await collect_settled([attempt(ok), attempt(boom), attempt(ok)])
        assert result.unwrap() == ["fine", "fine"]

    @pytest.mark.asyncio
    async def test_lazy_until_awaited(self):
        calls = []

        async def run():
            calls.append(1)
            return Ok(1)

        interp = collect_settled([LazyCoroResult(run)])
        assert calls == []
        await interp
        assert calls == [1]


# ---------------------------------------------------------------------------
# race_first
# ---------------------------------------------------------------------------


class TestRaceFirst:
    @pytest.mark.asyncio
    async def test_first_resolved_wins(self):
        result = await race_first([resolved("first"), later("second", 0.5)])
        assert result.unwrap() == ["first"]

    @pytest.mark.asyncio
    async def test_fastest_regardless_of_position(self):
        result = await race_first([later("slow", 0.2), later("fast", 0.01)])
        assert result.unwrap() == ["fast"]

    @pytest.mark.asyncio
    async def test_first_rejection_propagates(self):
        result = await race_first([later("slow", 0.2), later_error("boom", 0.01)])
        assert error_of(result) == "boom"

    @pytest.mark.asyncio
    async def test_tie_goes_to_input_order(self):
        result = await race_first([resolved("a"), resolved("b")])
        assert result.unwrap() == ["a"]

    @pytest.mark.asyncio
    async def test_empty_raises(self):
        with pytest.raises(ValueError):
            await race_first([])

    @pytest.mark.asyncio
    async def test_losers_cancelled_by_default(self):
        cancelled = asyncio.Event()

        async def slow():
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return Ok("slow")

        result = await race_first([LazyCoroResult(slow), later("fast", 0.01)])
        assert result.unwrap() == ["fast"]
        await asyncio.wait_for(cancelled.wait(), timeout=1)

    @pytest.mark.asyncio
    async def test_losers_kept_running_when_policy_says_so(self):
        finished = asyncio.Event()

        async def slow():
            await asyncio.sleep(0.02)
            finished.set()
            return Ok("slow")

        result = await race_first(
            [LazyCoroResult(slow), resolved("fast")],
            policy=RacePolicy(cancel_pending=False),
        )
        assert result.unwrap() == ["fast"]
        await asyncio.wait_for(finished.wait(), timeout=1)

    @pytest.mark.asyncio
    async def test_outer_cancel_cancels_every_input_even_when_kept(self):
        started = asyncio.Event()
        cancelled = []

        def slow(name):
            async def run():
                started.set()
                try:
                    await asyncio.sleep(10)
                except asyncio.CancelledError:
                    cancelled.append(name)
                    raise
                return Ok(name)

            return LazyCoroResult(run)

        outer = asyncio.create_task(
            race_first([slow("a"), slow("b")], policy=RacePolicy(cancel_pending=False))
        )
        await asyncio.wait_for(started.wait(), timeout=1)
        await asyncio.sleep(0)
        outer.cancel()
        with pytest.raises(asyncio.CancelledError):
            await outer
        for _ in range(10):
            if len(cancelled) == 2:
                break
            await asyncio.sleep(0.01)
        assert sorted(cancelled) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_winner_exception_cancels_kept_losers(self):
        cancelled = asyncio.Event()

        async def slow():
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return Ok("slow")

        async def boom():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await race_first(
                [LazyCoroResult(slow), LazyCoroResult(boom)],
                policy=RacePolicy(cancel_pending=False),
            )
        await asyncio.wait_for(cancelled.wait(), timeout=1)

    @pytest.mark.asyncio
    async def test_kept_loser_exception_is_consumed(self):
        loop = asyncio.get_running_loop()
        reported = []
        loop.set_exception_handler(lambda _loop, context: reported.append(context))
        done = asyncio.Event()

        async def failing_loser():
            await asyncio.sleep(0.01)
            done.set()
            raise RuntimeError("late")

        try:
            result = await race_first(
                [LazyCoroResult(failing_loser), resolved("fast")],
                policy=RacePolicy(cancel_pending=False),
            )
            assert result.unwrap() == ["fast"]
            await asyncio.wait_for(done.wait(), timeout=1)
            await asyncio.sleep(0.01)
            gc.collect()
            assert reported == []
        finally:
            loop.set_exception_handler(None)


class TestRacePolicy:
    def test_default(self):
        assert RacePolicy().cancel_pending is True

    def test_rejects_non_bool(self):
        with pytest.raises(ValueError):
            RacePolicy(cancel_pending="yes")


# ---------------------------------------------------------------------------
# fold_settled
# ---------------------------------------------------------------------------


class TestFoldSettled:
    @pytest.mark.asyncio
    async def test_sum(self):
        result = await fold_settled([resolved(1), resolved(2), resolved(3)], operator.add)
        assert result.unwrap() == 6

    @pytest.mark.asyncio
    async def test_skips_rejections(self):
        result = await fold_settled([resolved(1), rejected("x"), resolved(3)], operator.add)
        assert result.unwrap() == 4

    @pytest.mark.asyncio
    async def test_left_to_right_in_input_order(self):
        interps = [later("a", 0.03), later("b", 0.0), later_error("x", 0.0), later("c", 0.01)]
        result = await fold_settled(interps, lambda acc, v: acc + v)
        assert result.unwrap() == "abc"

    @pytest.mark.asyncio
    async def test_waits_for_slow_inputs(self):
        result = await fold_settled([resolved(1), later(10, 0.02)], operator.add)
        assert result.unwrap() == 11

    @pytest.mark.asyncio
    async def test_initial_seeds_fold(self):
        result = await fold_settled([resolved(2), resolved(3)], operator.mul, initial=10)
        assert result.unwrap() == 60

    @pytest.mark.asyncio
    async def test_initial_returned_when_everything_rejects(self):
        result = await fold_settled([rejected("x")], operator.add, initial=0)
        assert result.unwrap() == 0

    @pytest.mark.asyncio
    async def test_nothing_to_fold(self):
        err = error_of(await fold_settled([rejected("x"), rejected("y")], operator.add))
        assert isinstance(err, NothingToFoldError)
        assert err.total == 2

    @pytest.mark.asyncio
    async def test_empty_input(self):
        err = error_of(await fold_settled([], operator.add))
        assert err.total == 0

    @pytest.mark.asyncio
    async def test_single_survivor_is_not_reduced(self):
        def reducer(acc, v):
            raise AssertionError("reducer should not run")

        result = await fold_settled([rejected("x"), resolved(7)], reducer)
        assert result.unwrap() == 7

    @pytest.mark.asyncio
    async def test_reducer_exception_propagates(self):
        def reducer(acc, v):
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            await fold_settled([resolved(1), resolved(2)], reducer)

    @pytest.mark.asyncio
    async def test_falsy_values_are_folded(self):
        result = await fold_settled([resolved(0), resolved(None)], lambda acc, v: (acc, v))
        assert result.unwrap() == (0, None)
