"""Tests for the lift bridges."""

import asyncio

import pytest
from kungfu import Error, Ok

from drills import lift as L


def error_of(result):
    match result:
        case Error(err):
            return err
        case Ok(value):
            pytest.fail(f"expected rejection, got Ok({value!r})")


class TestUp:
    @pytest.mark.asyncio
    async def test_resolved(self):
        assert (await L.up.resolved(42)).unwrap() == 42

    @pytest.mark.asyncio
    async def test_rejected(self):
        assert error_of(await L.up.rejected("nope")) == "nope"

    @pytest.mark.asyncio
    async def test_attempt_with_future(self):
        loop = asyncio.get_running_loop()
        fut = loop.create_future()
        loop.call_soon(fut.set_result, "done")
        assert (await L.attempt(lambda: fut)).unwrap() == "done"

    @pytest.mark.asyncio
    async def test_attempt_exception_is_error(self):
        async def boom():
            raise KeyError("k")

        assert isinstance(error_of(await L.attempt(boom)), KeyError)

    @pytest.mark.asyncio
    async def test_attempt_on_error(self):
        async def boom():
            raise KeyError("k")

        assert error_of(await L.attempt(boom, on_error=lambda e: "mapped")) == "mapped"


class TestCatching:
    @pytest.mark.asyncio
    async def test_value(self):
        assert (await L.catching(lambda: int("12"), expected=ValueError)).unwrap() == 12

    @pytest.mark.asyncio
    async def test_expected_exception_rejects(self):
        err = error_of(await L.catching(lambda: int("x"), expected=ValueError))
        assert isinstance(err, ValueError)

    @pytest.mark.asyncio
    async def test_unexpected_exception_raises(self):
        def thunk():
            raise KeyError("k")

        with pytest.raises(KeyError):
            await L.catching(thunk, expected=ValueError)

    @pytest.mark.asyncio
    async def test_runs_only_when_awaited(self):
        calls = []
        interp = L.catching(lambda: calls.append(1), expected=ValueError)
        assert calls == []
        await interp
        assert calls == [1]


class TestCall:
    @pytest.mark.asyncio
    async def test_deferred_until_awaited(self):
        calls = []

        async def fetch(path, *, scale=1):
            calls.append(path)
            return Ok(len(path) * scale)

        interp = L.call(fetch, "abc", scale=2)
        assert calls == []
        assert (await interp).unwrap() == 6
        assert calls == ["abc"]
