"""Debouncer: one pending invocation, last trigger wins, in-flight work untouched."""

import asyncio
import logging

import pytest

from debugvault.services.debounce import Debouncer


async def test_burst_of_triggers_fires_once_with_last_args():
    calls = []
    debouncer = Debouncer(0.01, calls.append)
    for query in ["a", "ab", "abc"]:
        debouncer.trigger(query)
    assert debouncer.pending
    await debouncer.wait()
    assert calls == ["abc"]
    assert not debouncer.pending


async def test_async_callback_is_awaited():
    calls = []

    async def record(value):
        await asyncio.sleep(0)
        calls.append(value)

    debouncer = Debouncer(0.01, record)
    debouncer.trigger(value="x")
    await debouncer.wait()
    assert calls == ["x"]


async def test_separate_windows_fire_separately():
    calls = []
    debouncer = Debouncer(0.01, calls.append)
    debouncer.trigger(1)
    await debouncer.wait()
    debouncer.trigger(2)
    await debouncer.wait()
    assert calls == [1, 2]


async def test_cancel_drops_pending_invocation():
    calls = []
    debouncer = Debouncer(0.01, calls.append)
    debouncer.trigger("x")
    debouncer.cancel()
    debouncer.cancel()
    await asyncio.sleep(0.03)
    assert calls == []
    assert not debouncer.pending


async def test_flush_runs_pending_call_immediately():
    calls = []
    debouncer = Debouncer(60, calls.append)
    debouncer.trigger("now")
    await debouncer.flush()
    assert calls == ["now"]
    assert not debouncer.pending
    await debouncer.flush()
    assert calls == ["now"]


async def test_trigger_does_not_cancel_inflight_invocation():
    started = asyncio.Event()
    release = asyncio.Event()
    finished = []

    async def slow(tag):
        started.set()
        await release.wait()
        finished.append(tag)

    debouncer = Debouncer(0, slow)
    debouncer.trigger("first")
    await started.wait()
    debouncer.trigger("second")
    release.set()
    await debouncer.wait()
    assert sorted(finished) == ["first", "second"]


async def test_callback_exception_is_logged_not_raised(caplog):
    def boom():
        raise RuntimeError("kaput")

    debouncer = Debouncer(0, boom)
    with caplog.at_level(logging.ERROR, logger="debugvault.services.debounce"):
        debouncer.trigger()
        await debouncer.wait()
    assert "Debounced callback failed" in caplog.text


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Debouncer(-1, print)


async def test_trigger_logs_delay_in_milliseconds(caplog):
    debouncer = Debouncer(0.01, lambda: None)
    with caplog.at_level(logging.DEBUG, logger="debugvault.services.debounce"):
        debouncer.trigger()
        await debouncer.wait()
    scheduled = [r for r in caplog.records if r.getMessage() == "Debounced call scheduled"]
    assert [r.delay_ms for r in scheduled] == [10]
