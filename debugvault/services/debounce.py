"""Debouncer: cancellable delayed invocation on the asyncio event loop.

Invariants:
    - At most one pending invocation; trigger() cancels and replaces it
    - Only the last trigger of a settled window fires, exactly once, with its own args
    - An invocation that already started is never cancelled by a later trigger
    - Callback exceptions are logged, never re-raised into the event loop

Design Decisions:
    - asyncio.Task + asyncio.sleep over loop.call_later: async callbacks awaited in the same task
    - Sync and async callbacks both accepted
"""

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Delay a callback until triggers stop arriving for `delay_seconds`."""

    def __init__(self, delay_seconds: float, callback: Callable[..., Any]):
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self._delay = delay_seconds
        self._callback = callback
        self._task: asyncio.Task | None = None
        self._pending_call: tuple[tuple, dict] | None = None
        self._inflight: set[asyncio.Task] = set()

    @property
    def delay_seconds(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._task is not None

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        """Schedule the callback, superseding any pending invocation."""
        self.cancel()
        self._pending_call = (args, kwargs)
        self._task = asyncio.get_running_loop().create_task(self._fire_later())
        logger.debug("Debounced call scheduled", extra={"delay_ms": round(self._delay * 1000)})

    def cancel(self) -> None:
        """Drop the pending invocation, if any. Idempotent."""
        if self._task is not None:
            self._task.cancel()
        self._task = None
        self._pending_call = None

    async def flush(self) -> None:
        """Run the pending invocation now instead of waiting out the delay."""
        if self._pending_call is None:
            return
        args, kwargs = self._pending_call
        self.cancel()
        await self._invoke(args, kwargs)

    async def wait(self) -> None:
        """Wait until nothing is pending or running."""
        while self._task is not None or self._inflight:
            tasks = [t for t in (self._task, *self._inflight) if t is not None]
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _fire_later(self) -> None:
        await asyncio.sleep(self._delay)
        args, kwargs = self._pending_call
        # From here the call is in flight, out of reach of cancel()
        self._task = None
        self._pending_call = None
        task = asyncio.current_task()
        self._inflight.add(task)
        try:
            await self._invoke(args, kwargs)
        finally:
            self._inflight.discard(task)

    async def _invoke(self, args: tuple, kwargs: dict) -> None:
        try:
            result = self._callback(*args, **kwargs)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Debounced callback failed")
