# =============================================================================
# promogen/llms/polling.py — Bounded polling of asynchronous provider jobs
# =============================================================================
# Stops at whichever comes first: the job reports done, max_attempts fetches,
# the wall-clock timeout, or the cancel event being set.
# =============================================================================

import asyncio
import time
from typing import Awaitable, Callable, TypeVar

from promogen.core.errors import PollCancelledError, PollTimeoutError

T = TypeVar("T")


async def poll_until_done(
    fetch: Callable[[], Awaitable[T]],
    is_done: Callable[[T], bool],
    *,
    interval: float,
    timeout: float,
    max_attempts: int,
    cancel_event: asyncio.Event | None = None,
) -> T:
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    deadline = time.monotonic() + timeout
    for attempt in range(1, max_attempts + 1):
        if cancel_event is not None and cancel_event.is_set():
            raise PollCancelledError()
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise PollTimeoutError(f"job not finished after {timeout:g}s")
        try:
            result = await asyncio.wait_for(fetch(), timeout=remaining)
        except asyncio.TimeoutError as e:
            raise PollTimeoutError(f"job not finished after {timeout:g}s") from e
        if is_done(result):
            return result
        if attempt == max_attempts:
            break
        delay = min(interval, max(deadline - time.monotonic(), 0.0))
        if cancel_event is None:
            await asyncio.sleep(delay)
            continue
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            continue
        raise PollCancelledError()
    raise PollTimeoutError(f"job not finished after {max_attempts} polls")
