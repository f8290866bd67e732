"""Debounced, cancellable deferred writes on the running asyncio loop."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from loguru import logger


class Debouncer:
    """Coalesce bursts of calls into one deferred ``callback`` run.

    Every :meth:`schedule` cancels the pending run (if any) and starts a new
    one ``delay`` seconds out, so only the last call in a quiet window fires.

    Example::

        debouncer = Debouncer(1.0, store.flush)
        for keystroke in keystrokes:
            debouncer.schedule()
        await debouncer.flush()  # on close: run now, don't wait
    """

    def __init__(self, delay: float, callback: Callable[[], Awaitable[None]]):
        self.delay = delay
        self._callback = callback
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        """Whether a deferred run is scheduled and has not started yet."""
        return self._task is not None and not self._task.done()

    def schedule(self) -> None:
        """(Re)start the quiet-period timer. Must be called from a running loop."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run_later())

    def cancel(self) -> None:
        """Drop the pending run, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def flush(self) -> None:
        """Cancel the pending run and invoke the callback immediately."""
        self.cancel()
        await self._callback()

    async def _run_later(self) -> None:
        await asyncio.sleep(self.delay)
        # Past the sleep the run can no longer be superseded
        self._task = None
        try:
            await self._callback()
        except Exception as e:
            logger.error(f"Deferred write failed: {e}")
