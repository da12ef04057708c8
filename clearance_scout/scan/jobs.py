"""Fire-and-forget background job runner for scan execution."""

import asyncio
import logging
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


class JobRunner:
    """
    Runs coroutines as detached asyncio tasks and keeps track of them.

    Callers never await the job; ``drain`` lets tests and shutdown wait for
    everything submitted so far.
    """

    def __init__(self):
        self._tasks: set[asyncio.Task] = set()

    @property
    def active_count(self) -> int:
        return len(self._tasks)

    def submit(self, job: Callable[..., Awaitable[Any]], *args, name: str | None = None) -> asyncio.Task:
        task = asyncio.create_task(job(*args), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if task.cancelled():
            logger.warning(f"Background job {task.get_name()} was cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Background job {task.get_name()} crashed: {exc}", exc_info=exc)

    async def drain(self, timeout: float | None = None):
        """Wait for all submitted jobs, including ones they submit in turn."""
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                break
            await asyncio.wait(pending, timeout=timeout)
            if timeout is not None:
                break

    async def shutdown(self, grace_seconds: float = 5.0):
        """Give running jobs a grace period, then cancel what is left."""
        if not self._tasks:
            return
        logger.info(f"Waiting for {len(self._tasks)} background jobs")
        await self.drain(timeout=grace_seconds)
        remaining = [task for task in self._tasks if not task.done()]
        for task in remaining:
            task.cancel()
        if remaining:
            await asyncio.gather(*remaining, return_exceptions=True)
