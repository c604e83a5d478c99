"""
Time-windowed batch dispatch of confirmed purge jobs.
"""

import asyncio
from typing import Awaitable, Callable

from cachebot.core.exceptions import DispatchQueueFullError
from cachebot.core.logging import get_logger
from cachebot.models.pending import QueuedJob
from cachebot.models.purge import PurgeOutcome
from cachebot.services.purge import PurgeExecutor

logger = get_logger(__name__)

Reporter = Callable[[QueuedJob, PurgeOutcome], Awaitable[None]]


class BatchDispatcher:
    """
    Accumulates confirmed jobs and executes them on a fixed tick.

    The update handlers are the only producer and the tick loop is the only
    consumer; the bounded queue between them is the sole shared state.
    """

    def __init__(
        self,
        executor: PurgeExecutor,
        reporter: Reporter,
        interval: float = 5.0,
        capacity: int = 10,
    ):
        self._executor = executor
        self._reporter = reporter
        self._interval = interval
        self._queue: asyncio.Queue[QueuedJob] = asyncio.Queue(maxsize=capacity)
        self._task: asyncio.Task | None = None

    @property
    def queued(self) -> int:
        """Number of jobs waiting for the next flush."""
        return self._queue.qsize()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def submit(self, job: QueuedJob) -> None:
        """
        Hand a confirmed job over to the dispatcher.

        Raises:
            DispatchQueueFullError: If the queue is at capacity
        """
        try:
            self._queue.put_nowait(job)
        except asyncio.QueueFull as e:
            raise DispatchQueueFullError(
                f"dispatch queue is full ({self._queue.maxsize} jobs)"
            ) from e
        logger.info("Queued purge job for requester %s", job.requester_id)

    def _drain(self) -> list[QueuedJob]:
        batch = []
        while True:
            try:
                batch.append(self._queue.get_nowait())
            except asyncio.QueueEmpty:
                return batch

    async def flush(self) -> int:
        """
        Execute every job queued so far, in arrival order.

        Returns:
            Number of jobs processed
        """
        batch = self._drain()
        if not batch:
            return 0

        logger.info("Flushing %d purge job(s)", len(batch))
        for job in batch:
            try:
                outcome = await self._executor.execute(job.scope)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Purge job for %s crashed", job.requester_id)
                outcome = PurgeOutcome.failure(str(exc))
            try:
                await self._reporter(job, outcome)
            except Exception as exc:  # noqa: BLE001
                logger.error("Failed to report purge outcome to %s: %s", job.requester_id, exc)
        return len(batch)

    async def run(self) -> None:
        """Flush on every tick until cancelled."""
        while True:
            await asyncio.sleep(self._interval)
            logger.debug("tick")
            try:
                await self.flush()
            except Exception as exc:  # noqa: BLE001
                logger.error("Flush failed: %s", exc)

    def start(self) -> asyncio.Task:
        """Start the tick loop as a background task."""
        if self.running:
            return self._task
        self._task = asyncio.create_task(self.run())
        return self._task

    async def stop(self) -> None:
        """Cancel the tick loop. Queued jobs are dropped."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        if self.queued:
            logger.warning("Dropping %d queued purge job(s) on shutdown", self.queued)
