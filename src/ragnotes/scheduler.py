# src/ragnotes/scheduler.py
"""Fire-and-forget background jobs."""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

Task = Callable[..., Awaitable[Any]]
"""A background job: an async callable taking the enqueued payload as kwargs."""


class TaskQueue(ABC):
    """Abstract base class for background job queues.

    Enqueued jobs run at least once, eventually, outside the caller's flow.
    Failures are never reported back to the enqueuer.
    """

    @abstractmethod
    def enqueue(
        self,
        task: Task,
        payload: dict[str, Any] | None = None,
        delay: float = 0.0,
    ) -> None:
        """Schedule a job to run after `delay` seconds."""
        ...


class AsyncioTaskQueue(TaskQueue):
    """Runs jobs as tasks on the current asyncio event loop.

    Failed jobs are retried up to max_attempts in total. Must be used from
    inside a running event loop.
    """

    def __init__(self, max_attempts: int = 1, retry_delay: float = 0.0) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of jobs that have not finished yet."""
        return len(self._tasks)

    def enqueue(
        self,
        task: Task,
        payload: dict[str, Any] | None = None,
        delay: float = 0.0,
    ) -> None:
        job = asyncio.get_running_loop().create_task(self._run(task, payload or {}, delay))
        self._tasks.add(job)
        job.add_done_callback(self._tasks.discard)

    async def join(self) -> None:
        """Wait for every pending job, including jobs enqueued while waiting."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _run(self, task: Task, payload: dict[str, Any], delay: float) -> None:
        if delay > 0:
            await asyncio.sleep(delay)

        name = getattr(task, "__qualname__", repr(task))
        for attempt in range(1, self.max_attempts + 1):
            try:
                await task(**payload)
                return
            except Exception as e:
                if attempt == self.max_attempts:
                    logger.exception(
                        "Job %s failed after %d attempt(s) (payload=%s)",
                        name,
                        attempt,
                        payload,
                    )
                    return
                logger.warning(
                    "Job %s failed on attempt %d/%d: %s; retrying",
                    name,
                    attempt,
                    self.max_attempts,
                    e,
                )
                if self.retry_delay > 0:
                    await asyncio.sleep(self.retry_delay)
