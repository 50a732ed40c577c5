"""TaskRunner – runs a store's asynchronous work off the dispatch path."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any

from wooflux.observability.logging import get_logger

logger = get_logger(__name__)


class TaskRunner:
    """Schedule coroutines on the running event loop and keep track of them.

    ``dispatch`` is synchronous, so stores hand network and disk work to the
    runner and report back through the action's completion callback.
    """

    def __init__(self) -> None:
        self._pending: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def spawn(self, coro: Coroutine[Any, Any, Any], *, name: str | None = None) -> asyncio.Task[Any]:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise RuntimeError(
                "Store work must be dispatched from inside a running event loop"
            ) from None
        task = loop.create_task(coro, name=name)
        self._pending.add(task)
        task.add_done_callback(self._on_done)
        return task

    async def join(self) -> None:
        """Wait until every scheduled task, including ones spawned meanwhile, finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def cancel_all(self) -> None:
        for task in list(self._pending):
            task.cancel()

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("background_task_failed", task=task.get_name(), exc_info=exc)


__all__ = ["TaskRunner"]
