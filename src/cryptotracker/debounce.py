"""Debounce scheduling on the asyncio event loop."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

Action = Callable[[], Awaitable[None] | None]


class Debouncer:
    """Run only the last action scheduled within a quiet period.

    Each call to ``schedule`` cancels the pending action, if any, and
    restarts the quiet period. When the period elapses without another call,
    the most recent action runs exactly once. Coroutine functions are
    awaited inside the scheduler's task; plain callables are called.

    ``cancel`` drops the pending action. After ``close`` the scheduler
    refuses new actions, so nothing runs once its owner is discarded.
    An exception raised by an action is logged and does not affect later
    actions.
    """

    def __init__(self) -> None:
        self._task: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        """Whether an action is waiting for its quiet period to elapse."""
        return self._task is not None and not self._task.done()

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self, action: Action, quiet_period_ms: float) -> None:
        """Register ``action``, replacing any pending one.

        Must be called from within a running event loop.
        """
        if self._closed:
            logger.debug("Debouncer closed; dropping scheduled action")
            return
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(
            self._run_after(action, quiet_period_ms / 1000)
        )

    def cancel(self) -> None:
        """Cancel the pending action, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def close(self) -> None:
        """Cancel the pending action and reject all future ones."""
        self.cancel()
        self._closed = True

    async def _run_after(self, action: Action, delay: float) -> None:
        await asyncio.sleep(delay)
        # Detach before running so a schedule() from inside the action does not cancel it.
        self._task = None
        try:
            result = action()
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Debounced action failed")
