"""Periodic trigger for aggregation passes."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from video_announcer.core import PassReport

logger = logging.getLogger(__name__)


class PassScheduler:
    """Run a pass on startup and then at a fixed interval.

    Passes never overlap: a trigger that fires while a pass is still in
    flight is skipped.
    """

    def __init__(
        self,
        run_pass: Callable[[], Awaitable[PassReport]],
        interval_seconds: float,
        run_on_startup: bool = True,
    ) -> None:
        self.run_pass = run_pass
        self.interval_seconds = interval_seconds
        self.run_on_startup = run_on_startup
        self._in_flight = False
        self._shutdown = asyncio.Event()
        self._tasks: set[asyncio.Task] = set()

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def run_guarded(self) -> Optional[PassReport]:
        """Run one pass unless another one is still running.

        Returns:
            The pass report, or None if the trigger was skipped or the pass raised.
        """
        if self._in_flight:
            logger.warning("Previous aggregation pass still running, skipping this trigger")
            return None

        self._in_flight = True
        try:
            return await self.run_pass()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.exception("Aggregation pass failed: %s", e)
            return None
        finally:
            self._in_flight = False

    async def run_forever(self) -> None:
        """Trigger passes until stop() is called."""
        logger.info(
            "Scheduled content aggregation every %.1f hours.", self.interval_seconds / 3600
        )
        run_now = self.run_on_startup

        while not self._shutdown.is_set():
            if run_now:
                task = asyncio.create_task(self.run_guarded())
                self._tasks.add(task)
                task.add_done_callback(self._tasks.discard)
            run_now = True

            try:
                await asyncio.wait_for(self._shutdown.wait(), timeout=self.interval_seconds)
            except asyncio.TimeoutError:
                continue

        if self._tasks:
            logger.info("Waiting for the running aggregation pass to finish")
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def stop(self) -> None:
        """Stop triggering new passes. A pass in flight is left to finish."""
        self._shutdown.set()
