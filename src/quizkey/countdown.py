import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Countdown:
    """
    A cancellable once-per-interval ticker backed by a single asyncio task.

    Starting a countdown always cancels the previous one first, so at most
    one tick is ever pending.
    """

    def __init__(self, interval: float = 1.0):
        self.interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, on_tick: Callable[[], bool]):
        """Call on_tick every interval until it returns False or cancel() is called."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(on_tick))
        logger.debug(f"Countdown started with a {self.interval}s interval")

    def cancel(self):
        task, self._task = self._task, None
        if task is None or task.done():
            return
        # The tick callback may cancel its own countdown; the loop exits on its own
        if task is not asyncio.current_task():
            task.cancel()

    async def _run(self, on_tick: Callable[[], bool]):
        me = asyncio.current_task()
        while True:
            await asyncio.sleep(self.interval)
            if self._task is not me:
                break
            if not on_tick():
                break
        if self._task is me:
            self._task = None
