"""System clock adapter.

Implements ClockPort on top of the running asyncio event loop. One time
unit maps to ``time_unit_seconds`` of wall-clock time.
"""

import asyncio
import logging
import time

from calcflow.core.ports import ClockPort

logger = logging.getLogger(__name__)


class SystemClock(ClockPort):
    """Real-time clock backed by asyncio.sleep."""

    def __init__(self, time_unit_seconds: float = 0.001):
        """Initialize system clock.

        Args:
            time_unit_seconds: Wall-clock length of one time unit.
                Defaults to one millisecond.

        Raises:
            ValueError: If time_unit_seconds is not positive.
        """
        if time_unit_seconds <= 0:
            raise ValueError(
                f"time_unit_seconds must be positive, got {time_unit_seconds}"
            )
        self.time_unit_seconds = time_unit_seconds

    def now(self) -> float:
        try:
            seconds = asyncio.get_running_loop().time()
        except RuntimeError:
            # No running loop
            seconds = time.monotonic()
        return seconds / self.time_unit_seconds

    async def sleep(self, delay: float) -> None:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        logger.debug(f"Sleeping {delay} units ({delay * self.time_unit_seconds:.3f}s)")
        await asyncio.sleep(delay * self.time_unit_seconds)
