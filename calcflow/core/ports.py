"""Port interfaces for the calcflow package.

The calculator never sleeps on its own. Every simulated delay goes
through a ClockPort, so the same code runs against real time in
production and against a virtual clock under test.

Adapters implementing these ports live in the adapters/ package.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable


class ClockPort(ABC):
    """Port for reading time and suspending for a simulated duration.

    Time is measured in abstract units. What a unit means is up to the
    adapter: milliseconds for the system clock, plain numbers for the
    virtual scheduler.
    """

    @abstractmethod
    def now(self) -> float:
        """Return the current time in time units."""

    @abstractmethod
    def sleep(self, delay: float) -> Awaitable[None]:
        """Suspend the calling task for ``delay`` time units.

        The returned awaitable must yield control to the scheduler rather
        than block, so other tasks keep running during the delay.

        Args:
            delay: Duration in time units. Zero means a plain yield.

        Returns:
            Awaitable that completes once the delay has elapsed.

        Raises:
            ValueError: If delay is negative.
        """


__all__ = ["ClockPort"]
