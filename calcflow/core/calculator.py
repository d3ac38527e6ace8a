"""The stateful calculator used as a unit-testing fixture.

It carries two pieces of state: a plain counter and an observable value.
Two of its operations suspend for a fixed simulated delay, which they
spend inside ``ClockPort.sleep`` so a test can swap real time for
virtual time.
"""

import logging

from .flow import ColdFlow, flow_of
from .ports import ClockPort
from .state import MutableStateCell, StateView

logger = logging.getLogger(__name__)

DEFAULT_FETCH_DELAY = 1000
DEFAULT_UPDATE_DELAY = 500
DEFAULT_FETCH_RESULT = 42


class StatefulCalculator:
    """Calculator with a counter, an observable value and delayed operations."""

    def __init__(
        self,
        clock: ClockPort,
        fetch_delay: int = DEFAULT_FETCH_DELAY,
        update_delay: int = DEFAULT_UPDATE_DELAY,
        fetch_result: int = DEFAULT_FETCH_RESULT,
    ):
        """Initialize calculator.

        Args:
            clock: Clock used for every simulated delay.
            fetch_delay: Time units fetch_result_async waits before returning.
            update_delay: Time units update_state_flow waits before writing.
            fetch_result: Value fetch_result_async resolves to.

        Raises:
            ValueError: If either delay is negative.
        """
        if fetch_delay < 0:
            raise ValueError(f"fetch_delay must be non-negative, got {fetch_delay}")
        if update_delay < 0:
            raise ValueError(f"update_delay must be non-negative, got {update_delay}")

        self.clock = clock
        self.fetch_delay = fetch_delay
        self.update_delay = update_delay
        self.fetch_result = fetch_result
        self._counter = 0
        self._state_cell: MutableStateCell[int] = MutableStateCell(0)

    def add_integers(self, a: int, b: int) -> int:
        return a + b

    def add_floats(self, a: float, b: float) -> float:
        """Add two floats.

        Subject to ordinary floating-point rounding; compare results with
        a tolerance.
        """
        return a + b

    def increment_state(self) -> None:
        self._counter += 1

    def get_state(self) -> int:
        return self._counter

    @property
    def state(self) -> int:
        """Current counter value."""
        return self._counter

    @property
    def state_flow(self) -> StateView[int]:
        """Read-only view of the observable value."""
        return self._state_cell.as_view()

    async def fetch_result_async(self) -> int:
        """Simulate a long-running fetch.

        Suspends the calling task for ``fetch_delay`` time units, then
        returns ``fetch_result``.
        """
        logger.debug(f"Fetching result (delay={self.fetch_delay})")
        await self.clock.sleep(self.fetch_delay)
        logger.debug(f"Fetched result {self.fetch_result}")
        return self.fetch_result

    def fetch_result_flow(self) -> ColdFlow[int]:
        """Return a cold flow emitting 1, 2, 3."""
        return flow_of(1, 2, 3)

    async def update_state_flow(self, new_value: int) -> None:
        """Write ``new_value`` to the observable value after ``update_delay``.

        Until the delay elapses, readers of ``state_flow`` keep seeing the
        previous value. When several updates overlap, the last one to
        finish wins.
        """
        logger.debug(
            f"Scheduling state update to {new_value} (delay={self.update_delay})"
        )
        await self.clock.sleep(self.update_delay)
        previous = self._state_cell.value
        self._state_cell.value = new_value
        logger.debug(f"State updated from {previous} to {new_value}")


__all__ = [
    "DEFAULT_FETCH_DELAY",
    "DEFAULT_FETCH_RESULT",
    "DEFAULT_UPDATE_DELAY",
    "StatefulCalculator",
]
