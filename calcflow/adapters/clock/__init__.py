"""Clock adapters implementing ClockPort.

- SystemClock: real time through asyncio.sleep
- VirtualTimeScheduler: virtual time advanced explicitly by tests
"""

from .system import SystemClock
from .virtual import VirtualTask, VirtualTimeScheduler

__all__ = ["SystemClock", "VirtualTask", "VirtualTimeScheduler"]
