"""Fake implementations of core ports for testing.

- FakeClock: records requested sleeps and returns immediately
"""

from .clock import FakeClock

__all__ = ["FakeClock"]
