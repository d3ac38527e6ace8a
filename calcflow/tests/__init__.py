"""Test suite for calcflow.

Organized into three categories:

1. core/: Unit tests for the calculator, state cell and flows
   - No third-party dependencies beyond pytest
   - Uses FakeClock or the virtual scheduler for delays

2. adapters/: Tests for the clock adapters
   - SystemClock against the real asyncio event loop
   - VirtualTimeScheduler ordering and error behavior

3. fakes/: Port implementations for testing
   - FakeClock: records requested sleeps without waiting
"""
