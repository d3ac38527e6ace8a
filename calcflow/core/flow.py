"""Cold asynchronous sequences.

A ColdFlow does nothing until it is iterated, and each iteration starts
from the beginning. Two consumers never share a cursor.
"""

from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class ColdFlow(Generic[T]):
    """Restartable async sequence built from an iterator factory."""

    def __init__(self, factory: Callable[[], AsyncIterator[T]]):
        self._factory = factory

    def __aiter__(self) -> AsyncIterator[T]:
        return self._factory()

    async def to_list(self) -> list[T]:
        """Consume the flow once and collect every emitted value."""
        return [item async for item in self]


def flow_of(*values: T) -> ColdFlow[T]:
    """Build a flow that emits ``values`` in order with no delay."""

    async def _emit() -> AsyncIterator[T]:
        for value in values:
            yield value

    return ColdFlow(_emit)


__all__ = ["ColdFlow", "flow_of"]
