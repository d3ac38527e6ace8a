"""Single-slot observable state.

A MutableStateCell is owned by one writer. Everyone else gets a StateView,
which can read the current value but has no way to change it.
"""

from typing import Generic, TypeVar

T = TypeVar("T")


class MutableStateCell(Generic[T]):
    """Holds the last written value. No history is kept."""

    def __init__(self, initial: T):
        self._value = initial
        self._version = 0

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value
        self._version += 1

    @property
    def version(self) -> int:
        """Number of writes since construction."""
        return self._version

    def as_view(self) -> "StateView[T]":
        """Return a read-only view bound to this cell."""
        return StateView(self)

    def __repr__(self) -> str:
        return f"MutableStateCell(value={self._value!r}, version={self._version})"


class StateView(Generic[T]):
    """Read-only window onto a MutableStateCell."""

    __slots__ = ("_cell",)

    def __init__(self, cell: MutableStateCell[T]):
        self._cell = cell

    @property
    def value(self) -> T:
        return self._cell.value

    @property
    def version(self) -> int:
        return self._cell.version

    def __repr__(self) -> str:
        return f"StateView(value={self.value!r})"


__all__ = ["MutableStateCell", "StateView"]
