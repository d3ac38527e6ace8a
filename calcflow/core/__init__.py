"""Core domain logic for calcflow.

This package contains zero external dependencies. Clock implementations
and wiring are handled by the adapters package and the composition root.
"""

from .calculator import StatefulCalculator
from .flow import ColdFlow, flow_of
from .ports import ClockPort
from .state import MutableStateCell, StateView

__all__ = [
    "ClockPort",
    "ColdFlow",
    "MutableStateCell",
    "StateView",
    "StatefulCalculator",
    "flow_of",
]
