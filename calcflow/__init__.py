"""calcflow: a stateful, asynchronous calculator and the tools to test it."""

from calcflow.core import ColdFlow, StatefulCalculator, StateView

__version__ = "0.1.0"

__all__ = ["ColdFlow", "StateView", "StatefulCalculator", "__version__"]
