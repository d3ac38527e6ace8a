"""Composition root for calcflow.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. Wiring of the clock into the
calculator happens here.
"""

import logging
import sys

from calcflow.adapters.clock.system import SystemClock
from calcflow.adapters.clock.virtual import VirtualTimeScheduler
from calcflow.config import Settings, load_settings
from calcflow.core.calculator import StatefulCalculator
from calcflow.core.ports import ClockPort

logger = logging.getLogger(__name__)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def create_clock(settings: Settings) -> ClockPort:
    """Instantiate the clock adapter selected by settings.

    Raises:
        ValueError: If the clock backend is unknown.
    """
    if settings.clock_backend == "system":
        logger.info(f"Clock adapter: system ({settings.time_unit_seconds}s per unit)")
        return SystemClock(time_unit_seconds=settings.time_unit_seconds)
    if settings.clock_backend == "virtual":
        logger.info("Clock adapter: virtual")
        return VirtualTimeScheduler()
    raise ValueError(f"Unknown clock backend: {settings.clock_backend}")


def create_calculator(
    settings: Settings | None = None,
    clock: ClockPort | None = None,
) -> StatefulCalculator:
    """Build a calculator wired to a clock.

    Args:
        settings: Settings to use. Loaded from the environment if omitted.
        clock: Clock to inject. Overrides settings.clock_backend.

    Returns:
        A fresh StatefulCalculator.
    """
    if settings is None:
        settings = load_settings()
    if clock is None:
        clock = create_clock(settings)

    return StatefulCalculator(
        clock=clock,
        fetch_delay=settings.fetch_delay,
        update_delay=settings.update_delay,
        fetch_result=settings.fetch_result,
    )


__all__ = ["configure_logging", "create_calculator", "create_clock"]
