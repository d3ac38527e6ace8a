"""Virtual-time scheduler adapter.

Implements ClockPort with a clock that only moves when a test tells it
to. Coroutines launched on the scheduler are driven step by step: a task
that sleeps registers its resume time and gives up control, and the test
harness advances the clock to resume every task that has come due.

Nothing here touches the asyncio event loop or wall-clock time, so a
thousand-unit delay costs nothing and every run resumes tasks in the
same order.
"""

import heapq
import inspect
import itertools
import logging
from collections import deque
from collections.abc import Coroutine, Generator, Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from calcflow.core.ports import ClockPort

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Delay:
    """Awaitable returned by VirtualTimeScheduler.sleep."""

    __slots__ = ("delay",)

    def __init__(self, delay: float):
        self.delay = delay

    def __await__(self) -> Generator["_Delay", None, None]:
        yield self


class _Join:
    """Request to suspend until another virtual task finishes."""

    __slots__ = ("task",)

    def __init__(self, task: "VirtualTask[Any]"):
        self.task = task


class VirtualTask(Generic[T]):
    """A coroutine driven by a VirtualTimeScheduler.

    Awaiting a VirtualTask from another task on the same scheduler
    suspends the caller until this task finishes, then returns its result
    or raises its exception.
    """

    def __init__(self, coro: Coroutine[Any, Any, T], name: str):
        self.name = name
        self._coro = coro
        self._done = False
        self._result: T | None = None
        self._exception: BaseException | None = None
        self._waiters: list[VirtualTask[Any]] = []

    def done(self) -> bool:
        return self._done

    def result(self) -> T:
        """Return the task's result.

        Raises:
            RuntimeError: If the task has not finished yet.
            Exception: Whatever the coroutine raised, re-raised as is.
        """
        if not self._done:
            raise RuntimeError(f"Task {self.name} has not finished")
        if self._exception is not None:
            raise self._exception
        return self._result  # type: ignore[return-value]

    def exception(self) -> BaseException | None:
        if not self._done:
            raise RuntimeError(f"Task {self.name} has not finished")
        return self._exception

    def __await__(self) -> Generator[Any, None, T]:
        if not self._done:
            yield _Join(self)
        return self.result()

    def __repr__(self) -> str:
        state = "done" if self._done else "pending"
        return f"<VirtualTask {self.name} {state}>"


class VirtualTimeScheduler(ClockPort):
    """Cooperative single-threaded scheduler over a virtual clock.

    Tasks due at the same time are resumed in the order they went to
    sleep. Launching a task only queues it; nothing runs until one of
    run_current, advance_time_by, advance_until_idle or
    run_until_complete is called.
    """

    def __init__(self, start_time: float = 0):
        self._time = start_time
        self._ready: deque[VirtualTask[Any]] = deque()
        self._timers: list[tuple[float, int, VirtualTask[Any]]] = []
        self._sequence = itertools.count()
        self._task_ids = itertools.count(1)
        self._driving = False

    @property
    def current_time(self) -> float:
        return self._time

    @property
    def pending_tasks(self) -> int:
        """Tasks that are ready to run or sleeping."""
        return len(self._ready) + len(self._timers)

    def now(self) -> float:
        return self._time

    def sleep(self, delay: float) -> _Delay:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        return _Delay(delay)

    def launch(
        self, coro: Coroutine[Any, Any, T], name: str | None = None
    ) -> VirtualTask[T]:
        """Queue a coroutine to run on this scheduler.

        Args:
            coro: Coroutine object to drive.
            name: Optional task name used in logs and errors.

        Returns:
            VirtualTask handle for the coroutine.

        Raises:
            TypeError: If coro is not a coroutine object.
        """
        if not inspect.iscoroutine(coro):
            raise TypeError(f"Expected a coroutine, got {type(coro).__name__}")

        task: VirtualTask[T] = VirtualTask(
            coro, name or f"virtual-task-{next(self._task_ids)}"
        )
        self._ready.append(task)
        return task

    def run_current(self) -> None:
        """Run every ready task without moving the clock."""
        with self._drive():
            self._run_ready()

    def advance_time_by(self, delta: float) -> None:
        """Move the clock forward and resume tasks that come due.

        Tasks whose resume time is at or before the new time are resumed,
        earliest first. The clock ends exactly ``delta`` units later even
        when nothing was scheduled.

        Raises:
            ValueError: If delta is negative.
            RuntimeError: If called from inside a running virtual task.
        """
        if delta < 0:
            raise ValueError(f"delta must be non-negative, got {delta}")

        target = self._time + delta
        with self._drive():
            self._run_ready()
            while self._timers and self._timers[0][0] <= target:
                self._fire_next_timers()
                self._run_ready()
            self._time = target
        logger.debug(f"Advanced virtual time by {delta} to {self._time}")

    def advance_until_idle(self) -> None:
        """Keep jumping to the next resume time until no task is left."""
        with self._drive():
            self._run_ready()
            while self._timers:
                self._fire_next_timers()
                self._run_ready()
        logger.debug(f"Virtual scheduler idle at {self._time}")

    def run_until_complete(self, coro: Coroutine[Any, Any, T]) -> T:
        """Drive a coroutine to completion, skipping over its delays.

        Other tasks due before the coroutine finishes run too. Tasks due
        later are left pending.

        Returns:
            The coroutine's result.

        Raises:
            RuntimeError: If the coroutine can never finish.
            Exception: Whatever the coroutine raised.
        """
        task = self.launch(coro)
        with self._drive():
            self._run_ready()
            while not task.done() and self._timers:
                self._fire_next_timers()
                self._run_ready()

        if not task.done():
            raise RuntimeError(
                f"Task {task.name} is blocked with no pending timers to wake it"
            )
        return task.result()

    @contextmanager
    def _drive(self) -> Iterator[None]:
        if self._driving:
            raise RuntimeError("Virtual scheduler is already running")
        self._driving = True
        try:
            yield
        finally:
            self._driving = False

    def _fire_next_timers(self) -> None:
        """Move the clock to the earliest timer and ready every task due then."""
        due_at = self._timers[0][0]
        self._time = due_at
        while self._timers and self._timers[0][0] == due_at:
            _, _, task = heapq.heappop(self._timers)
            self._ready.append(task)

    def _run_ready(self) -> None:
        while self._ready:
            self._step(self._ready.popleft())

    def _step(self, task: VirtualTask[Any]) -> None:
        try:
            request = task._coro.send(None)
        except StopIteration as exc:
            self._finish(task, result=exc.value)
            return
        except BaseException as exc:
            logger.warning(f"Virtual task {task.name} failed: {exc!r}")
            self._finish(task, exception=exc)
            if isinstance(exc, (KeyboardInterrupt, SystemExit)):
                raise
            return

        if request is None:
            # Bare yield, e.g. asyncio.sleep(0)
            self._ready.append(task)
        elif isinstance(request, _Delay):
            if request.delay == 0:
                self._ready.append(task)
            else:
                heapq.heappush(
                    self._timers,
                    (self._time + request.delay, next(self._sequence), task),
                )
        elif isinstance(request, _Join):
            if request.task.done():
                self._ready.append(task)
            else:
                request.task._waiters.append(task)
        else:
            task._coro.close()
            self._finish(
                task,
                exception=RuntimeError(
                    f"Task {task.name} awaited {request!r}, which the "
                    "virtual scheduler cannot drive"
                ),
            )

    def _finish(
        self,
        task: VirtualTask[Any],
        result: Any = None,
        exception: BaseException | None = None,
    ) -> None:
        task._done = True
        task._result = result
        task._exception = exception
        logger.debug(f"Virtual task {task.name} finished at {self._time}")
        self._ready.extend(task._waiters)
        task._waiters.clear()


__all__ = ["VirtualTask", "VirtualTimeScheduler"]
