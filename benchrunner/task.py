"""Tasks with a guarded lifecycle, a priority and timed execution."""

from __future__ import annotations

import enum
import functools
import logging
import threading
import time
from typing import Any, Callable, Optional

log = logging.getLogger(__name__)


class Priority(enum.Enum):
    """Scheduling priority of a task."""

    HIGH = 0
    MEDIUM = 1
    LOW = 2


class TaskState(enum.Enum):
    """Stages of a task's lifecycle."""

    CREATED = "Created"
    INITIALIZED = "Initialized"
    EXECUTING = "Executing"
    COMPLETED = "Completed"
    FAILED = "Failed"


_ALLOWED_TRANSITIONS: dict[TaskState, frozenset[TaskState]] = {
    TaskState.CREATED: frozenset({TaskState.INITIALIZED}),
    TaskState.INITIALIZED: frozenset({TaskState.EXECUTING}),
    TaskState.EXECUTING: frozenset({TaskState.COMPLETED, TaskState.FAILED}),
    TaskState.COMPLETED: frozenset({TaskState.INITIALIZED}),
    TaskState.FAILED: frozenset(),
}


class Task:
    """A callable bound to its arguments, run under a state machine.

    A task starts in ``CREATED``, becomes ``INITIALIZED`` once given a
    function, moves through ``EXECUTING`` to ``COMPLETED`` (or ``FAILED``),
    and may be reset from ``COMPLETED`` back to ``INITIALIZED`` to run again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = TaskState.CREATED
        self._func: Optional[Callable[[], Any]] = None
        self._duration_ms = 0.0
        self._priority = Priority.MEDIUM

    # -- state machine -------------------------------------------------

    @property
    def state(self) -> TaskState:
        """The current lifecycle state."""
        with self._lock:
            return self._state

    def _is_valid_transition(self, to: TaskState) -> bool:
        return to in _ALLOWED_TRANSITIONS[self._state]

    def _try_transition(self, to: TaskState) -> bool:
        with self._lock:
            if not self._is_valid_transition(to):
                return False
            old = self._state
            self._state = to
        self._on_state_changed(old, to)
        return True

    def _on_state_changed(self, old: TaskState, new: TaskState) -> None:
        log.debug("Task state transition: %s -> %s", old.value, new.value)

    # -- task operations -----------------------------------------------

    def init(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Bind ``func`` and its arguments; ignored unless the task is fresh."""
        if not callable(func):
            raise TypeError(f"task function must be callable, got {type(func).__name__}")
        if self.state is not TaskState.CREATED:
            return
        self._func = functools.partial(func, *args, **kwargs)
        self._try_transition(TaskState.INITIALIZED)

    def execute(self) -> Any:
        """Run the task and return what its function returned.

        Returns ``None`` without running anything when the task is not
        initialized. An exception raised by the function marks the task
        ``FAILED`` and propagates.
        """
        if not self._try_transition(TaskState.EXECUTING):
            log.error("Task is not initialized.")
            return None
        if self._func is None:
            log.error("Task function is empty.")
            self._try_transition(TaskState.FAILED)
            return None
        start = time.perf_counter()
        try:
            result = self._func()
        except BaseException:
            self._try_transition(TaskState.FAILED)
            raise
        self._duration_ms = (time.perf_counter() - start) * 1000.0
        self._try_transition(TaskState.COMPLETED)
        return result

    def reset(self) -> None:
        """Make a completed task ready to run again."""
        self._try_transition(TaskState.INITIALIZED)

    def set_priority(self, priority: Priority) -> bool:
        """Change the priority; only allowed before the task first runs."""
        if self.state in (TaskState.CREATED, TaskState.INITIALIZED):
            self._priority = priority
            return True
        return False

    @property
    def priority(self) -> Priority:
        """The task's priority."""
        return self._priority

    @property
    def duration(self) -> float:
        """Time of the last run in milliseconds, or 0.0 unless completed."""
        return self._duration_ms if self.state is TaskState.COMPLETED else 0.0