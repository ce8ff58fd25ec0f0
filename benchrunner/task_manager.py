"""Registry that hands out task ids and expires finished or stale tasks."""

from __future__ import annotations

import collections
import logging
import threading
import time
from typing import Callable, Optional

from benchrunner.task import Task, TaskState

log = logging.getLogger(__name__)

_ID_LIMIT = 2**64
_MAX_ID = _ID_LIMIT - 1
_TERMINAL = (TaskState.COMPLETED, TaskState.FAILED)


class TaskManager:
    """Keeps tasks under integer ids, reusing ids of removed tasks.

    ``task_timeout`` is in seconds; ``clock`` returns monotonic seconds.
    """

    def __init__(
        self,
        task_timeout: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._task_timeout = task_timeout
        self._clock = clock
        self._lock = threading.RLock()
        self._tasks: dict[int, Task] = {}
        self._creation_times: dict[int, float] = {}
        self._recycled_ids: collections.deque[int] = collections.deque()
        self._next_task_id = 0

    def create_task(self) -> Task:
        """Return a new, unregistered task."""
        return Task()

    def add(self, task: Task) -> int:
        """Register ``task`` and return its id."""
        with self._lock:
            task_id = self._generate_unique_id()
            self._tasks[task_id] = task
            self._creation_times[task_id] = self._clock()
            return task_id

    def remove(self, task_id: int) -> bool:
        """Unregister a task; False if no task has that id."""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                log.warning("Attempted to remove non-existent task ID: %d", task_id)
                return False
            state = task.state
            if state not in _TERMINAL:
                log.warning("Attempted to remove active task ID: %d (state: %s)", task_id, state.value)
            del self._tasks[task_id]
            self._creation_times.pop(task_id, None)
            self._recycled_ids.append(task_id)
            return True

    def get(self, task_id: int) -> Optional[Task]:
        """Return the task with ``task_id``, or None."""
        with self._lock:
            return self._tasks.get(task_id)

    def cleanup_expired_tasks(self) -> None:
        """Drop finished tasks and those older than the timeout."""
        now = self._clock()
        with self._lock:
            expired = [
                task_id
                for task_id, task in self._tasks.items()
                if task.state in _TERMINAL
                or self._creation_times[task_id] + self._task_timeout < now
            ]
            for task_id in expired:
                log.warning("Task %d has expired, removing it", task_id)
                self._recycled_ids.append(task_id)
                self._creation_times.pop(task_id, None)
                del self._tasks[task_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks

    def _take_next_id(self) -> int:
        candidate = self._next_task_id
        self._next_task_id = (self._next_task_id + 1) % _ID_LIMIT
        return candidate

    def _generate_unique_id(self) -> int:
        if self._recycled_ids:
            return self._recycled_ids.popleft()
        if self._next_task_id == _MAX_ID:
            log.warning("Task ID counter approaching maximum value, resetting to find available IDs")
            self._next_task_id = 0
        candidate = self._take_next_id()
        start = candidate
        while candidate in self._tasks:
            candidate = self._take_next_id()
            if candidate == start:
                log.error("All possible task IDs are in use!")
                raise RuntimeError("Task ID space exhausted")
        return candidate