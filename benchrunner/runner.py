"""Run a baseline task against comparison tasks, once or as a timed benchmark."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from benchrunner.task import Task, TaskState
from benchrunner.task_manager import TaskManager

log = logging.getLogger(__name__)

_RULE = "-" * 84
_BANNER = "=" * 33 + " Benchmark Result " + "=" * 33
_FOOTER = "=" * 84


class Validation:
    """Runs a baseline task and every comparison task once."""

    def __init__(self) -> None:
        self._task_manager = TaskManager()
        self._baseline_name = ""
        self._baseline_task: Optional[Task] = None
        self._comparison_tasks: dict[str, Task] = {}

    def add_baseline_task(self, name: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Set the baseline task; True if it is ready to run."""
        task = self._task_manager.create_task()
        self._baseline_name = name
        self._baseline_task = task
        task.init(func, *args, **kwargs)
        return task.state is TaskState.INITIALIZED

    def add_comparison_task(self, name: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Add or replace a comparison task; True if it is ready to run."""
        task = self._task_manager.create_task()
        task.init(func, *args, **kwargs)
        if task.state is not TaskState.INITIALIZED:
            return False
        self._comparison_tasks[name] = task
        return True

    def _baseline_ready(self) -> bool:
        task = self._baseline_task
        if task is None or task.state is not TaskState.INITIALIZED:
            log.error("Baseline task is not initialized.")
            return False
        return True

    def run(self) -> bool:
        """Execute the baseline and then each comparison task once."""
        if not self._baseline_ready():
            return False
        assert self._baseline_task is not None
        self._baseline_task.execute()
        for name, task in self._comparison_tasks.items():
            if task.state is not TaskState.INITIALIZED:
                log.error("Comparison task %s is not initialized.", name)
                return False
            task.execute()
        return True


@dataclass
class Duration:
    """Timing statistics in milliseconds."""

    total: float = 0.0
    average: float = 0.0
    minimum: float = math.inf
    maximum: float = 0.0

    def record(self, sample: float) -> None:
        """Fold one measured run into the statistics."""
        self.total += sample
        self.minimum = min(self.minimum, sample)
        self.maximum = max(self.maximum, sample)

    def finish(self, iterations: int) -> None:
        """Compute the average over ``iterations`` runs."""
        self.average = self.total / iterations if iterations else math.nan


def _speedup(baseline: float, candidate: float) -> float:
    if candidate == 0.0:
        return math.nan if baseline == 0.0 or math.isnan(baseline) else math.inf
    return baseline / candidate


class Benchmark(Validation):
    """Times each task over warm-up and measured iterations."""

    def __init__(self, warmup_iterations: int = 10, benchmark_iterations: int = 100) -> None:
        super().__init__()
        self._warmup_iterations = warmup_iterations
        self._benchmark_iterations = benchmark_iterations
        self._baseline_duration = Duration()
        self._comparison_durations: dict[str, Duration] = {}

    @property
    def warmup_iterations(self) -> int:
        return self._warmup_iterations

    @property
    def benchmark_iterations(self) -> int:
        return self._benchmark_iterations

    @property
    def baseline_duration(self) -> Duration:
        return self._baseline_duration

    @property
    def comparison_durations(self) -> dict[str, Duration]:
        return dict(self._comparison_durations)

    def _measure(self, task: Task, stats: Duration) -> None:
        for _ in range(self._warmup_iterations):
            task.execute()
            task.reset()
        for _ in range(self._benchmark_iterations):
            task.execute()
            stats.record(task.duration)
            task.reset()
        stats.finish(self._benchmark_iterations)

    def run(self) -> bool:
        """Benchmark the baseline, then each comparison task."""
        if not self._baseline_ready():
            return False
        assert self._baseline_task is not None
        self._measure(self._baseline_task, self._baseline_duration)
        for name, task in self._comparison_tasks.items():
            if task.state is not TaskState.INITIALIZED:
                log.error("Comparison task %s is not initialized.", name)
                return False
            stats = self._comparison_durations.setdefault(name, Duration())
            self._measure(task, stats)
        return True

    def result_string(self) -> str:
        """Render the timing results as a text table."""
        base = self._baseline_duration
        lines = [
            _BANNER,
            f"Warmup Iterations : {self._warmup_iterations}",
            f"Benchmark Iterations : {self._benchmark_iterations}",
            _RULE,
            f"| {'Task':<20} | {'Min(ms)':<12} | {'Max(ms)':<12} | {'Avg(ms)':<12} | {'Speedup':<10} |",
            _RULE,
            f"| {self._baseline_name:<20} | {base.minimum:>12.3f} | {base.maximum:>12.3f}"
            f" | {base.average:>12.3f} | {'-':>10} |",
        ]
        for name, stats in self._comparison_durations.items():
            speedup = _speedup(base.average, stats.average)
            lines.append(
                f"| {name:<20} | {stats.minimum:>12.3f} | {stats.maximum:>12.3f}"
                f" | {stats.average:>12.3f} | {speedup:>10.2f} |"
            )
        lines.append(_FOOTER)
        return "\n".join(lines) + "\n"