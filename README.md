# benchrunner

benchrunner runs a baseline function and any number of comparison functions. It can run each of them once, or time them over many runs and report how their timings compare.

It has no dependencies beyond the standard library.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Tasks

`benchrunner.task.Task` binds a callable to its arguments and runs it under a small state machine. The states are the members of `TaskState`:

- `CREATED`: a new task with no function.
- `INITIALIZED`: `init(func, *args, **kwargs)` has bound a function. Calling `init` again on a task that is no longer fresh does nothing. A `func` that is not callable raises `TypeError`.
- `EXECUTING`: while `execute()` runs the function.
- `COMPLETED`: the function returned. `reset()` puts a completed task back to `INITIALIZED` so that it can run again.
- `FAILED`: the function raised. The exception passes on to the caller, and a failed task cannot be reset.

```python
from benchrunner.task import Priority, Task, TaskState

task = Task()
task.init(sum, [1, 2, 3])
assert task.state is TaskState.INITIALIZED
result = task.execute()   # 6
print(task.duration)      # milliseconds taken by the call
task.reset()              # ready to run again
```

`execute()` returns `None` and runs nothing if the task is not `INITIALIZED`. `duration` is the time of the last run in milliseconds, and is `0.0` unless the task is `COMPLETED`.

Every task has a `priority` (a `Priority`: `HIGH`, `MEDIUM` or `LOW`; `MEDIUM` by default). `set_priority(priority)` changes it only while the task is `CREATED` or `INITIALIZED`, and returns whether it did.

State changes are logged at debug level through the `logging` module.

## Task manager

`benchrunner.task_manager.TaskManager` keeps tasks under integer ids.

```python
from benchrunner.task_manager import TaskManager

manager = TaskManager(task_timeout=1.0)
task = manager.create_task()
task_id = manager.add(task)
assert manager.get(task_id) is task
manager.remove(task_id)   # True; False if there is no such id
```

- `create_task()` returns a new task without registering it.
- `add(task)` registers a task and returns its id. Ids count up from 0, and the ids of removed tasks are handed out again first, oldest first.
- `remove(task_id)` unregisters a task. Removing a task that has not finished is allowed, but logs a warning.
- `get(task_id)` returns the task, or `None`.
- `cleanup_expired_tasks()` drops every task that is `COMPLETED` or `FAILED`, and every task registered longer ago than `task_timeout` seconds.
- `len(manager)` and `task_id in manager` work as you would expect.

The manager is safe to use from several threads. For tests, a `clock` function returning monotonic seconds can be passed in place of `time.monotonic`.

## Validating and benchmarking

`benchrunner.runner.Validation` runs a baseline task and each comparison task once, without timing them. `add_baseline_task(name, func, *args, **kwargs)` and `add_comparison_task(name, func, *args, **kwargs)` return whether the task is ready to run; adding a comparison task under a name already used replaces it. `run()` returns `False`, after logging an error, if the baseline or a comparison task is missing or not ready.

`Benchmark` builds on `Validation`. Each task first runs `warmup_iterations` times untimed, then `benchmark_iterations` times timed.

```python
from benchrunner.runner import Benchmark

bench = Benchmark(warmup_iterations=2, benchmark_iterations=10)
bench.add_baseline_task("sorted", sorted, list(range(10_000, 0, -1)))
bench.add_comparison_task("list.sort", lambda xs: list(xs).sort(), list(range(10_000, 0, -1)))
bench.run()
print(bench.result_string())
```

`result_string()` renders a table with the minimum, maximum and average time of each task in milliseconds, and each comparison task's speedup over the baseline (baseline average divided by its average).

The statistics can also be read directly: `baseline_duration` and the values of `comparison_durations` are `Duration` objects with `total`, `average`, `minimum` and `maximum` fields, all in milliseconds.

## Element-wise addition

`benchrunner.elementwise` has two workloads used by the command below. `elementwise_add(a, b)` returns the element-wise sum of two sequences as a new list; `elementwise_add_unroll(a, b)` computes the same sum four elements at a time. Both raise `ValueError` if the operands differ in length.

## Command line

    benchrunner

This benchmarks `elementwise_add` (the baseline) against `elementwise_add_unroll` on lists of zeros, prints the result table, and exits with status 0, or 1 if the benchmark could not run. Options:

- `--size N`: number of elements (default 33554432).
- `--warmup N`: warm-up iterations (default 10).
- `--iterations N`: measured iterations (default 100).

With the defaults a run takes a long time; for a quick look try

    benchrunner --size 100000 --warmup 1 --iterations 5

## What it does not do

benchrunner does not schedule tasks: priority is stored but nothing orders tasks by it. It does not compare the results of the baseline and comparison tasks, nor save timings anywhere; results are only returned and printed.