import logging
import time

import pytest

from benchrunner.task import Priority, Task, TaskState


def test_new_task_defaults():
    task = Task()
    assert task.state is TaskState.CREATED
    assert task.priority is Priority.MEDIUM
    assert task.duration == 0.0


def test_init_moves_to_initialized():
    task = Task()
    task.init(lambda: None)
    assert task.state is TaskState.INITIALIZED


def test_execute_returns_result_and_completes():
    task = Task()
    task.init(lambda a, b: a + b, 2, 3)
    assert task.execute() == 5
    assert task.state is TaskState.COMPLETED


def test_execute_passes_keyword_arguments():
    task = Task()
    task.init(lambda a, *, suffix: a + suffix, "x", suffix="y")
    assert task.execute() == "xy"


def test_execute_without_init_returns_none():
    calls = []
    task = Task()
    assert task.execute() is None
    assert task.state is TaskState.CREATED
    assert calls == []


def test_second_init_is_ignored():
    task = Task()
    task.init(lambda: "first")
    task.init(lambda: "second")
    assert task.execute() == "first"


def test_execute_twice_without_reset():
    calls = []
    task = Task()
    task.init(calls.append, 1)
    task.execute()
    assert task.execute() is None
    assert calls == [1]


def test_reset_allows_rerun():
    calls = []
    task = Task()
    task.init(calls.append, 7)
    task.execute()
    task.reset()
    assert task.state is TaskState.INITIALIZED
    task.execute()
    assert calls == [7, 7]


def test_duration_measured_only_when_completed():
    task = Task()
    task.init(time.sleep, 0.01)
    assert task.duration == 0.0
    task.execute()
    assert task.duration >= 10.0
    task.reset()
    assert task.duration == 0.0


def test_set_priority_before_run():
    task = Task()
    assert task.set_priority(Priority.HIGH) is True
    assert task.priority is Priority.HIGH
    task.init(lambda: None)
    assert task.set_priority(Priority.LOW) is True
    assert task.priority is Priority.LOW


def test_set_priority_refused_after_run():
    task = Task()
    task.init(lambda: None)
    task.execute()
    assert task.set_priority(Priority.HIGH) is False
    assert task.priority is Priority.MEDIUM


def test_failing_function_marks_failed():
    def boom():
        raise ValueError("bad")

    task = Task()
    task.init(boom)
    with pytest.raises(ValueError, match="bad"):
        task.execute()
    assert task.state is TaskState.FAILED
    task.reset()
    assert task.state is TaskState.FAILED
    assert task.duration == 0.0


def test_init_rejects_non_callable():
    task = Task()
    with pytest.raises(TypeError):
        task.init(42)
    assert task.state is TaskState.CREATED


def test_transitions_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="benchrunner.task")
    task = Task()
    task.init(lambda: None)
    task.execute()
    messages = [r.getMessage() for r in caplog.records]
    assert "Task state transition: Created -> Initialized" in messages
    assert "Task state transition: Initialized -> Executing" in messages
    assert "Task state transition: Executing -> Completed" in messages


def test_execute_uninitialized_logs_error(caplog):
    caplog.set_level(logging.ERROR, logger="benchrunner.task")
    Task().execute()
    assert "Task is not initialized." in [r.getMessage() for r in caplog.records]