import io

import pytest

from cpusched.rr import RoundRobinScheduler


@pytest.mark.parametrize(
    ("tasks", "expected", "order"),
    [
        (
            [("A", 3, 25)],
            [
                "Running task = [A] [0] [25] for 10 units.",
                "Running task = [A] [0] [15] for 10 units.",
                "Running task = [A] [0] [5] for 5 units.",
            ],
            ["A"],
        ),
        (
            [("A", 1, 25), ("B", 4, 5)],
            [
                "Running task = [A] [0] [25] for 10 units.",
                "Running task = [B] [0] [5] for 5 units.",
                "Running task = [A] [0] [15] for 10 units.",
                "Running task = [A] [0] [5] for 5 units.",
            ],
            ["B", "A"],
        ),
        (
            [("X", 2, 10), ("Y", 5, 1)],
            [
                "Running task = [X] [0] [10] for 10 units.",
                "Running task = [Y] [0] [1] for 1 units.",
            ],
            ["X", "Y"],
        ),
    ],
)
def test_tasks_take_turns(tasks, expected, order):
    out = io.StringIO()
    scheduler = RoundRobinScheduler(out)
    for name, priority, burst in tasks:
        scheduler.add(name, priority, burst)
    finished = scheduler.schedule()
    assert out.getvalue().splitlines() == expected
    assert [task.name for task in finished] == order


def test_priority_is_ignored_and_bursts_are_used_up():
    scheduler = RoundRobinScheduler(io.StringIO())
    added = [scheduler.add(name, 5, burst) for name, burst in [("A", 33), ("B", 47)]]
    finished = scheduler.schedule()
    assert all(task.priority == 0 for task in added)
    assert all(task.burst == 0 for task in finished)
    assert sorted(task.name for task in finished) == ["A", "B"]


def test_empty_schedule_writes_nothing():
    out = io.StringIO()
    assert RoundRobinScheduler(out).schedule() == []
    assert out.getvalue() == ""


def test_default_output_is_stdout(capsys):
    scheduler = RoundRobinScheduler()
    scheduler.add("Z", 2, 4)
    scheduler.schedule()
    assert capsys.readouterr().out == "Running task = [Z] [0] [4] for 4 units.\n"