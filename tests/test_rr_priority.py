import io

import pytest

from cpusched.rr_priority import (
    MAX_PRIORITY,
    MIN_PRIORITY,
    PriorityRoundRobinScheduler,
)


def test_higher_priority_runs_first():
    out = io.StringIO()
    scheduler = PriorityRoundRobinScheduler(out)
    scheduler.add("low", 3, 5)
    scheduler.add("high1", 1, 15)
    scheduler.add("high2", 1, 10)
    finished = scheduler.schedule()
    assert out.getvalue().splitlines() == [
        "Running task = [high1] [1] [15] for 10 units.",
        "Running task = [high2] [1] [10] for 10 units.",
        "Running task = [high1] [1] [5] for 5 units.",
        "Running task = [low] [3] [5] for 5 units.",
    ]
    assert [task.name for task in finished] == ["high2", "high1", "low"]


def test_priorities_never_increase_over_time():
    out = io.StringIO()
    scheduler = PriorityRoundRobinScheduler(out)
    for index, priority in enumerate([5, 2, 4, 1, 3, 2]):
        scheduler.add(f"T{index}", priority, 10 + 7 * index)
    finished = scheduler.schedule()
    reported = [int(line.split("] [")[1]) for line in out.getvalue().splitlines()]
    assert reported == sorted(reported)
    assert [task.priority for task in finished] == sorted(
        task.priority for task in finished
    )


@pytest.mark.parametrize("priority", [MAX_PRIORITY - 1, MIN_PRIORITY + 1])
def test_out_of_range_priority_is_rejected(priority):
    scheduler = PriorityRoundRobinScheduler(io.StringIO())
    with pytest.raises(ValueError):
        scheduler.add("bad", priority, 10)


def test_empty_schedule():
    out = io.StringIO()
    assert PriorityRoundRobinScheduler(out).schedule() == []
    assert out.getvalue() == ""