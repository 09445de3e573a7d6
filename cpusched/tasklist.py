"""Helpers for the ordered task queues used by the schedulers."""

from __future__ import annotations

import bisect
from typing import Iterable, Iterator, MutableSequence

from cpusched.task import Task


def insert_by_deadline(tasks: MutableSequence[Task], task: Task) -> None:
    """Insert ``task`` into ``tasks`` kept in ascending deadline order.

    A task goes after every task whose deadline is less than or equal to
    its own, so tasks with equal deadlines keep their arrival order.
    """
    deadlines = [queued.deadline for queued in tasks]
    position = bisect.bisect_right(deadlines, task.deadline)
    tasks.insert(position, task)


def traverse(tasks: Iterable[Task]) -> Iterator[str]:
    """Yield one ``[name] [priority] [burst]`` line per task, in order."""
    for task in tasks:
        yield f"[{task.name}] [{task.priority}] [{task.burst}]"