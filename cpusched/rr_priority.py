"""Round-robin scheduling within fixed priority levels."""

from __future__ import annotations

from collections import deque
from typing import TextIO

from cpusched.rr import RoundRobinScheduler
from cpusched.task import Task

MIN_PRIORITY = 5
"""Lowest priority level."""
MAX_PRIORITY = 1
"""Highest priority level."""


class PriorityRoundRobinScheduler(RoundRobinScheduler):
    """Always serves the highest non-empty priority level, round robin within it."""

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__(out)
        self._queues = [deque() for _ in range(MAX_PRIORITY, MIN_PRIORITY + 1)]

    def add(self, name: str, priority: int, burst: int) -> Task:
        """Queue a new task at the end of its priority level and return it."""
        if not MAX_PRIORITY <= priority <= MIN_PRIORITY:
            raise ValueError(
                f"priority must be between {MAX_PRIORITY} and {MIN_PRIORITY}, "
                f"got {priority}"
            )
        task = Task(name=name, priority=priority, burst=burst)
        self._queues[priority - MAX_PRIORITY].append(task)
        return task

    def schedule(self) -> list[Task]:
        """Run every queued task to completion, highest level first.

        Returns the tasks in finishing order.
        """
        finished: list[Task] = []
        while (queue := self._ready_queue()) is not None:
            done = self._step(queue)
            if done is not None:
                finished.append(done)
        return finished