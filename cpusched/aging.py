"""Priority round-robin scheduling with aging of waiting tasks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from cpusched.rr_priority import MAX_PRIORITY, MIN_PRIORITY, PriorityRoundRobinScheduler
from cpusched.task import Task
from cpusched.timer import Timer

__all__ = [
    "AGING_LIMIT",
    "AGING_PERIOD",
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "AgingPriorityScheduler",
]

AGING_LIMIT = 2
"""Aging rounds a task waits before it is promoted one level."""
AGING_PERIOD = 5
"""Number of slices run between two aging rounds."""


@contextmanager
def _timer_running(timer: Timer) -> Iterator[Timer]:
    """Keep ``timer`` running for the block, stopping it only if started here."""
    started = not timer.running
    if started:
        timer.start()
    try:
        yield timer
    finally:
        if started:
            timer.stop()


class AgingPriorityScheduler(PriorityRoundRobinScheduler):
    """Priority round robin where waiting tasks are promoted over time.

    After every quantum the scheduler waits for the timer to signal the
    end of the slice; every ``AGING_PERIOD`` slices it runs an aging round.
    """

    def __init__(self, out: TextIO | None = None, timer: Timer | None = None) -> None:
        super().__init__(out)
        self.timer = Timer() if timer is None else timer
        self._runs = 0

    def add(self, name: str, priority: int, burst: int) -> Task:
        """Queue a new task, not yet waiting, at the end of its level and return it."""
        task = super().add(name, priority, burst)
        task.wait_time = 0
        task.deadline = 0
        return task

    def age(self) -> None:
        """Run one aging round, from the lowest priority level upwards.

        Every queued task waits one more round; a task below the top level
        that has waited ``AGING_LIMIT`` rounds moves up one level, its wait
        reset, and is counted again as a task of the level it joined.
        """
        for level in reversed(range(len(self._queues))):
            kept: deque[Task] = deque()
            promoted: list[Task] = []
            for task in self._queues[level]:
                task.wait_time += 1
                if level > 0 and task.wait_time >= AGING_LIMIT:
                    task.priority -= 1
                    task.wait_time = 0
                    promoted.append(task)
                else:
                    kept.append(task)
            self._queues[level] = kept
            if promoted:
                self._queues[level - 1].extend(promoted)

    def schedule(self) -> list[Task]:
        """Run every queued task to completion; return them in finishing order."""
        finished: list[Task] = []
        self._runs = 0
        with _timer_running(self.timer):
            while (queue := self._ready_queue()) is not None:
                done = self._step(queue)
                if done is not None:
                    finished.append(done)
                self.timer.wait_slice()
                self._runs += 1
                if self._runs >= AGING_PERIOD:
                    self.age()
                    self._runs = 0
        return finished