"""Plain round-robin scheduling: every task gets the CPU in turn."""

from __future__ import annotations

from collections import deque
from typing import TextIO

from cpusched.cpu import QUANTUM, run
from cpusched.task import Task


def _run_slice(task: Task, out: TextIO | None) -> None:
    """Run ``task`` for at most one quantum and charge the time to its burst."""
    time_slice = min(task.burst, QUANTUM)
    run(task, time_slice, out)
    task.burst -= time_slice


class RoundRobinScheduler:
    """Runs tasks in arrival order, one quantum at a time.

    Priorities are ignored: every task is stored with priority 0.
    Subclasses may keep several ready queues; the first non-empty one
    is always served.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out
        self._queues: list[deque[Task]] = [deque()]

    def add(self, name: str, priority: int, burst: int) -> Task:
        """Queue a new task at the end of the ready queue and return it."""
        task = Task(name=name, priority=0, burst=burst)
        self._queues[0].append(task)
        return task

    def _ready_queue(self) -> deque[Task] | None:
        """Return the first non-empty ready queue, or None when all are empty."""
        return next((q for q in self._queues if q), None)

    def _step(self, queue: deque[Task]) -> Task | None:
        """Run the head of ``queue`` for one slice.

        An unfinished task goes back to the end of the queue; a finished
        one is returned.
        """
        task = queue.popleft()
        _run_slice(task, self.out)
        if task.burst > 0:
            queue.append(task)
            return None
        return task

    def schedule(self) -> list[Task]:
        """Run every queued task to completion; return them in finishing order."""
        finished: list[Task] = []
        while (queue := self._ready_queue()) is not None:
            done = self._step(queue)
            if done is not None:
                finished.append(done)
        return finished