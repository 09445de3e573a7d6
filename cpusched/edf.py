"""Earliest-deadline-first scheduling driven by the simulated timer."""

from __future__ import annotations

import sys
from typing import TextIO

from cpusched.aging import _timer_running
from cpusched.rr import _run_slice
from cpusched.task import Task
from cpusched.tasklist import insert_by_deadline
from cpusched.timer import Timer

MIN_PRIORITY = 1
MAX_PRIORITY = 5


class EDFScheduler:
    """Always runs the task with the nearest deadline for one quantum.

    A task whose deadline has already passed when it reaches the head of
    the queue is reported and dropped; a finished task is reported with
    its completion time.
    """

    def __init__(self, out: TextIO | None = None, timer: Timer | None = None) -> None:
        self.out = out
        self.timer = Timer() if timer is None else timer
        self._queue: list[Task] = []

    def _write(self, line: str) -> None:
        stream = sys.stdout if self.out is None else self.out
        stream.write(line + "\n")

    def add(self, name: str, priority: int, burst: int, deadline: int) -> Task:
        """Queue a task due ``deadline`` units from now and return it."""
        current = self.timer.now()
        task = Task(
            name=name,
            priority=priority,
            burst=burst,
            deadline=current + deadline,
            start_time=current,
        )
        insert_by_deadline(self._queue, task)
        return task

    def schedule(self) -> list[Task]:
        """Run the queue until empty; return the completed tasks in order."""
        finished: list[Task] = []
        with _timer_running(self.timer):
            while self._queue:
                task = self._queue.pop(0)
                now = self.timer.now()
                if now > task.deadline:
                    self._write(
                        f"[EDF] Tarefa [{task.name}] perdeu o prazo "
                        f"({task.deadline} < {now}). Ignorada."
                    )
                    continue

                _run_slice(task, self.out)
                self.timer.wait_slice()
                finish_time = self.timer.now()
                if task.burst > 0:
                    insert_by_deadline(self._queue, task)
                else:
                    self._write(
                        f"[EDF] Tarefa [{task.name}] tempo de conclusão = "
                        f"{finish_time - task.start_time}"
                    )
                    finished.append(task)
        return finished