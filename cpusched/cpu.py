"""A virtual CPU that reports which task runs for how long."""

from __future__ import annotations

import sys
from typing import TextIO

from cpusched.task import Task

QUANTUM = 10
"""Length of a time quantum."""


def describe_run(task: Task, time_slice: int) -> str:
    """Return the line announcing that ``task`` runs for ``time_slice`` units."""
    return (
        f"Running task = [{task.name}] [{task.priority}] [{task.burst}] "
        f"for {time_slice} units."
    )


def run(task: Task, time_slice: int, out: TextIO | None = None) -> None:
    """Run ``task`` for ``time_slice`` units, writing the announcement to ``out``."""
    stream = sys.stdout if out is None else out
    stream.write(describe_run(task, time_slice) + "\n")