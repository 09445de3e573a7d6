"""The unit of work handled by every scheduler."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Task:
    """A task in the system.

    ``burst`` is the remaining CPU time; ``deadline`` is an absolute time
    used by the earliest-deadline-first scheduler; ``wait_time`` counts
    aging rounds; ``start_time`` records when the task arrived.
    """

    name: str
    priority: int
    burst: int
    deadline: int = 0
    wait_time: int = 0
    start_time: int = 0
    tid: int = 0