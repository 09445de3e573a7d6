"""Command line entry point: read a task file and run a scheduler over it."""

from __future__ import annotations

import argparse
import re
from pathlib import Path
from typing import NamedTuple, Sequence

from cpusched.aging import AgingPriorityScheduler
from cpusched.edf import EDFScheduler
from cpusched.rr import RoundRobinScheduler
from cpusched.rr_priority import PriorityRoundRobinScheduler
from cpusched.timer import Timer

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

POLICIES = ("rr", "rr_p", "aging_p", "edf")


class TaskLine(NamedTuple):
    """One task read from a schedule file."""

    name: str
    burst: int
    priority: int
    deadline: int | None = None


def _leading_int(text: str) -> int:
    """Parse the leading integer of ``text``, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_line(line: str, with_deadline: bool = False) -> TaskLine:
    """Parse ``name,burst,priority[,deadline]`` into a :class:`TaskLine`."""
    fields = line.split(",")
    needed = 4 if with_deadline else 3
    if len(fields) < needed:
        raise ValueError(f"expected {needed} comma-separated fields: {line!r}")
    name, burst, priority = fields[0], fields[1], fields[2]
    deadline = _leading_int(fields[3]) if with_deadline else None
    return TaskLine(name, _leading_int(burst), _leading_int(priority), deadline)


def load_tasks(path: str | Path, with_deadline: bool = False) -> list[TaskLine]:
    """Read every non-blank line of a schedule file."""
    with open(path, encoding="utf-8") as handle:
        return [
            parse_line(line, with_deadline) for line in handle if line.strip()
        ]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpusched", description="Simulate CPU scheduling of a task file."
    )
    parser.add_argument("schedule", help="file with one task per line")
    parser.add_argument(
        "--policy",
        choices=POLICIES,
        default="rr_p",
        help="scheduling policy (default: rr_p)",
    )
    parser.add_argument(
        "--tick",
        type=float,
        default=0.01,
        help="seconds per simulated time unit for timed policies",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen scheduler over the tasks in a schedule file."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.tick <= 0:
        parser.error("--tick must be positive")

    with_deadline = args.policy == "edf"
    try:
        tasks = load_tasks(args.schedule, with_deadline)
    except OSError as exc:
        parser.error(f"cannot read {args.schedule}: {exc.strerror}")
    except ValueError as exc:
        parser.error(str(exc))

    if args.policy == "edf":
        edf = EDFScheduler(timer=Timer(tick=args.tick))
        for entry in tasks:
            edf.add(entry.name, entry.priority, entry.burst, entry.deadline or 0)
        edf.schedule()
        return 0

    if args.policy == "rr":
        scheduler = RoundRobinScheduler()
    elif args.policy == "rr_p":
        scheduler = PriorityRoundRobinScheduler()
    else:
        scheduler = AgingPriorityScheduler(timer=Timer(tick=args.tick))
    try:
        for entry in tasks:
            scheduler.add(entry.name, entry.priority, entry.burst)
    except ValueError as exc:
        parser.error(str(exc))
    scheduler.schedule()
    return 0