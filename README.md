# cpusched

A small simulator of CPU scheduling policies. It reads a list of tasks,
hands them to a virtual CPU slice by slice, and prints what the CPU runs.
No real processes are run: a "run" is a printed line.

## Policies

- **Round robin** (`cpusched.rr.RoundRobinScheduler`): every task gets at
  most one quantum (10 time units) per turn, in arrival order. Priorities
  are ignored; tasks are stored with priority 0.
- **Priority round robin** (`cpusched.rr_priority.PriorityRoundRobinScheduler`):
  priorities run from 1 (highest) to 5 (lowest); round robin is applied
  within the highest priority level that still has work. A priority outside
  1–5 raises `ValueError`.
- **Priority with aging** (`cpusched.aging.AgingPriorityScheduler`): as
  above, but after each slice the scheduler waits for the timer to signal
  the end of a quantum, and every five slices it runs an aging round
  (`age()`): each waiting task's wait count goes up by one, and a task below
  the top level that has waited two rounds moves up one level.
- **Earliest deadline first** (`cpusched.edf.EDFScheduler`): the task with
  the nearest deadline runs next, one quantum at a time, paced by the timer.
  A task whose deadline has passed when it reaches the head of the queue is
  dropped with a message; each finished task is reported with its
  completion time.

Every scheduler's `schedule()` runs the queue until it is empty and returns
the finished tasks (`cpusched.task.Task`) in the order they finished.

## Installing

```
pip install .
```

## Task files

One task per line, comma separated:

```
name,burst,priority
```

For earliest deadline first a fourth field gives the deadline, relative to
the timer's time when the task is added:

```
name,burst,priority,deadline
```

For example:

```
T1,20,4
T2,25,3
T3,25,3
T4,15,5
```

Blank lines are skipped. A numeric field is read from its leading integer
(anything after it is ignored, and a field with no digits counts as 0); a
line with too few fields is an error.

## Command line

```
cpusched TASKFILE [--policy {rr,rr_p,aging_p,edf}] [--tick SECONDS]
```

- `--policy` picks the scheduler (default `rr_p`).
- `--tick` sets how many seconds one simulated time unit lasts for the
  timed policies, `aging_p` and `edf` (default 0.01).

Each slice the CPU runs is printed as

```
Running task = [T2] [3] [25] for 10 units.
```

giving the task's name, priority, remaining burst and the length of the
slice. Under `edf`, dropped and finished tasks are reported as

```
[EDF] Tarefa [T1] perdeu o prazo (30 < 40). Ignorada.
[EDF] Tarefa [T2] tempo de conclusão = 50
```

The timed policies run in real time, one tick per simulated unit.

## Library use

```python
import sys

from cpusched.rr_priority import PriorityRoundRobinScheduler

scheduler = PriorityRoundRobinScheduler(sys.stdout)
scheduler.add("T1", 4, 20)
scheduler.add("T2", 3, 25)
finished = scheduler.schedule()
```

Other pieces:

- `cpusched.cpu.run(task, time_slice, out)` writes the "Running task" line;
  `describe_run(task, time_slice)` returns it.
- `cpusched.timer.Timer(tick, quantum)` counts simulated time in a
  background thread. `start()`, `stop()`, `now()`, `take_slice_flag()` and
  `wait_slice(poll)` control and read it, and it can be used as a context
  manager. The timed schedulers take one as `timer`; if it is not already
  running, `schedule()` starts it and stops it again afterwards.
- `cpusched.tasklist.insert_by_deadline(tasks, task)` keeps a list ordered
  by deadline; `traverse(tasks)` yields `[name] [priority] [burst]` lines.
- `cpusched.cli.load_tasks(path, with_deadline)` reads a task file and
  `cpusched.cli.parse_line(line, with_deadline)` a single line.