"""A background thread that simulates a hardware timer."""

from __future__ import annotations

import threading
import time

from cpusched.cpu import QUANTUM


class Timer:
    """Counts simulated time units and flags the end of every quantum.

    Each ``tick`` seconds the current time advances by one unit; whenever
    it reaches a multiple of ``quantum`` the slice flag is raised until
    it is taken.
    """

    def __init__(self, tick: float = 0.01, quantum: int = QUANTUM) -> None:
        if tick <= 0:
            raise ValueError("tick must be positive")
        if quantum <= 0:
            raise ValueError("quantum must be positive")
        self.tick = tick
        self.quantum = quantum
        self._time = 0
        self._flag = False
        self._lock = threading.Lock()
        self._stopping = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the timer thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def _loop(self) -> None:
        while not self._stopping.wait(self.tick):
            with self._lock:
                self._time += 1
                if self._time % self.quantum == 0:
                    self._flag = True

    def start(self) -> None:
        """Start the timer thread."""
        if self.running:
            raise RuntimeError("timer already running")
        self._stopping.clear()
        self._thread = threading.Thread(
            target=self._loop, name="cpusched-timer", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop the timer thread; the current time is kept."""
        self._stopping.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def now(self) -> int:
        """Return the current simulated time."""
        with self._lock:
            return self._time

    def take_slice_flag(self) -> bool:
        """Return whether a quantum has elapsed, clearing the flag."""
        with self._lock:
            status = self._flag
            self._flag = False
            return status

    def wait_slice(self, poll: float = 0.001) -> None:
        """Block until a quantum has elapsed, then clear the flag."""
        while not self.take_slice_flag():
            if not self.running:
                raise RuntimeError("timer is not running")
            time.sleep(poll)

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()