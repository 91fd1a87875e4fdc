"""Round-robin CPU scheduling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class Process:
    arrival: int
    burst: int


@dataclass(frozen=True)
class ProcessResult:
    index: int
    completion: int
    turnaround: int
    waiting: int


@dataclass
class Schedule:
    """Per-process results in the order the processes finished."""

    results: list[ProcessResult] = field(default_factory=list)

    @property
    def average_waiting(self) -> float:
        return sum(r.waiting for r in self.results) / len(self.results)

    @property
    def average_turnaround(self) -> float:
        return sum(r.turnaround for r in self.results) / len(self.results)


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Run the processes round robin with the given time quantum.

    The scheduler walks the processes in input order and moves on to the next
    one only once it has arrived; otherwise it starts again from the first.
    When nothing is runnable, the clock jumps to the next arrival.
    """
    procs = list(processes)
    if not procs:
        raise ValueError("at least one process is needed")
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    if any(p.burst <= 0 for p in procs):
        raise ValueError("burst times must be positive")

    n = len(procs)
    remaining = [p.burst for p in procs]
    schedule = Schedule()
    time = 0
    i = 0
    left = n
    progressed = False
    while left:
        run = remaining[i]
        if run > 0:
            progressed = True
            if run <= quantum:
                time += run
                remaining[i] = 0
                left -= 1
                proc = procs[i]
                turnaround = time - proc.arrival
                schedule.results.append(
                    ProcessResult(i, time, turnaround, turnaround - proc.burst)
                )
            else:
                remaining[i] -= quantum
                time += quantum
        if not left:
            break
        if i == n - 1 or procs[i + 1].arrival > time:
            if not progressed:
                time = min(p.arrival for p in procs[1:] if p.arrival > time)
            progressed = False
            i = 0
        else:
            i += 1
    return schedule