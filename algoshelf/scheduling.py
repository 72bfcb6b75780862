"""CPU scheduling simulations producing Gantt charts and per-process statistics.

Every simulation starts its clock at 0. Ties between equally good candidates
go to the process that comes first in the order the algorithm keeps them in.
Adjacent Gantt slots for the same process, or adjacent idle slots, are merged.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from statistics import fmean
from typing import Callable, Iterable, Optional


@dataclass(frozen=True)
class Process:
    """A job to schedule; a lower ``priority`` number means a higher priority."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"process {self.pid}: arrival time must not be negative")
        if self.burst < 1:
            raise ValueError(f"process {self.pid}: burst time must be at least 1")


@dataclass(frozen=True)
class GanttSlot:
    """A stretch of time given to one process, or idle when ``pid`` is None."""

    start: int
    end: int
    pid: Optional[int]


@dataclass(frozen=True)
class ProcessStats:
    """Timing results for one process."""

    pid: int
    arrival: int
    burst: int
    completion: int
    first_run: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst

    @property
    def response(self) -> int:
        return self.first_run - self.arrival


@dataclass(frozen=True)
class Schedule:
    """The Gantt chart and process table of one simulation."""

    slots: tuple[GanttSlot, ...]
    stats: tuple[ProcessStats, ...]

    def average_turnaround(self) -> float:
        return fmean(s.turnaround for s in self.stats)

    def average_waiting(self) -> float:
        return fmean(s.waiting for s in self.stats)

    def average_response(self) -> float:
        return fmean(s.response for s in self.stats)


@dataclass(eq=False)
class _Run:
    process: Process
    remaining: int = field(init=False)
    first_run: Optional[int] = None
    completion: Optional[int] = None

    def __post_init__(self) -> None:
        self.remaining = self.process.burst


class _Timeline:
    def __init__(self) -> None:
        self.slots: list[GanttSlot] = []

    def add(self, pid: Optional[int], start: int, end: int) -> None:
        if self.slots and self.slots[-1].pid == pid and self.slots[-1].end == start:
            self.slots[-1] = GanttSlot(self.slots[-1].start, end, pid)
        else:
            self.slots.append(GanttSlot(start, end, pid))


def _prepare(processes: Iterable[Process]) -> list[Process]:
    items = list(processes)
    if not items:
        raise ValueError("at least one process is required")
    pids = [p.pid for p in items]
    if len(set(pids)) != len(pids):
        raise ValueError("process ids must be unique")
    return items


def _by_arrival(items: list[Process]) -> list[Process]:
    return sorted(items, key=lambda p: p.arrival)


def _finish(runs: list[_Run], timeline: _Timeline) -> Schedule:
    stats = tuple(
        ProcessStats(r.process.pid, r.process.arrival, r.process.burst, r.completion, r.first_run)
        for r in runs
    )
    return Schedule(tuple(timeline.slots), stats)


def _idle_until_next(pending: list[_Run], time: int, timeline: _Timeline) -> int:
    upcoming = min(r.process.arrival for r in pending)
    timeline.add(None, time, upcoming)
    return upcoming


def _non_preemptive(order: list[Process], key: Callable[[_Run], object]) -> Schedule:
    runs = [_Run(p) for p in order]
    pending = list(runs)
    timeline = _Timeline()
    time = 0
    while pending:
        ready = [r for r in pending if r.process.arrival <= time]
        if not ready:
            time = _idle_until_next(pending, time, timeline)
            continue
        run = min(ready, key=key)
        run.first_run = time
        time += run.process.burst
        run.remaining = 0
        run.completion = time
        timeline.add(run.process.pid, run.first_run, time)
        pending.remove(run)
    return _finish(runs, timeline)


def _preemptive(order: list[Process], key: Callable[[_Run], object]) -> Schedule:
    runs = [_Run(p) for p in order]
    pending = list(runs)
    timeline = _Timeline()
    time = 0
    while pending:
        ready = [r for r in pending if r.process.arrival <= time]
        if not ready:
            time = _idle_until_next(pending, time, timeline)
            continue
        run = min(ready, key=key)
        if run.first_run is None:
            run.first_run = time
        timeline.add(run.process.pid, time, time + 1)
        time += 1
        run.remaining -= 1
        if run.remaining == 0:
            run.completion = time
            pending.remove(run)
    return _finish(runs, timeline)


def fcfs(processes: Iterable[Process]) -> Schedule:
    """First come, first served, in order of arrival."""
    return _non_preemptive(_by_arrival(_prepare(processes)), key=lambda r: 0)


def sjf(processes: Iterable[Process]) -> Schedule:
    """Shortest job first, non-preemptive; processes are kept in order of burst."""
    order = sorted(_prepare(processes), key=lambda p: p.burst)
    return _non_preemptive(order, key=lambda r: r.process.burst)


def srtf(processes: Iterable[Process]) -> Schedule:
    """Shortest remaining time first, re-decided every time unit."""
    return _preemptive(_by_arrival(_prepare(processes)), key=lambda r: r.remaining)


def priority_non_preemptive(processes: Iterable[Process]) -> Schedule:
    """Highest priority (lowest number) among arrived processes runs to completion."""
    return _non_preemptive(_prepare(processes), key=lambda r: r.process.priority)


def priority_preemptive(processes: Iterable[Process]) -> Schedule:
    """Highest priority runs each time unit; equal priorities go to the earlier arrival."""
    return _preemptive(
        _prepare(processes), key=lambda r: (r.process.priority, r.process.arrival)
    )


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Round robin with a fixed time quantum.

    Processes that arrive during a slice join the ready queue before the
    process whose slice just ended.
    """
    if quantum < 1:
        raise ValueError("time quantum must be at least 1")
    order = _by_arrival(_prepare(processes))
    runs = [_Run(p) for p in order]
    arrivals = deque(runs)
    ready: deque[_Run] = deque()
    timeline = _Timeline()
    time = 0

    def admit() -> None:
        while arrivals and arrivals[0].process.arrival <= time:
            ready.append(arrivals.popleft())

    admit()
    left = len(runs)
    while left:
        if not ready:
            upcoming = arrivals[0].process.arrival
            timeline.add(None, time, upcoming)
            time = upcoming
            admit()
            continue
        run = ready.popleft()
        if run.first_run is None:
            run.first_run = time
        share = min(quantum, run.remaining)
        timeline.add(run.process.pid, time, time + share)
        time += share
        run.remaining -= share
        admit()
        if run.remaining == 0:
            run.completion = time
            left -= 1
        else:
            ready.append(run)
    return _finish(runs, timeline)


def format_report(schedule: Schedule) -> str:
    """A printable Gantt chart, process table and averages."""
    chart = "".join(
        f"|({slot.start}) {'IDLE' if slot.pid is None else f'P{slot.pid}'} ({slot.end})|"
        for slot in schedule.slots
    )
    lines = ["Gantt Chart:", chart, "", "- - - PROCESS TABLE - - -", "PID\tAT\tBT\tCT\tTAT\tWT\tRT"]
    for s in schedule.stats:
        row = [s.pid, s.arrival, s.burst, s.completion, s.turnaround, s.waiting, s.response]
        lines.append("\t".join(str(value) for value in row))
    lines += [
        "",
        f"Average Turnaround Time : {schedule.average_turnaround():.2f}",
        f"Average Waiting Time : {schedule.average_waiting():.2f}",
        f"Average Response Time : {schedule.average_response():.2f}",
    ]
    return "\n".join(lines)