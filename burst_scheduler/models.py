from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence


@dataclass
class ProcessRecord:
    pid: int
    burst_time: int
    remaining_burst: int
    accumulated_wait: int = 0

    @property
    def finished(self) -> bool:
        return self.remaining_burst <= 0


@dataclass
class ProcessTable:
    """
    Ordered process records, addressed by pid (pid == position).
    """

    records: List[ProcessRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, pid: int) -> ProcessRecord:
        return self.records[pid]

    def __iter__(self) -> Iterator[ProcessRecord]:
        return iter(self.records)

    def active_pids(self) -> List[int]:
        return [r.pid for r in self.records if not r.finished]

    def total_remaining(self) -> int:
        return sum(max(r.remaining_burst, 0) for r in self.records)

    def waits(self) -> List[int]:
        return [r.accumulated_wait for r in self.records]


def init_table(bursts: Sequence[int]) -> ProcessTable:
    """
    Build a process table from CPU burst lengths. Each record gets its
    position as pid, the burst as remaining time and zero wait.
    """
    if not bursts:
        raise ValueError("At least one burst is required to build a process table")

    records = [
        ProcessRecord(pid=i, burst_time=burst, remaining_burst=burst)
        for i, burst in enumerate(bursts)
    ]
    return ProcessTable(records=records)


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart,
    with the burst it still owed once the slice ended.
    """

    pid: int
    start_time: int
    end_time: int
    remaining: int = 0

    @property
    def completes(self) -> bool:
        return self.remaining <= 0


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    throughput: float
    cpu_utilization: float
    starvation_count: int = 0


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    table: ProcessTable
    total_time: int = 0
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
