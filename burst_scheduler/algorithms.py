from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .engine import run_proc
from .metrics import compute_system_metrics
from .models import ProcessTable, ScheduleResult, ScheduledSlice, init_table

logger = logging.getLogger(__name__)


def fcfs_run(table: ProcessTable, timeline: Optional[List[ScheduledSlice]] = None) -> int:
    """
    First-Come First-Serve: run every process to completion in pid order.

    Returns the total time elapsed once all processes are complete.
    """
    total_time = 0

    for record in table:
        if record.finished:
            continue

        remaining = record.remaining_burst
        run_proc(table, record.pid, remaining)
        if timeline is not None:
            timeline.append(
                ScheduledSlice(
                    pid=record.pid,
                    start_time=total_time,
                    end_time=total_time + remaining,
                    remaining=record.remaining_burst,
                )
            )
        total_time += remaining

    return total_time


def rr_next(current: int, table: ProcessTable) -> Optional[int]:
    """
    Pick the next process to run in Round Robin order.

    Scans circularly starting just after `current` and returns the first pid
    with work left, which may be `current` itself when it is the only one.
    Returns None once every process is finished.
    """
    size = len(table)
    if size == 0 or not table.active_pids():
        return None

    start = (current + 1) % size
    for offset in range(size):
        idx = (start + offset) % size
        if not table[idx].finished:
            return idx

    return None


def rr_run(table: ProcessTable, quantum: int, timeline: Optional[List[ScheduledSlice]] = None) -> int:
    """
    Round Robin scheduling with a fixed time quantum, starting from the lowest
    pid that has work.

    Returns the total time elapsed once all processes are complete.
    """
    if quantum <= 0:
        logger.warning("Round Robin quantum must be positive (got %d); nothing scheduled", quantum)
        return 0

    active = table.active_pids()
    if not active:
        return 0

    total_time = 0
    current: Optional[int] = active[0]

    while current is not None:
        if not table[current].finished:
            run_time = min(quantum, table[current].remaining_burst)
            run_proc(table, current, run_time)
            if timeline is not None:
                timeline.append(
                    ScheduledSlice(
                        pid=current,
                        start_time=total_time,
                        end_time=total_time + run_time,
                        remaining=table[current].remaining_burst,
                    )
                )
            total_time += run_time

        current = rr_next(current, table)

    return total_time


ALGORITHMS = {
    "fcfs": fcfs_run,
    "rr": rr_run,
}


def run_algorithm(name: str, bursts: Sequence[int], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Build a process table from `bursts`, run the requested algorithm on it
    and collect the final table, total time and timeline.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown or unimplemented algorithm '{name}'")

    table = init_table(bursts)
    timeline: List[ScheduledSlice] = []

    if name == "rr":
        if quantum is None:
            raise ValueError("Round Robin requires a quantum")
        total_time = rr_run(table, quantum, timeline=timeline)
        label = "Round Robin"
    else:
        total_time = fcfs_run(table, timeline=timeline)
        label = "FCFS"
        quantum = None

    logger.debug("%s finished after %d time units", label, total_time)

    result = ScheduleResult(
        algorithm=label,
        quantum=quantum,
        table=table,
        total_time=total_time,
        timeline=timeline,
    )
    compute_system_metrics(result)
    return result
