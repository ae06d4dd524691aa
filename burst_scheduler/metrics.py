from __future__ import annotations

from .models import ProcessTable, ScheduleResult, SystemMetrics


def average_wait(table: ProcessTable) -> float:
    if len(table) == 0:
        return 0.0
    return sum(table.waits()) / len(table)


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute throughput and CPU utilization from the final process table and
    the recorded timeline slices.
    """
    table = result.table
    if len(table) == 0 or not result.timeline:
        system = SystemMetrics(cpu_busy_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    makespan = max(slice_.end_time for slice_ in result.timeline)
    cpu_busy_time = sum(slice_.end_time - slice_.start_time for slice_ in result.timeline)

    throughput = len(table) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    # Processes whose wait is more than 2x the average count as starved.
    avg_wait = average_wait(table)
    starvation_count = sum(1 for r in table if r.accumulated_wait > 2 * avg_wait)

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
        starvation_count=starvation_count,
    )
    result.system = system
    return system


def summarize_process_metrics(table: ProcessTable) -> dict:
    """
    Return averages of the per-process metrics. Every process arrives at
    time 0, so turnaround is wait plus burst.
    """
    if len(table) == 0:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0}

    n = len(table)
    return {
        "avg_waiting": average_wait(table),
        "avg_turnaround": sum(r.accumulated_wait + max(r.burst_time, 0) for r in table) / n,
    }
