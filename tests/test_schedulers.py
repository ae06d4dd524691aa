import pytest

from burst_scheduler.algorithms import fcfs_run, rr_next, rr_run, run_algorithm
from burst_scheduler.engine import run_proc
from burst_scheduler.metrics import average_wait, summarize_process_metrics
from burst_scheduler.models import init_table

WORKLOADS = [
    [5, 3, 8],
    [7],
    [1, 1, 1, 1],
    [10, 0, 4, 9, 2],
    [3, 12, 6],
]


def test_fcfs_waits():
    table = init_table([5, 3, 8])
    assert fcfs_run(table) == 16
    assert table.waits() == [0, 5, 8]
    assert f"{average_wait(table):.2f}" == "4.33"


def test_fcfs_wait_is_prefix_sum():
    bursts = [4, 2, 9, 1]
    table = init_table(bursts)
    fcfs_run(table)
    assert table.waits() == [sum(bursts[:i]) for i in range(len(bursts))]


def test_fcfs_skips_zero_bursts():
    table = init_table([0, 3, 0, 2])
    timeline = []
    assert fcfs_run(table, timeline=timeline) == 5
    assert [s.pid for s in timeline] == [1, 3]
    assert table.waits() == [0, 0, 0, 3]


def test_rr_quantum_4_trace():
    table = init_table([5, 3, 8])
    timeline = []
    assert rr_run(table, 4, timeline=timeline) == 16
    assert [(s.pid, s.end_time - s.start_time) for s in timeline] == [(0, 4), (1, 3), (2, 4), (0, 1), (2, 4)]
    assert table.waits() == [7, 4, 8]
    assert f"{average_wait(table):.2f}" == "6.33"


def test_single_process_never_waits():
    for run in (lambda t: fcfs_run(t), lambda t: rr_run(t, 3)):
        table = init_table([7])
        assert run(table) == 7
        assert table.waits() == [0]
        assert f"{average_wait(table):.2f}" == "0.00"


def test_totals_match_burst_sums():
    for bursts in WORKLOADS:
        fcfs_table = init_table(bursts)
        assert fcfs_run(fcfs_table) == sum(bursts)
        assert fcfs_table.total_remaining() == 0
        for quantum in (1, 2, 5):
            rr_table = init_table(bursts)
            assert rr_run(rr_table, quantum) == sum(bursts)
            assert rr_table.total_remaining() == 0


def test_rr_with_large_quantum_matches_fcfs():
    for bursts in WORKLOADS:
        fcfs_table = init_table(bursts)
        rr_table = init_table(bursts)
        fcfs_run(fcfs_table)
        rr_run(rr_table, max(bursts))
        assert rr_table.waits() == fcfs_table.waits()


def test_rr_starts_from_first_active_process():
    table = init_table([0, 0, 4, 2])
    timeline = []
    rr_run(table, 3, timeline=timeline)
    assert [s.pid for s in timeline] == [2, 3, 2]


def test_rr_with_nothing_to_run():
    table = init_table([0, 0])
    assert rr_run(table, 2) == 0


def test_rr_non_positive_quantum_runs_nothing():
    table = init_table([3, 4])
    assert rr_run(table, 0) == 0
    assert [r.remaining_burst for r in table] == [3, 4]


def test_rr_next_circular_scan():
    table = init_table([2, 0, 5])
    assert rr_next(0, table) == 2
    assert rr_next(2, table) == 0


def test_rr_next_may_return_current():
    table = init_table([0, 4, 0])
    assert rr_next(1, table) == 1


def test_rr_next_returns_none_when_all_finished():
    table = init_table([3, 2])
    fcfs_run(table)
    assert rr_next(0, table) is None


def test_rr_next_never_picks_finished_process():
    table = init_table([5, 3, 8, 1])
    current = 0
    while current is not None:
        assert table[current].remaining_burst > 0
        run_proc(table, current, 2)
        current = rr_next(current, table)
    assert table.total_remaining() == 0


def test_run_algorithm_results():
    res = run_algorithm("RR", [5, 3, 8], quantum=4)
    assert res.algorithm == "Round Robin"
    assert res.quantum == 4
    assert res.total_time == 16
    assert res.system.cpu_busy_time == 16
    assert res.system.makespan == 16

    res = run_algorithm("fcfs", [5, 3, 8], quantum=4)
    assert res.algorithm == "FCFS"
    assert res.quantum is None
    assert [s.pid for s in res.timeline] == [0, 1, 2]


def test_run_algorithm_rejects_unknown_name():
    with pytest.raises(ValueError, match="sjf"):
        run_algorithm("sjf", [1, 2])


def test_run_algorithm_rr_requires_quantum():
    with pytest.raises(ValueError):
        run_algorithm("rr", [1, 2])


def test_summarize_process_metrics():
    table = init_table([5, 3, 8])
    fcfs_run(table)
    summary = summarize_process_metrics(table)
    assert summary["avg_waiting"] == 13 / 3
    assert summary["avg_turnaround"] == (5 + 8 + 16) / 3
