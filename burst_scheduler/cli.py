from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm
from .errors import AllocationError, UsageError
from .gantt import build_rich_gantt
from .metrics import average_wait, summarize_process_metrics
from .models import ScheduleResult
from .parsing import atoi, parse_bursts

logger = logging.getLogger(__name__)


# Only these exact tokens are options; everything else is a positional value.
_FLAGS = {"--details", "--gantt", "--verbose", "-v", "--help", "-h"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="burst-scheduler",
        usage="%(prog)s {fcfs,rr} [quantum] burst [burst ...] [--details] [--gantt] [-v]",
        description="CPU burst scheduling simulator (FCFS, RR).",
        epilog=(
            "usage forms: 'fcfs <burst>...' or 'rr <quantum> <burst>...'. "
            "Values are read like C atoi, so non-numeric values count as 0."
        ),
    )
    parser.add_argument(
        "--details",
        action="store_true",
        help="Show per-process and system metrics tables.",
    )
    parser.add_argument(
        "--gantt",
        action="store_true",
        help="Show a Gantt chart of the schedule.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every scheduling step to stderr.",
    )
    return parser


def split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Separate recognised option flags from positional values, keeping the
    values in their original order.
    """
    flags = [tok for tok in argv if tok in _FLAGS]
    values = [tok for tok in argv if tok not in _FLAGS]
    return flags, values


def _resolve_arguments(values: List[str]) -> Tuple[str, Optional[int], List[int]]:
    """
    Split positional values into (algorithm, quantum, bursts).
    """
    if not values:
        raise UsageError("No algorithm given")

    algorithm, rest = values[0], values[1:]
    if algorithm not in ALGORITHMS:
        raise UsageError(f"Unknown algorithm '{algorithm}'")

    if algorithm == "rr":
        if len(rest) < 2:
            raise UsageError("rr needs a quantum and at least one burst")
        return algorithm, atoi(rest[0]), parse_bursts(rest[1:])

    if not rest:
        raise UsageError("fcfs needs at least one burst")
    return algorithm, None, parse_bursts(rest)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _simulate(algorithm: str, bursts: List[int], quantum: Optional[int]) -> ScheduleResult:
    try:
        return run_algorithm(algorithm, bursts, quantum=quantum)
    except MemoryError as exc:
        raise AllocationError("Memory allocation failed") from exc


def _print_report(result: ScheduleResult, console: Console) -> None:
    if result.quantum is None:
        console.print("Using FCFS")
    else:
        console.print(f"Using RR({result.quantum}).")
    console.print()

    for record in result.table:
        console.print(f"Accepted P{record.pid}: Burst {record.burst_time}")

    console.print(f"Average wait time: {average_wait(result.table):.2f}")


def _print_details(result: ScheduleResult, console: Console) -> None:
    console.print()

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in ["PID", "Burst", "Wait", "Turnaround"]:
        proc_table.add_column(h, justify="center" if h == "PID" else "right")

    for r in result.table:
        proc_table.add_row(
            f"P{r.pid}",
            str(r.burst_time),
            str(r.accumulated_wait),
            str(r.accumulated_wait + max(r.burst_time, 0)),
        )

    console.print(proc_table)

    summary = summarize_process_metrics(result.table)
    if result.system:
        system = result.system
        sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
        sys_table.add_column("Metric")
        sys_table.add_column("Value", justify="right")

        sys_table.add_row("Total time", str(result.total_time))
        sys_table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
        sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
        sys_table.add_row("Throughput (proc/time)", f"{system.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{system.cpu_utilization*100:.1f}%")
        sys_table.add_row("Starvation count", str(system.starvation_count))

        console.print(sys_table)


def _print_gantt(result: ScheduleResult, console: Console) -> None:
    console.print()
    console.print(build_rich_gantt(result))


def main(argv: list[str] | None = None) -> int:
    console = Console(markup=False, highlight=False, soft_wrap=True)
    parser = build_parser()

    flags, values = split_argv(sys.argv[1:] if argv is None else list(argv))

    try:
        args = parser.parse_args(flags)
        algorithm, quantum, bursts = _resolve_arguments(values)
    except UsageError:
        console.print("ERROR: Missing arguments")
        return 1

    _configure_logging(args.verbose)

    try:
        result = _simulate(algorithm, bursts, quantum)
    except AllocationError as exc:
        Console(stderr=True, markup=False, highlight=False).print(f"ERROR: {exc}")
        return 1

    _print_report(result, console)
    if args.details:
        _print_details(result, console)
    if args.gantt:
        _print_gantt(result, console)

    logger.debug("Reported %d process(es)", len(result.table))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
