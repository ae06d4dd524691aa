from __future__ import annotations

import logging

from .models import ProcessTable

logger = logging.getLogger(__name__)


def run_proc(table: ProcessTable, current: int, amount: int) -> None:
    """
    "Run" process `current` for up to `amount` time units.

    The process' remaining burst drops by run_time = min(amount, remaining),
    and every other process that still has work waits for run_time. Unknown
    pids, non-positive amounts and finished processes are silent no-ops.
    """
    if not 0 <= current < len(table):
        return
    if amount <= 0:
        return

    if table[current].finished:
        return

    run_time = min(amount, table[current].remaining_burst)

    # Waiting set is fixed before the current process is charged.
    waiting = [r for r in table if r.pid != current and not r.finished]

    table[current].remaining_burst -= run_time
    for record in waiting:
        record.accumulated_wait += run_time

    logger.debug(
        "P%d ran %d (left %d); %d process(es) waited",
        current,
        run_time,
        table[current].remaining_burst,
        len(waiting),
    )
