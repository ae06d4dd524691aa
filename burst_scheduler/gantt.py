from __future__ import annotations

from typing import Dict

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduleResult

_COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]
_MAX_BAR = 12


def build_rich_gantt(result: ScheduleResult) -> Panel:
    """
    Chart a schedule as one column per executed slice: process label, a bar
    scaled to the slice length (capped at _MAX_BAR cells), the burst left
    after the slice or "done" where the process completes, and the slice end
    time.
    """
    title = f"Gantt Chart: {result.algorithm}"
    if result.quantum is not None:
        title += f" (q={result.quantum})"

    if not result.timeline:
        return Panel("No execution", title=title)

    colors: Dict[int, str] = {}
    for r in result.table:
        colors[r.pid] = _COLORS[r.pid % len(_COLORS)]

    grid = Table.grid(padding=(0, 1))
    grid.add_column("", justify="right", style="dim")
    for _ in result.timeline:
        grid.add_column(justify="center")

    bars = []
    left = []
    ends = []
    for sl in result.timeline:
        width = min(_MAX_BAR, max(1, sl.end_time - sl.start_time))
        bars.append(Text(" " * width, style=f"on {colors[sl.pid]}"))
        if sl.completes:
            left.append(Text("done", style="bold green"))
        else:
            left.append(Text(str(sl.remaining)))
        ends.append(str(sl.end_time))

    grid.add_row("pid", *[Text(f"P{sl.pid}", style="bold") for sl in result.timeline])
    grid.add_row("", *bars)
    grid.add_row("left", *left)
    grid.add_row("end", *ends)

    return Panel.fit(grid, title=title, subtitle=f"total {result.total_time}")
