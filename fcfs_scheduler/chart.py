from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .metrics import DEFAULT_CHUNK_SIZE
from .models import ScheduledSlice


def _chunks(slices: List[ScheduledSlice], chunk_size: int) -> List[List[ScheduledSlice]]:
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [slices[i : i + chunk_size] for i in range(0, len(slices), chunk_size)]


def render_time_chart(slices: List[ScheduledSlice], chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """
    Plain-text time chart, ``chunk_size`` processes per row.

    Each row starts where the previous one stopped; idle time is drawn as dots.
    """
    if not slices:
        return "(no execution)"

    lines: List[str] = []
    last_time = 0

    for row in _chunks(list(slices), chunk_size):
        bar = "|"
        labels = " "
        time_marks = f"{last_time}"

        for sl in row:
            idle_gap = sl.start_time - last_time
            if idle_gap > 0:
                bar += "." * idle_gap
                labels += " " * idle_gap
                last_time = sl.start_time
                time_marks += f"{last_time:>4}"

            width = sl.end_time - sl.start_time
            bar += "=" * width
            labels += sl.pid[:width].ljust(width)
            last_time = sl.end_time
            time_marks += f"{last_time:>4}"

        lines.extend([bar + "|", labels, time_marks])

    return "\n".join(lines)


def build_rich_time_chart(slices: List[ScheduledSlice], chunk_size: int = DEFAULT_CHUNK_SIZE) -> Panel:
    """
    Build a Rich Panel with a coloured time chart, one grid row pair per chunk.
    """
    if not slices:
        return Panel("No execution", title="Time Chart")

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            pid_to_color[pid] = colors[len(pid_to_color) % len(colors)]
        return pid_to_color[pid]

    table = Table.grid(padding=(0, 0))
    last_time = 0

    for row in _chunks(list(slices), chunk_size):
        timeline = Text()
        labels = Text()
        first_time = last_time

        for sl in row:
            idle_gap = sl.start_time - last_time
            if idle_gap > 0:
                timeline.append("." * idle_gap, style="dim")
                labels.append(" " * idle_gap)

            width = sl.end_time - sl.start_time
            timeline.append(" " * width, style=f"on {pid_color(sl.pid)}")
            labels.append(sl.pid[:width].ljust(width), style="bold")
            last_time = sl.end_time

        table.add_row(timeline)
        table.add_row(labels)
        table.add_row(Text(f"{first_time} .. {last_time}", style="dim"))

    return Panel.fit(table, title="Time Chart")
