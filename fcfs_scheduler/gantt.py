from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice

COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def render_gantt(slices: List[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart; idle ticks are drawn as dots.
    """
    if not slices:
        return "(no execution)"

    slices = sorted(slices, key=lambda s: (s.start_time, s.end_time))

    line = "|"
    labels = ""
    time_marks = str(slices[0].start_time)

    for sl in slices:
        width = max(1, sl.duration)
        if sl.idle:
            line += "." * width
            labels += " " * width
        else:
            line += "=" * width
            labels += sl.job_id[:width].ljust(width)
        time_marks += f"{sl.end_time:>3}"

    line += "|"

    return "\n".join(["Gantt Chart:", line, labels, time_marks])


def build_rich_gantt(slices: List[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    slices = sorted(slices, key=lambda s: (s.start_time, s.end_time))
    job_colors: Dict[str, str] = {}

    def job_color(job_id: str) -> str:
        if job_id not in job_colors:
            job_colors[job_id] = COLORS[len(job_colors) % len(COLORS)]
        return job_colors[job_id]

    timeline = Text()
    labels = Text()
    time_marks = str(slices[0].start_time)

    for sl in slices:
        width = max(1, sl.duration)
        if sl.idle:
            timeline.append("." * width, style="dim")
            labels.append(" " * width)
        else:
            timeline.append(" " * width, style=f"on {job_color(sl.job_id)}")
            labels.append(sl.job_id[:width].ljust(width), style="bold")
        time_marks += f"{sl.end_time:>3}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    return Panel.fit(table, title="FCFS Gantt Chart"), time_marks
