from rich.panel import Panel

from fcfs_scheduler.chart import build_rich_time_chart, render_time_chart
from fcfs_scheduler.models import ScheduledSlice


def _slices():
    return [
        ScheduledSlice("P1", 0, 5),
        ScheduledSlice("P2", 5, 8),
        ScheduledSlice("P3", 8, 9),
    ]


def test_render_time_chart():
    lines = render_time_chart(_slices()).splitlines()
    assert lines == ["|=========|", " P1   P2 P", "0   5   8   9"]


def test_render_time_chart_idle_gap():
    lines = render_time_chart([ScheduledSlice("P1", 10, 15)]).splitlines()
    assert lines[0] == "|..........=====|"
    assert lines[2] == "0  10  15"


def test_render_time_chart_chunks_rows():
    lines = render_time_chart(_slices(), chunk_size=2).splitlines()
    assert len(lines) == 6
    # second row continues from where the first stopped
    assert lines[5] == "8   9"


def test_render_empty():
    assert render_time_chart([]) == "(no execution)"


def test_build_rich_time_chart():
    assert isinstance(build_rich_time_chart(_slices(), chunk_size=2), Panel)
    assert isinstance(build_rich_time_chart([]), Panel)
