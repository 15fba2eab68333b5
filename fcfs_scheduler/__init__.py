"""
FCFS scheduler package.

Simulates non-preemptive First-Come First-Serve CPU scheduling over a fixed
time budget and reports turnaround, waiting, response time and throughput.
"""

from .metrics import aggregate
from .models import ProcessRecord, SimulationRun, StatisticsReport
from .scheduler import schedule_fcfs

__all__ = [
    "ProcessRecord",
    "SimulationRun",
    "StatisticsReport",
    "aggregate",
    "cli",
    "schedule_fcfs",
]
