from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ProcessRecord:
    """
    One process submitted to the simulator.

    ``arrival_time`` and ``expected_run_time`` are fixed by the caller; the
    remaining fields are filled in by the scheduler when the process completes.
    """

    pid: str
    arrival_time: int
    expected_run_time: int
    dispatch_time: Optional[int] = None
    finished_time: Optional[int] = None
    turnaround_time: Optional[int] = None
    waiting_time: Optional[int] = None
    response_time: Optional[int] = None
    completed: bool = False

    def summary(self) -> str:
        return (
            f"{self.pid}: arrival={self.arrival_time} run={self.expected_run_time} "
            f"dispatch={self.dispatch_time} finished={self.finished_time} "
            f"turnaround={self.turnaround_time} waiting={self.waiting_time} "
            f"response={self.response_time}"
        )


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the time chart.
    """

    pid: str
    start_time: int
    end_time: int


@dataclass
class StatisticsReport:
    submitted: int
    completed: int
    quantum_budget: int
    total_turnaround: int
    total_waiting: int
    total_response: int
    avg_turnaround: float
    avg_waiting: float
    avg_response: float
    throughput: float
    summaries: List[str] = field(default_factory=list)
    time_chart: List[List[str]] = field(default_factory=list)

    @property
    def unfinished(self) -> int:
        return self.submitted - self.completed


@dataclass
class SimulationRun:
    quantum_budget: int
    submitted: int
    final_clock: int = 0
    processed: List[ProcessRecord] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    report: Optional[StatisticsReport] = None

    @property
    def unfinished(self) -> int:
        return self.submitted - len(self.processed)
