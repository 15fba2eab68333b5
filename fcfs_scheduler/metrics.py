from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .models import ProcessRecord, StatisticsReport

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 10


def chunk_pids(records: Sequence[ProcessRecord], chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[List[str]]:
    """
    Group process identifiers into rows of ``chunk_size`` for display.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    pids = [p.pid for p in records]
    return [pids[i : i + chunk_size] for i in range(0, len(pids), chunk_size)]


def aggregate(
    processed: Sequence[ProcessRecord],
    quantum_budget: int,
    submitted: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> StatisticsReport:
    """
    Build the statistics report for the completed processes of one run.

    Averages are taken over ``submitted``, the number of processes handed to
    the scheduler, so processes cut off by the budget drag the averages down.
    Throughput is completions per time unit of the whole budget.
    """
    if quantum_budget < 0:
        raise ValueError(f"quantum_budget must not be negative, got {quantum_budget}")

    if submitted is None:
        submitted = len(processed)
    if submitted < len(processed):
        raise ValueError(
            f"submitted count {submitted} is smaller than the {len(processed)} processed records"
        )

    for p in processed:
        if not p.completed:
            raise ValueError(f"Process {p.pid} has not completed and cannot be aggregated")

    total_turnaround = sum(p.turnaround_time for p in processed)
    total_waiting = sum(p.waiting_time for p in processed)
    total_response = sum(p.response_time for p in processed)

    if submitted > 0:
        avg_turnaround = total_turnaround / submitted
        avg_waiting = total_waiting / submitted
        avg_response = total_response / submitted
    else:
        avg_turnaround = avg_waiting = avg_response = 0.0

    throughput = len(processed) / quantum_budget if quantum_budget > 0 else 0.0

    report = StatisticsReport(
        submitted=submitted,
        completed=len(processed),
        quantum_budget=quantum_budget,
        total_turnaround=total_turnaround,
        total_waiting=total_waiting,
        total_response=total_response,
        avg_turnaround=avg_turnaround,
        avg_waiting=avg_waiting,
        avg_response=avg_response,
        throughput=throughput,
        summaries=[p.summary() for p in processed],
        time_chart=chunk_pids(processed, chunk_size),
    )
    logger.debug(
        "Aggregated %d/%d processes: avg waiting %.2f, throughput %.3f",
        report.completed,
        report.submitted,
        report.avg_waiting,
        report.throughput,
    )
    return report


def format_output_listing(report: StatisticsReport) -> List[str]:
    """
    Plain-text listing: one line per process, the chunked time chart and the
    averages line.
    """
    lines = list(report.summaries)

    lines.append("")
    lines.append("Time Chart:")
    for row in report.time_chart:
        lines.append(" ".join(row))

    lines.append(
        f"Average Turnaround Time: {report.avg_turnaround:.2f}\t"
        f"Average Waiting Time: {report.avg_waiting:.2f}\t"
        f"Average Response Time: {report.avg_response:.2f}\t"
        f"Throughput: {report.throughput:.3f}"
    )
    if report.unfinished:
        lines.append(
            f"{report.unfinished} of {report.submitted} processes did not run "
            f"within {report.quantum_budget} time units"
        )
    return lines
