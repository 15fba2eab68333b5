from __future__ import annotations

import logging
from typing import Sequence

from .metrics import DEFAULT_CHUNK_SIZE, aggregate
from .models import ProcessRecord, ScheduledSlice, SimulationRun

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM_BUDGET = 100


def validate_workload(
    processes: Sequence[ProcessRecord],
    quantum_budget: int,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """
    Reject inputs the scheduler cannot give meaningful statistics for.

    The records must already be ordered by arrival time; ordering is the
    caller's job and is only checked here.
    """
    if quantum_budget < 0:
        raise ValueError(f"quantum_budget must not be negative, got {quantum_budget}")
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if not processes:
        raise ValueError("FCFS needs at least one process")

    seen = set()
    previous = None
    for p in processes:
        if id(p) in seen:
            raise ValueError(f"Process {p.pid} appears more than once in the workload")
        seen.add(id(p))
        for name in ("arrival_time", "expected_run_time"):
            value = getattr(p, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Process {p.pid} needs an integer {name}, got {value!r}")
        if p.arrival_time < 0:
            raise ValueError(f"Process {p.pid} has negative arrival time {p.arrival_time}")
        if p.expected_run_time <= 0:
            raise ValueError(
                f"Process {p.pid} needs a positive expected run time, got {p.expected_run_time}"
            )
        if p.completed:
            raise ValueError(f"Process {p.pid} was already completed by an earlier run")
        if previous is not None and p.arrival_time < previous.arrival_time:
            raise ValueError(
                f"Processes must be ordered by arrival time: {p.pid} ({p.arrival_time}) "
                f"follows {previous.pid} ({previous.arrival_time})"
            )
        previous = p


def schedule_fcfs(
    processes: Sequence[ProcessRecord],
    quantum_budget: int = DEFAULT_QUANTUM_BUDGET,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> SimulationRun:
    """
    First-Come First-Serve (non-preemptive) scheduling over a bounded window.

    Processes are dispatched in input order. A process is only dispatched if it
    can finish within ``quantum_budget`` time units; the first one that cannot
    ends the run and it, along with everything after it, is left untouched.
    """
    validate_workload(processes, quantum_budget, chunk_size)

    run = SimulationRun(quantum_budget=quantum_budget, submitted=len(processes))
    clock = 0

    for p in processes:
        dispatch_time = max(clock, p.arrival_time)
        finished_time = dispatch_time + p.expected_run_time

        if finished_time > quantum_budget:
            logger.info(
                "Budget of %d exhausted at clock %d: %s would finish at %d, %d process(es) not run",
                quantum_budget,
                clock,
                p.pid,
                finished_time,
                run.submitted - len(run.processed),
            )
            break

        if dispatch_time > clock:
            logger.debug("CPU idle from %d to %d waiting for %s", clock, dispatch_time, p.pid)

        p.dispatch_time = dispatch_time
        p.finished_time = finished_time
        p.turnaround_time = finished_time - p.arrival_time
        p.waiting_time = p.turnaround_time - p.expected_run_time
        p.response_time = p.waiting_time  # no preemption, first dispatch runs to completion
        p.completed = True

        run.processed.append(p)
        run.timeline.append(ScheduledSlice(pid=p.pid, start_time=dispatch_time, end_time=finished_time))
        logger.debug("Dispatched %s at %d, finished at %d", p.pid, dispatch_time, finished_time)

        clock = finished_time

    run.final_clock = clock
    run.report = aggregate(
        run.processed,
        quantum_budget,
        submitted=run.submitted,
        chunk_size=chunk_size,
    )
    logger.info(
        "FCFS completed %d of %d processes, clock stopped at %d",
        len(run.processed),
        run.submitted,
        clock,
    )
    return run
