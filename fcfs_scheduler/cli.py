from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .chart import build_rich_time_chart, render_time_chart
from .metrics import DEFAULT_CHUNK_SIZE, format_output_listing
from .models import ProcessRecord, SimulationRun
from .scheduler import DEFAULT_QUANTUM_BUDGET, schedule_fcfs
from .workload_io import load_workload, order_by_arrival

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fcfs-scheduler",
        description="First-Come First-Serve CPU scheduling simulator over a fixed time budget.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every dispatch and idle gap.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Simulate FCFS on a workload file.")
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--budget",
        "-b",
        type=int,
        default=DEFAULT_QUANTUM_BUDGET,
        help=f"Number of time units to simulate (default: {DEFAULT_QUANTUM_BUDGET}).",
    )
    run_parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Processes per time chart row (default: {DEFAULT_CHUNK_SIZE}).",
    )
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the plain-text listing instead of tables.",
    )

    sweep_parser = subparsers.add_parser(
        "sweep",
        help="Simulate the same workload under several budgets and compare statistics.",
    )
    sweep_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    sweep_parser.add_argument(
        "--budgets",
        "-b",
        type=int,
        nargs="+",
        default=[25, 50, DEFAULT_QUANTUM_BUDGET],
        help=f"Budgets to compare (default: 25 50 {DEFAULT_QUANTUM_BUDGET}).",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


def _load_ordered(path: Path) -> List[ProcessRecord]:
    processes = order_by_arrival(load_workload(path))
    logger.debug("Loaded %d processes from %s", len(processes), path)
    return processes


def _print_result(run: SimulationRun, chunk_size: int, console: Console) -> None:
    console.print(f"[bold]Quantum budget:[/bold] {run.quantum_budget}")
    console.print(f"[bold]Final clock:[/bold] {run.final_clock}")
    console.print()

    console.print(build_rich_time_chart(run.timeline, chunk_size=chunk_size))
    console.print()

    headers = ["PID", "Arrive", "Run", "Dispatch", "Finish", "Wait", "Turnaround", "Response"]

    proc_table = Table(title="Per-process statistics", box=box.SIMPLE_HEAVY)
    for h in headers:
        proc_table.add_column(h, justify="center" if h == "PID" else "right")

    for p in run.processed:
        proc_table.add_row(
            p.pid,
            str(p.arrival_time),
            str(p.expected_run_time),
            str(p.dispatch_time),
            str(p.finished_time),
            str(p.waiting_time),
            str(p.turnaround_time),
            str(p.response_time),
        )

    console.print(proc_table)
    console.print()

    report = run.report
    stats_table = Table(title="Statistics", box=box.SIMPLE_HEAVY)
    stats_table.add_column("Metric")
    stats_table.add_column("Value", justify="right")

    stats_table.add_row("Completed", f"{report.completed} / {report.submitted}")
    stats_table.add_row("Avg turnaround", f"{report.avg_turnaround:.2f}")
    stats_table.add_row("Avg waiting", f"{report.avg_waiting:.2f}")
    stats_table.add_row("Avg response", f"{report.avg_response:.2f}")
    stats_table.add_row("Throughput (proc/time)", f"{report.throughput:.3f}")

    console.print(stats_table)
    if report.unfinished:
        console.print(
            f"[yellow]{report.unfinished} process(es) did not fit in the "
            f"{report.quantum_budget}-unit budget.[/yellow]"
        )


def _print_plain(run: SimulationRun, chunk_size: int, console: Console) -> None:
    for line in format_output_listing(run.report):
        console.print(line, markup=False, highlight=False, soft_wrap=True)
    console.print()
    console.print(
        render_time_chart(run.timeline, chunk_size=chunk_size),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _run_sweep(workload_path: Path, budgets: List[int], console: Console) -> None:
    """
    Simulate the workload once per budget and print the summary table.
    """
    summary_table = Table(title=f"Budget sweep: {workload_path}", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Budget", justify="right")
    summary_table.add_column("Completed", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Avg response", justify="right")
    summary_table.add_column("Throughput", justify="right")

    for budget in budgets:
        # every run owns fresh records
        run = schedule_fcfs(_load_ordered(workload_path), quantum_budget=budget)
        report = run.report
        summary_table.add_row(
            str(budget),
            f"{report.completed} / {report.submitted}",
            f"{report.avg_waiting:.2f}",
            f"{report.avg_turnaround:.2f}",
            f"{report.avg_response:.2f}",
            f"{report.throughput:.3f}",
        )

    console.print(summary_table)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)
    console = Console()

    try:
        if args.command == "run":
            processes = _load_ordered(Path(args.workload))
            run = schedule_fcfs(processes, quantum_budget=args.budget, chunk_size=args.chunk_size)
            if args.plain:
                _print_plain(run, args.chunk_size, console)
            else:
                _print_result(run, args.chunk_size, console)
            return 0

        if args.command == "sweep":
            _run_sweep(Path(args.workload), args.budgets, console)
            return 0
    except (ValueError, OSError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
