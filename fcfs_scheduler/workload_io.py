from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Iterable, List

from .models import ProcessRecord


def load_workload(path: str | Path) -> List[ProcessRecord]:
    """
    Load a workload from a JSON or CSV file into a list of ProcessRecord objects.

    Records come back in file order; use ``order_by_arrival`` before scheduling.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def order_by_arrival(processes: Iterable[ProcessRecord]) -> List[ProcessRecord]:
    # sorted() is stable, so ties keep their file order
    return sorted(processes, key=lambda p: p.arrival_time)


def _load_json(path: Path) -> List[ProcessRecord]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON workload {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise ValueError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry, index) for index, entry in enumerate(raw, start=1)]


def _load_csv(path: Path) -> List[ProcessRecord]:
    processes: List[ProcessRecord] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for index, row in enumerate(reader, start=1):
            processes.append(_process_from_mapping(row, index))
    return processes


def _process_from_mapping(mapping, index: int) -> ProcessRecord:
    try:
        arrival_time = int(mapping["arrival_time"])
        expected_run_time = int(mapping["expected_run_time"])
        pid_val = mapping.get("pid")
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise ValueError(f"Invalid process entry: {mapping!r}") from exc

    pid = str(pid_val) if pid_val not in (None, "") else f"P{index}"

    return ProcessRecord(
        pid=pid,
        arrival_time=arrival_time,
        expected_run_time=expected_run_time,
    )
