from pathlib import Path

import pytest

from fcfs_scheduler.models import ProcessRecord
from fcfs_scheduler.workload_io import load_workload, order_by_arrival


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0,"expected_run_time":3},'
                 '{"arrival_time":1,"expected_run_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], ProcessRecord)
    assert procs[0].pid == "A"
    assert procs[1].pid == "P2"
    assert procs[1].arrival_time == 1
    assert not procs[1].completed


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,expected_run_time\nA,0,3\n,1,2\n")
    procs = load_workload(p)
    assert procs[0].pid == "A"
    assert procs[1].pid == "P2"
    assert procs[1].expected_run_time == 2


def test_load_rejects_bad_files(tmp_path: Path):
    txt = tmp_path / "w.txt"
    txt.write_text("")
    with pytest.raises(ValueError, match="Unsupported"):
        load_workload(txt)

    missing_field = tmp_path / "bad.json"
    missing_field.write_text('[{"pid":"A","arrival_time":0}]')
    with pytest.raises(ValueError, match="Invalid process entry"):
        load_workload(missing_field)

    not_a_list = tmp_path / "obj.json"
    not_a_list.write_text('{"pid":"A"}')
    with pytest.raises(ValueError):
        load_workload(not_a_list)


def test_order_by_arrival_is_stable():
    procs = [
        ProcessRecord("C", arrival_time=4, expected_run_time=1),
        ProcessRecord("A", arrival_time=1, expected_run_time=1),
        ProcessRecord("B", arrival_time=1, expected_run_time=2),
    ]
    assert [p.pid for p in order_by_arrival(procs)] == ["A", "B", "C"]
