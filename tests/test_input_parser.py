import json

import pytest

from core.process import InvalidWorkloadError
from utils.input_parser import InputParser


def test_parse_text_file(tmp_path):
    path = tmp_path / "processes.txt"
    path.write_text(
        "# comment\n"
        "\n"
        '1,0,"5,3,5"\n'
        "2, 4, 8\n",
        encoding='utf-8')

    processes = InputParser.parse_file(str(path))

    assert [p.pid for p in processes] == [1, 2]
    assert processes[0].cpu_bursts == (5, 5)
    assert processes[0].io_waits == (3,)
    assert processes[1].arrival_time == 4
    assert processes[1].cpu_bursts == (8,)


def test_bad_line_reports_line_number(tmp_path):
    path = tmp_path / "processes.txt"
    path.write_text('1,0,"5"\n2,0,"5,0"\n', encoding='utf-8')
    with pytest.raises(InvalidWorkloadError, match=r":2:"):
        InputParser.parse_file(str(path))


def test_non_numeric_field_rejected(tmp_path):
    path = tmp_path / "processes.txt"
    path.write_text('x,0,"5"\n', encoding='utf-8')
    with pytest.raises(InvalidWorkloadError):
        InputParser.parse_file(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        InputParser.parse_file(str(tmp_path / "missing.txt"))


def test_parse_json_file(tmp_path):
    path = tmp_path / "processes.json"
    path.write_text(json.dumps({"processes": [
        {"arrival": 0, "cpu_bursts": [300]},
        {"pid": 7, "arrival_time": 3, "cpu_bursts": [2, 2], "io_waits": [1]},
    ]}), encoding='utf-8')

    processes = InputParser.load(str(path))

    assert [p.pid for p in processes] == [0, 7]
    assert processes[1].arrival_time == 3
    assert processes[1].io_waits == (1,)


def test_from_dicts_rejects_mismatched_io_waits():
    with pytest.raises(InvalidWorkloadError):
        InputParser.from_dicts([{"arrival": 0, "cpu_bursts": [5], "io_waits": [1, 2]}])


def test_from_dicts_requires_fields():
    with pytest.raises(InvalidWorkloadError):
        InputParser.from_dicts([{"cpu_bursts": [5]}])


def test_saved_file_loads_back(tmp_path):
    processes = InputParser.generate_random_processes(num_processes=5, seed=3)
    path = tmp_path / "saved.txt"
    InputParser.save_processes_to_file(processes, str(path))

    loaded = InputParser.load(str(path))

    assert [(p.pid, p.arrival_time, p.cpu_bursts, p.io_waits) for p in loaded] == \
        [(p.pid, p.arrival_time, p.cpu_bursts, p.io_waits) for p in processes]


def test_random_processes_are_reproducible():
    first = InputParser.generate_random_processes(num_processes=6, seed=42)
    second = InputParser.generate_random_processes(num_processes=6, seed=42)
    assert [p.execution_pattern for p in first] == [p.execution_pattern for p in second]
    assert all(len(p.io_waits) == len(p.cpu_bursts) - 1 for p in first)


def test_print_process_summary(capsys):
    InputParser.print_process_summary(InputParser.from_dicts([
        {"arrival": 0, "cpu_bursts": [4, 2], "io_waits": [3]},
    ]))
    out = capsys.readouterr().out
    assert "전체 프로세스: 1개" in out
