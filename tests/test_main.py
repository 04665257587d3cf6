import os

import main

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_cli_runs_sample_file(tmp_path, capsys):
    sample = os.path.join(REPO_ROOT, 'data', 'sample_processes.txt')
    output_dir = tmp_path / "out"

    code = main.main([sample, '-q', '4', '-s', '1', '--output-dir', str(output_dir)])

    assert code == 0
    assert (output_dir / "results.txt").exists()
    assert (output_dir / "gantt_round_robin.png").exists()
    assert "Round Robin (q=4)" in capsys.readouterr().out


def test_cli_json_without_chart(tmp_path):
    sample = os.path.join(REPO_ROOT, 'data', 'sample_processes.json')
    assert main.main([sample, '-q', '100', '-s', '10', '--no-chart',
                      '--output-dir', str(tmp_path / "out")]) == 0
    assert not (tmp_path / "out").exists()


def test_cli_random_workload(tmp_path):
    assert main.main(['--random', '5', '--seed', '1', '--no-chart']) == 0


def test_cli_invalid_workload_exits_with_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text('1,0,"0"\n', encoding='utf-8')
    assert main.main([str(path), '--no-chart']) == 1
    assert "[오류]" in capsys.readouterr().out


def test_cli_requires_input(capsys):
    assert main.main([]) == 1
