import os
import subprocess
import sys
import pytest
from pathlib import Path

from vrpparse.cli import inspect_instances
from vrpparse.config.parameters import Parameters

repo_root = Path(__file__).resolve().parents[2]


def _run_cli(*args):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        [str(repo_root / "src")] + ([env["PYTHONPATH"]] if env.get("PYTHONPATH") else [])
    )
    cmd = [sys.executable, '-m', 'vrpparse.cli.inspect_instances', *args]
    return subprocess.run(cmd, capture_output=True, env=env)


def test_inspect_info_flag():
    result = _run_cli('--info')
    assert result.returncode == 0
    out = result.stdout.decode('utf-8')
    assert 'Routing Instance Inspection Tool' in out
    assert 'Supported layouts:' in out


def test_inspect_single_file(solomon_path):
    result = _run_cli(str(solomon_path))
    assert result.returncode == 0
    out = result.stdout.decode('utf-8')
    assert 'C101 (VRPTW)' in out
    assert 'vehicles=25 capacity=200 rows=6' in out


def test_inspect_parse_error_exit_code(tmp_path):
    bad = tmp_path / 'bad.txt'
    bad.write_text("25 200\n1 2 3 4 5 6 7 8\n")
    result = _run_cli(str(bad))
    assert result.returncode == 1
    err = result.stderr.decode('utf-8')
    assert 'line 2' in err
    assert '8 fields' in err


def test_inspect_missing_file(tmp_path):
    result = _run_cli(str(tmp_path / 'missing.txt'))
    assert result.returncode != 0
    err = result.stderr.decode('utf-8')
    assert 'usage:' in err
    assert 'Instance file(s) not found:' in err


def test_inspect_in_process_multiple_files(solomon_path, lilim_path, tmp_path, monkeypatch):
    monkeypatch.setattr(inspect_instances, 'setup_logging', lambda level: None)
    recorded = []

    class DummyProgress:
        def __init__(self, paths):
            self.paths = paths
        def record(self, message, outcome='parsed'):
            recorded.append((message, outcome))
        def close(self):
            recorded.append(('closed', None))

    monkeypatch.setattr(inspect_instances, 'InspectionProgress', DummyProgress)
    warned = tmp_path / 'warned.txt'
    warned.write_text("0 10\n0 0 0 0 0 1 0\n")

    inspect_instances.main([str(solomon_path), str(lilim_path), str(warned)])

    assert [outcome for _, outcome in recorded] == ['parsed', 'parsed', 'warnings', None]
    assert 'lc101_head.txt: <unnamed> (PDPTW)' in recorded[1][0]
    assert 'warnings=1' in recorded[2][0]


def test_inspect_failure_is_counted_in_summary(solomon_path, tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(inspect_instances, 'setup_logging', lambda level: None)
    bad = tmp_path / 'bad.txt'
    bad.write_text("25 200\n1 2 3\n")

    with pytest.raises(SystemExit) as ei:
        inspect_instances.main([str(solomon_path), str(bad)])

    assert ei.value.code == 1
    captured = capsys.readouterr()
    output = captured.out + captured.err
    assert 'bad.txt: line 2' in output
    assert '1 parsed, 0 with warnings, 1 failed' in output


def test_load_parameters_strict_override(tmp_path):
    parser = inspect_instances._build_parser()
    args = parser.parse_args(['--strict', 'x.txt'])
    assert inspect_instances.load_parameters(args).strict_line_endings is True

    config = tmp_path / 'c.yaml'
    config.write_text("warn_mixed_row_widths: false\n")
    args = parser.parse_args(['--config', str(config), 'x.txt'])
    params = inspect_instances.load_parameters(args)
    assert params == Parameters(warn_mixed_row_widths=False)


def test_no_paths_is_usage_error(monkeypatch):
    monkeypatch.setattr(inspect_instances, 'setup_logging', lambda level: None)
    with pytest.raises(SystemExit) as ei:
        inspect_instances.main([])
    assert ei.value.code == 2
