"""Tests for the pipeline runner script."""

import importlib.util
import os

import pytest

from ride_trends.config import PROJECT_ROOT


@pytest.fixture
def run_all():
    path = os.path.join(PROJECT_ROOT, "scripts", "00_run_all.py")
    spec = importlib.util.spec_from_file_location("run_all", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRunScript:
    """Tests for run_script."""

    def test_runs_script_in_given_directory(self, run_all, tmp_path, capsys):
        (tmp_path / "step.py").write_text("import os, sys\nprint('cwd', os.getcwd(), sys.argv[1:])\n")
        assert run_all.run_script(str(tmp_path), "step.py", 1, 1, ["rides.csv"])
        out = capsys.readouterr().out
        assert str(tmp_path) in out
        assert "['rides.csv']" in out

    def test_failing_script_reports_error(self, run_all, tmp_path, capsys):
        (tmp_path / "broken.py").write_text("raise SystemExit('boom')\n")
        assert not run_all.run_script(str(tmp_path), "broken.py", 2, 4, [])
        out = capsys.readouterr().out
        assert "Error in broken.py" in out
        assert "boom" in out
