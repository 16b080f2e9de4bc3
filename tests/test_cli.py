"""Tests for the ``python -m draft_lottery`` entry point."""

import json
import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from draft_lottery.__main__ import main


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestRunCommand:

    def test_json_results(self, capsys):
        assert main(["run", "--fast", "--json", "--seed", "7"]) == 0
        records = json.loads(capsys.readouterr().out)
        assert [r["pick_number"] for r in records] == [1, 2, 3, 4, 5]
        ids = {r["entity"]["id"] for r in records}
        assert ids == {"Dragons", "Sharks", "Wolves", "Bulls", "Eagles"}

    def test_same_seed_same_output(self, capsys):
        main(["run", "--fast", "--json", "--seed", "3"])
        first = capsys.readouterr().out
        main(["run", "--fast", "--json", "--seed", "3"])
        assert capsys.readouterr().out == first

    def test_default_command_is_run(self, capsys):
        assert main(["--fast", "--log-level", "WARNING"]) == 0
        out = capsys.readouterr().out
        assert "Pick 1:" in out
        assert "Results" in out
        assert "5. " in out

    def test_custom_teams_file(self, tmp_path, capsys):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps([
            {"id": "North", "weights": [1, 1]},
            {"id": "South", "weights": [1, 1]},
            {"id": "East", "weights": [1, 1]},
        ]))
        assert main(["run", "--fast", "--json", "--teams", str(path)]) == 0
        records = json.loads(capsys.readouterr().out)
        assert len(records) == 2

    def test_invalid_teams_exit_code(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps([
            {"id": "North", "weights": [1, 1]},
            {"id": "South", "weights": [1]},
        ]))
        assert main(["run", "--fast", "--teams", str(path), "--log-level", "WARNING"]) == 1

    def test_missing_teams_file_exit_code(self, tmp_path):
        missing = tmp_path / "nope.json"
        assert main(["run", "--fast", "--teams", str(missing), "--log-level", "WARNING"]) == 1

    def test_degenerate_exit_code(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps([
            {"id": "North", "weights": [0]},
            {"id": "South", "weights": [0]},
        ]))
        argv = ["run", "--fast", "--teams", str(path), "--log-level", "WARNING"]
        assert main(argv) == 1
        assert main([*argv, "--degenerate", "uniform"]) == 0


    def test_json_stays_parseable_with_warnings(self, tmp_path, capsys):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps([
            {"id": "North", "weights": [0]},
            {"id": "South", "weights": [0]},
        ]))
        argv = ["run", "--fast", "--json", "--degenerate", "uniform", "--teams", str(path)]
        assert main(argv) == 0
        captured = capsys.readouterr()
        records = json.loads(captured.out)
        assert len(records) == 1
        assert records[0]["entity"]["id"] in {"North", "South"}
        assert "drawing uniformly" in captured.err


class TestSimulateCommand:

    def test_table_lists_every_team(self, capsys):
        assert main(["simulate", "--runs", "200", "--log-level", "WARNING"]) == 0
        out = capsys.readouterr().out
        for name in ("Dragons", "Sharks", "Wolves", "Bulls", "Eagles"):
            assert name in out
        assert "#5" in out

    def test_table_aligned_for_short_ids(self, tmp_path, capsys):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps([
            {"id": "A", "weights": [2, 1]},
            {"id": "B", "weights": [1, 2]},
        ]))
        argv = ["simulate", "--runs", "50", "--teams", str(path), "--log-level", "WARNING"]
        assert main(argv) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert len({len(line) for line in lines}) == 1
