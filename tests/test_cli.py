# tests/test_cli.py
import json

from gridpath.app.cli import main
from gridpath.core.maps import MAP_FILES


def test_default_board_finds_path(capsys, monkeypatch):
    monkeypatch.delenv("GRIDPATH_MAP", raising=False)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== Input path finding board ===" in out
    assert "=== Board legend ===" in out
    assert "start position: (6, 0)" in out
    assert "=== RESULT ===: Found a path! (16 steps" in out
    assert "+++++" in out


def test_unreachable_goal_still_exits_zero(capsys):
    assert main([str(MAP_FILES["03_walled_off"]), "--no-legend"]) == 0
    out = capsys.readouterr().out
    assert "=== RESULT ===: No valid path found!" in out
    assert "=== Board legend ===" not in out


def test_configuration_error_exits_one(tmp_path, capsys):
    bad = tmp_path / "two_starts.json"
    bad.write_text(json.dumps({"rows": ["S.S", "..G"]}))
    assert main([str(bad)]) == 1
    out = capsys.readouterr().out
    assert "=== ERROR ===: Can't have more than 1 start point!" in out
    assert "RESULT" not in out


def test_map_from_environment(tmp_path, capsys, monkeypatch):
    m = tmp_path / "line.json"
    m.write_text(json.dumps({"rows": ["S..G"]}))
    monkeypatch.setenv("GRIDPATH_MAP", str(m))
    assert main(["--algo", "dijkstra"]) == 0
    assert "Found a path! (3 steps" in capsys.readouterr().out


def test_budget_stop_exits_two(capsys):
    assert main([str(MAP_FILES["02_open_field"]), "--max-steps", "2"]) == 2
    assert "=== STOPPED ===" in capsys.readouterr().out
