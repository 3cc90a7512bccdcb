"""Tests for the command-line runner."""

import json

import pytest

import run_arm


def test_solve_prints_readable_line(capsys):
    run_arm.main(["--mode", "solve", "--elevation", "0"])
    out = capsys.readouterr().out
    assert "shoulder  -36.0°" in out
    assert "achieved    0.0°" in out
    assert "clamped" not in out


def test_solve_json_payload(capsys):
    run_arm.main(["--elevation", "-90", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["angles"] == {"shoulder": -72.0, "elbow": 125.0, "wrist": 125.0}
    assert payload["achieved_elevation"] == -88.0
    assert payload["reachable"] is False
    assert payload["clamped_joints"] == ["elbow", "wrist"]


def test_sweep_json_lists_every_target(capsys):
    run_arm.main(["--mode", "sweep", "--start", "0", "--stop", "10", "--step", "5", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert [p["target_elevation"] for p in payload] == [0.0, 5.0, 10.0]


def test_rollout_summary(capsys):
    run_arm.main(["--mode", "rollout", "--json"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["targets"] == 181
    # -90 and -89 are the only targets the wrist cannot make up for.
    assert summary["reached"] == 179


def test_custom_limits_mark_clamping(capsys):
    run_arm.main(["--elevation", "0", "--min-angle", "-60", "--max-angle", "60"])
    out = capsys.readouterr().out
    assert "(clamped: elbow, wrist)" in out
    assert "(unreachable)" in out


def test_bad_config_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_arm.main(["--min-angle", "10", "--max-angle", "10"])
    assert excinfo.value.code == 2
    assert "min_angle" in capsys.readouterr().err


def test_nan_elevation_exits_with_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        run_arm.main(["--elevation", "nan"])
    assert excinfo.value.code == 2
