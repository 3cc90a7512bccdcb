"""Tests for the solve pipeline and the achieved-elevation readout."""

import dataclasses
import json

import pytest

from elevation_arm import ArmSolution, ElevationArm, InvalidInputError, JointAngles
from elevation_arm.robots.configs import ArmConfig
from elevation_arm.robots.elevation_reporter import ElevationReporter
from elevation_arm.robots.forward_kinematics import ForwardKinematics


def test_solve_straight_ahead():
    sol = ElevationArm().solve(0)
    assert sol.angles == JointAngles(-36.0, 72.0, 54.0)
    assert sol.achieved_elevation == 0.0
    assert sol.reachable
    assert not sol.clamped


def test_solve_straight_up_points_on_vertical_axis():
    sol = ElevationArm().solve(90)
    assert sol.achieved_elevation == 90.0
    for point in (sol.pose.elbow, sol.pose.wrist, sol.pose.tip):
        assert point.x == pytest.approx(0.0, abs=1e-12)
        assert point.y < 0.0


def test_solve_straight_down_reports_divergence():
    sol = ElevationArm().solve(-90)
    assert sol.angles == JointAngles(-72.0, 125.0, 125.0)
    assert sol.achieved_elevation == pytest.approx(-88.0, abs=0.05)
    assert sol.clamped
    assert sol.elevation_error == pytest.approx(-2.0, abs=0.05)


def test_pose_matches_forward_kinematics_of_solved_angles():
    arm = ElevationArm()
    sol = arm.solve(37)
    assert sol.pose == ForwardKinematics().compute(sol.angles)


def test_solution_is_immutable():
    sol = ElevationArm().solve(10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        sol.achieved_elevation = 0.0


def test_each_solve_returns_a_fresh_solution():
    arm = ElevationArm()
    first = arm.solve(20)
    second = arm.solve(-20)
    assert first.angles != second.angles
    assert arm.solve(20) == first


def test_reporter_display_rounds():
    reporter = ElevationReporter()
    assert reporter.display(JointAngles(-72.0, 125.0, 125.0)) == -88.0
    assert reporter.display(JointAngles(0.04, 0.0, 0.0)) == 90.0


def test_to_dict_is_json_serialisable():
    payload = ElevationArm().solve(0).to_dict()
    decoded = json.loads(json.dumps(payload))
    assert decoded["angles"] == {"shoulder": -36.0, "elbow": 72.0, "wrist": 54.0}
    assert set(decoded["pose"]) == {"elbow", "wrist", "tip"}
    assert decoded["achieved_elevation"] == 0.0
    assert decoded["reachable"] is True
    assert decoded["clamped_joints"] == []


def test_custom_geometry_flows_through():
    cfg = ArmConfig.from_values(segment_length=10.0, effector_length=20.0)
    sol = ElevationArm(cfg).solve(90)
    assert sol.pose.tip.y == pytest.approx(-40.0)


def test_sweep_covers_the_range_inclusively():
    sols = ElevationArm().sweep(-90, 90)
    assert len(sols) == 181
    assert sols[0].target_elevation == -90.0
    assert sols[-1].target_elevation == 90.0
    assert all(isinstance(s, ArmSolution) for s in sols)


def test_sweep_descending_with_step():
    targets = [s.target_elevation for s in ElevationArm().sweep(90, 0, 30)]
    assert targets == [90.0, 60.0, 30.0, 0.0]


def test_sweep_rejects_zero_step():
    with pytest.raises(InvalidInputError):
        ElevationArm().sweep(0, 10, 0)


def test_nan_target_rejected_before_solving():
    with pytest.raises(InvalidInputError):
        ElevationArm().solve(float("nan"))


def test_wrist_compensation_still_reports_clamped_elbow():
    sol = ElevationArm().solve(-80)
    assert sol.angles == JointAngles(-68.0, 125.0, 113.0)
    assert sol.reachable
    assert sol.clamped
    assert sol.clamped_joints == ("elbow",)
    assert sol.to_dict()["clamped_joints"] == ["elbow"]


def test_unreachable_target_lists_every_clamped_joint():
    sol = ElevationArm().solve(-90)
    assert sol.clamped_joints == ("elbow", "wrist")
    assert sol.to_dict()["reachable"] is False
