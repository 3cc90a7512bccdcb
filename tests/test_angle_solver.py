"""Tests for the proportional joint-angle heuristic."""

import math

import pytest

from elevation_arm.robots.angle_solver import AngleSolver
from elevation_arm.robots.configs import ArmConfig
from elevation_arm.robots.elevation_reporter import ElevationReporter
from elevation_arm.robots.types import JointAngles
from elevation_arm.utils.errors import InvalidInputError

TOL = 0.05


def test_straight_ahead():
    angles = AngleSolver().solve(0)
    assert angles == JointAngles(shoulder=-36.0, elbow=72.0, wrist=54.0)
    assert ElevationReporter.achieved_elevation(angles) == pytest.approx(0.0, abs=TOL)


def test_straight_up_is_all_zero():
    angles = AngleSolver().solve(90)
    assert angles == JointAngles(0.0, 0.0, 0.0)
    assert math.copysign(1.0, angles.shoulder) == 1.0
    assert ElevationReporter.achieved_elevation(angles) == pytest.approx(90.0)


def test_straight_down_clamps_elbow_and_wrist():
    angles = AngleSolver().solve(-90)
    assert angles == JointAngles(shoulder=-72.0, elbow=125.0, wrist=125.0)
    achieved = ElevationReporter.achieved_elevation(angles)
    assert achieved == pytest.approx(-88.0, abs=TOL)
    assert achieved != pytest.approx(-90.0, abs=TOL)


@pytest.mark.parametrize("target", range(-66, 91))
def test_unclamped_targets_hit_the_required_sum(target):
    solver = AngleSolver()
    angles = solver.solve(target)
    assert solver.is_reachable(target)
    assert angles.total == pytest.approx(90 - target, abs=TOL)
    assert ElevationReporter.achieved_elevation(angles) == pytest.approx(target, abs=TOL)


@pytest.mark.parametrize("target", [-90, -67, 180, -1000.5, 1e9])
def test_angles_always_within_limits(target):
    constraint = ArmConfig().constraint
    angles = AngleSolver().solve(target)
    for value in (angles.shoulder, angles.elbow, angles.wrist):
        assert constraint.contains(value)


def test_unreachable_target_is_reported():
    solver = AngleSolver()
    assert not solver.is_reachable(-90)
    assert not solver.is_reachable(-89)


def test_wrist_compensates_for_clamped_elbow():
    solver = AngleSolver()
    angles = solver.solve(-80)
    assert angles.elbow == 125.0
    assert solver.is_reachable(-80)
    assert angles.total == pytest.approx(170.0, abs=TOL)


def test_wrist_absorbs_residual_after_shoulder_and_elbow():
    # Tight limits clamp the elbow; the wrist makes up the difference.
    cfg = ArmConfig.from_values(min_angle=-60.0, max_angle=60.0)
    angles = AngleSolver(cfg).solve(0)
    assert angles == JointAngles(shoulder=-36.0, elbow=60.0, wrist=60.0)
    assert angles.total == pytest.approx(84.0)


def test_angles_rounded_to_one_decimal():
    angles = AngleSolver().solve(10.04)
    assert angles == JointAngles(shoulder=-32.0, elbow=64.0, wrist=48.0)


def test_custom_ratios():
    cfg = ArmConfig(shoulder_ratio=0.0, elbow_ratio=0.5)
    angles = AngleSolver(cfg).solve(30)
    assert angles == JointAngles(shoulder=0.0, elbow=30.0, wrist=30.0)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_target_rejected(bad):
    with pytest.raises(InvalidInputError):
        AngleSolver().solve(bad)


def test_clamped_joints_named_in_chain_order():
    solver = AngleSolver()
    assert solver.clamped_joints(0) == ()
    assert solver.clamped_joints(-80) == ("elbow",)
    assert solver.clamped_joints(-90) == ("elbow", "wrist")
