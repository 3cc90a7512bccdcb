"""
Elevation Arm Simulation.

A small geometric kernel for a 3-segment planar arm (shoulder, elbow,
wrist, plus a fixed-length end effector) that is pointed at a target
elevation.  A fixed proportional heuristic distributes the required
rotation across the three joints, forward kinematics turns the joint
angles into 2-D points, and the achieved elevation is reported back so a
renderer can show when a target was out of reach.

Modules:
    robots: Joint-angle solver, forward kinematics, elevation reporter.
    envs: Gymnasium-compatible environment around the elevation input.
    utils: Shared constants, errors, and helper utilities.
"""

from elevation_arm.robots.angle_solver import AngleSolver
from elevation_arm.robots.configs import AngleConstraint, ArmConfig, SegmentGeometry
from elevation_arm.robots.elevation_arm import ArmSolution, ElevationArm
from elevation_arm.robots.elevation_reporter import ElevationReporter
from elevation_arm.robots.forward_kinematics import ForwardKinematics
from elevation_arm.robots.types import JointAngles, Point2D, Pose
from elevation_arm.utils.errors import (
    ArmConfigError,
    ElevationArmError,
    InvalidInputError,
)

__version__ = "0.1.0"

__all__ = [
    "AngleConstraint",
    "AngleSolver",
    "ArmConfig",
    "ArmConfigError",
    "ArmSolution",
    "ElevationArm",
    "ElevationArmError",
    "ElevationReporter",
    "ForwardKinematics",
    "InvalidInputError",
    "JointAngles",
    "Point2D",
    "Pose",
    "SegmentGeometry",
]
