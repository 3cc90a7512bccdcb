"""
End-to-end pipeline for the planar elevation arm.

Composes the angle solver, forward kinematics and elevation reporter into
a single call.  Every call returns a new frozen ``ArmSolution`` so a
consumer always sees one consistent set of angles, points and readout.

Classes:
    ArmSolution: Angles, pose and achieved elevation for one target.
    ElevationArm: Solves target elevations into ``ArmSolution`` values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import numpy as np

from elevation_arm.robots.angle_solver import AngleSolver
from elevation_arm.robots.configs import ArmConfig
from elevation_arm.robots.elevation_reporter import ElevationReporter
from elevation_arm.robots.forward_kinematics import ForwardKinematics
from elevation_arm.robots.types import JointAngles, Pose
from elevation_arm.utils.errors import InvalidInputError
from elevation_arm.utils.helpers import ensure_finite


@dataclass(frozen=True)
class ArmSolution:
    """Result of solving one target elevation.

    Attributes:
        target_elevation: The requested elevation in degrees.
        angles: Clamped, rounded joint angles.
        pose: Elbow, wrist and tip positions for ``angles``.
        achieved_elevation: Elevation produced by ``angles``, rounded.
        reachable: False when a joint limit kept the arm off the target.
        clamped_joints: Joints whose proposed angle was saturated, in chain
            order.
    """

    target_elevation: float
    angles: JointAngles
    pose: Pose
    achieved_elevation: float
    reachable: bool = True
    clamped_joints: Tuple[str, ...] = ()

    @property
    def elevation_error(self) -> float:
        """Signed difference between the target and achieved elevation."""
        return self.target_elevation - self.achieved_elevation

    @property
    def clamped(self) -> bool:
        """True when at least one joint angle was saturated at a limit."""
        return bool(self.clamped_joints)

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload handed to a renderer."""
        return {
            "target_elevation": self.target_elevation,
            "angles": self.angles.to_dict(),
            "pose": self.pose.to_dict(),
            "achieved_elevation": self.achieved_elevation,
            "reachable": self.reachable,
            "clamped_joints": list(self.clamped_joints),
        }


@dataclass(frozen=True)
class ElevationArm:
    """Pure solve pipeline: target elevation -> angles -> pose and readout.

    Attributes:
        config: Arm configuration shared by every stage.
    """

    config: ArmConfig = field(default_factory=ArmConfig)

    @property
    def solver(self) -> AngleSolver:
        """Angle solver bound to ``config``."""
        return AngleSolver(self.config)

    @property
    def kinematics(self) -> ForwardKinematics:
        """Forward kinematics for ``config.geometry``."""
        return ForwardKinematics(self.config.geometry)

    @property
    def reporter(self) -> ElevationReporter:
        """Elevation reporter using ``config.decimals``."""
        return ElevationReporter(self.config.decimals)

    def solve(self, target_elevation: float) -> ArmSolution:
        """Solve *target_elevation* into angles, pose and achieved elevation.

        Args:
            target_elevation: Desired elevation in degrees (0 is straight up).

        Returns:
            A new ``ArmSolution``.

        Raises:
            InvalidInputError: If *target_elevation* is NaN or infinite.
        """
        target = ensure_finite(target_elevation, "target_elevation")
        angles = self.solver.solve(target)
        return ArmSolution(
            target_elevation=target,
            angles=angles,
            pose=self.kinematics.compute(angles),
            achieved_elevation=self.reporter.display(angles),
            reachable=self.solver.is_reachable(target),
            clamped_joints=self.solver.clamped_joints(target),
        )

    def sweep(self, start: float, stop: float, step: float = 1.0) -> List[ArmSolution]:
        """Solve every target from *start* to *stop* inclusive.

        Args:
            start: First target elevation.
            stop: Last target elevation (included when on the grid).
            step: Increment between targets; its sign is taken from the
                direction of travel.

        Returns:
            Solutions in sweep order.

        Raises:
            InvalidInputError: If any bound is not finite or *step* is zero.
        """
        start = ensure_finite(start, "start")
        stop = ensure_finite(stop, "stop")
        step = abs(ensure_finite(step, "step"))
        if step == 0.0:
            raise InvalidInputError("step must be non-zero")
        count = int(np.floor(abs(stop - start) / step + 1e-9)) + 1
        targets = np.linspace(start, start + np.sign(stop - start) * step * (count - 1), count)
        return [self.solve(float(t)) for t in targets]
