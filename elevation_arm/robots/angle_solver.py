"""
Joint-angle heuristic for pointing the end effector at an elevation.

This is not a general inverse-kinematics solve.  The total rotation the
chain must make is split with fixed ratios: the shoulder takes a negative
share, the elbow most of it, and the wrist takes whatever is left.  The
wrist is solved last, from the already clamped shoulder and elbow, so it
absorbs the residual whenever its own limit allows.

Classes:
    AngleSolver: Maps a target elevation to clamped, rounded joint angles.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from elevation_arm.robots.configs import ArmConfig
from elevation_arm.robots.types import JointAngles
from elevation_arm.utils.constants import VERTICAL_DEG
from elevation_arm.utils.helpers import ensure_finite, round_display


@dataclass(frozen=True)
class AngleSolver:
    """Stateless joint-angle solver.

    Attributes:
        config: Arm configuration providing limits and split ratios.
    """

    config: ArmConfig = field(default_factory=ArmConfig)

    @staticmethod
    def required_rotation(target_elevation: float) -> float:
        """Return the joint-angle sum that points the tip at *target_elevation*.

        Args:
            target_elevation: Degrees from vertical; 0 points straight up.

        Returns:
            ``90 - target_elevation``.
        """
        return VERTICAL_DEG - target_elevation

    def _split(self, total: float) -> Tuple[JointAngles, Tuple[str, ...]]:
        """Distribute *total* across the joints, clamping each in turn.

        Args:
            total: Required sum of the three joint angles.

        Returns:
            Tuple of (unrounded clamped joint angles, names of the joints
            whose proposed angle fell outside the limits).
        """
        constraint = self.config.constraint
        clamped: List[str] = []

        def saturate(name: str, proposed: float) -> float:
            if not constraint.contains(proposed):
                clamped.append(name)
            return constraint.clamp(proposed)

        shoulder = saturate("shoulder", self.config.shoulder_ratio * total)
        elbow = saturate("elbow", self.config.elbow_ratio * total)
        wrist = saturate("wrist", total - shoulder - elbow)
        return JointAngles(shoulder=shoulder, elbow=elbow, wrist=wrist), tuple(clamped)

    def _round(self, angles: JointAngles) -> JointAngles:
        """Round every angle to the configured number of decimals.

        Args:
            angles: Clamped joint angles.

        Returns:
            A new ``JointAngles`` with rounded values.
        """
        decimals = self.config.decimals
        return JointAngles(
            shoulder=round_display(angles.shoulder, decimals),
            elbow=round_display(angles.elbow, decimals),
            wrist=round_display(angles.wrist, decimals),
        )

    def is_reachable(self, target_elevation: float) -> bool:
        """Return True if the clamped angles still point at *target_elevation*.

        Args:
            target_elevation: Desired end-effector elevation in degrees.

        Returns:
            Whether the unrounded angles sum to the required rotation.
        """
        target = ensure_finite(target_elevation, "target_elevation")
        total = self.required_rotation(target)
        angles, _ = self._split(total)
        return math.isclose(angles.total, total, abs_tol=1e-9)

    def clamped_joints(self, target_elevation: float) -> Tuple[str, ...]:
        """Return the joints whose proposed angle had to be saturated.

        A clamped shoulder or elbow does not by itself make the target
        unreachable; the wrist may still make up the difference.

        Args:
            target_elevation: Desired end-effector elevation in degrees.

        Returns:
            Joint names in chain order, empty when nothing was clamped.
        """
        target = ensure_finite(target_elevation, "target_elevation")
        _, clamped = self._split(self.required_rotation(target))
        return clamped

    def solve(self, target_elevation: float) -> JointAngles:
        """Compute joint angles for *target_elevation*.

        Targets that cannot be reached within the joint limits are not an
        error; the clamped angles simply produce a different elevation.

        Args:
            target_elevation: Desired end-effector elevation in degrees.

        Returns:
            Clamped joint angles rounded for display.

        Raises:
            InvalidInputError: If *target_elevation* is NaN or infinite.
        """
        target = ensure_finite(target_elevation, "target_elevation")
        angles, _ = self._split(self.required_rotation(target))
        return self._round(angles)
