"""
Achieved-elevation readout.

Classes:
    ElevationReporter: Derives the elevation produced by a set of joint angles.
"""

from __future__ import annotations

from dataclasses import dataclass

from elevation_arm.robots.types import JointAngles
from elevation_arm.utils.constants import ANGLE_DECIMALS, VERTICAL_DEG
from elevation_arm.utils.helpers import round_display


@dataclass(frozen=True)
class ElevationReporter:
    """Report the end-effector elevation the joint angles actually produce.

    When the solver had to clamp a joint this differs from the requested
    target, which is how an unreachable target shows up to the user.

    Attributes:
        decimals: Rounding used by ``display``.
    """

    decimals: int = ANGLE_DECIMALS

    @staticmethod
    def achieved_elevation(angles: JointAngles) -> float:
        """Return ``90 - (shoulder + elbow + wrist)`` in degrees."""
        return VERTICAL_DEG - angles.total

    def display(self, angles: JointAngles) -> float:
        """Return the achieved elevation rounded for display."""
        return round_display(self.achieved_elevation(angles), self.decimals)
