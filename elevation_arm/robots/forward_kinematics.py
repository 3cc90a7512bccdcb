"""
Forward kinematics for the three-link planar chain.

Each link direction is the cumulative sum of all joint angles up to and
including its own joint.  Angles are measured from vertical, so a link of
length ``L`` at cumulative angle ``c`` contributes ``(L sin c, -L cos c)``:
"up" is negative y, matching screen coordinates.

Classes:
    ForwardKinematics: Maps joint angles to elbow, wrist and tip points.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from elevation_arm.robots.configs import SegmentGeometry
from elevation_arm.robots.types import JointAngles, Point2D, Pose


@dataclass(frozen=True)
class ForwardKinematics:
    """Stateless forward-kinematics routine.

    Attributes:
        geometry: Link lengths of the arm.
    """

    geometry: SegmentGeometry = field(default_factory=SegmentGeometry)

    # ------------------------------------------------------------------
    # Chain helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _accumulate_angles(angles: JointAngles) -> np.ndarray:
        """Compute cumulative joint angles in radians.

        Args:
            angles: Joint angles in degrees.

        Returns:
            ``(3,)`` array of cumulative link directions.
        """
        return np.cumsum(np.radians(angles.as_array()))

    def _link_offsets(self, cum_angles: np.ndarray) -> np.ndarray:
        """Return each link's (dx, dy) displacement.

        Args:
            cum_angles: Cumulative link directions in radians.

        Returns:
            ``(3, 2)`` array of link displacements.
        """
        lengths = np.array(self.geometry.link_lengths, dtype=np.float64)
        dx = lengths * np.sin(cum_angles)
        dy = -lengths * np.cos(cum_angles)
        return np.stack([dx, dy], axis=1)

    def joint_positions(self, angles: JointAngles) -> np.ndarray:
        """Compute elbow, wrist and tip coordinates as an array.

        Args:
            angles: Joint angles in degrees.

        Returns:
            ``(3, 2)`` array with rows elbow, wrist, tip.
        """
        offsets = self._link_offsets(self._accumulate_angles(angles))
        return np.cumsum(offsets, axis=0)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute(self, angles: JointAngles) -> Pose:
        """Compute the pose for *angles*.

        Args:
            angles: Joint angles in degrees.

        Returns:
            A new ``Pose``; the base is at the origin.
        """
        elbow, wrist, tip = (
            Point2D(x=float(x), y=float(y)) for x, y in self.joint_positions(angles)
        )
        return Pose(elbow=elbow, wrist=wrist, tip=tip)
