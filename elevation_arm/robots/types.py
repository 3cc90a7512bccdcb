"""
Immutable value types passed between the solver, the forward kinematics
and the renderer.

Classes:
    JointAngles: Shoulder, elbow and wrist angles in degrees.
    Point2D: A point in the arm plane (base at origin, up is negative y).
    Pose: Elbow, wrist and tip positions for one set of joint angles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np


@dataclass(frozen=True)
class JointAngles:
    """Joint angles in degrees, each relative to the preceding segment.

    Attributes:
        shoulder: Rotation of the first link from vertical.
        elbow: Rotation of the second link relative to the first.
        wrist: Rotation of the end effector relative to the second link.
    """

    shoulder: float
    elbow: float
    wrist: float

    @property
    def total(self) -> float:
        """Sum of the three joint angles."""
        return self.shoulder + self.elbow + self.wrist

    def as_array(self) -> np.ndarray:
        """Return the angles as a ``(3,)`` float64 array in chain order."""
        return np.array([self.shoulder, self.elbow, self.wrist], dtype=np.float64)

    def to_dict(self) -> Dict[str, float]:
        """Return the angles keyed by joint name."""
        return {"shoulder": self.shoulder, "elbow": self.elbow, "wrist": self.wrist}


@dataclass(frozen=True)
class Point2D:
    """A point in the arm plane.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate; negative values are above the base.
    """

    x: float
    y: float

    def to_dict(self) -> Dict[str, float]:
        """Return ``{"x": x, "y": y}``."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Pose:
    """Positions of the elbow, wrist and end-effector tip.

    Attributes:
        elbow: End of the shoulder link.
        wrist: End of the elbow link.
        tip: End of the end effector.
    """

    elbow: Point2D
    wrist: Point2D
    tip: Point2D

    def as_array(self) -> np.ndarray:
        """Return a ``(3, 2)`` float64 array of (x, y) rows: elbow, wrist, tip."""
        return np.array(
            [[p.x, p.y] for p in (self.elbow, self.wrist, self.tip)], dtype=np.float64
        )

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Return each point as a dict, keyed elbow, wrist, tip."""
        return {
            "elbow": self.elbow.to_dict(),
            "wrist": self.wrist.to_dict(),
            "tip": self.tip.to_dict(),
        }
