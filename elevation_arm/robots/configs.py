"""
Dataclass configurations for the elevation arm.

All values are validated once, when the dataclass is constructed, so the
solver and forward kinematics never have to re-check them per call.

Classes:
    AngleConstraint: The joint limit pair shared by all three joints.
    SegmentGeometry: Link lengths of the arm.
    ArmConfig: Complete arm configuration (limits, geometry, heuristic).
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Tuple

from elevation_arm.utils.constants import (
    ANGLE_DECIMALS,
    EFFECTOR_LENGTH,
    ELBOW_RATIO,
    MAX_ANGLE,
    MIN_ANGLE,
    SEGMENT_LENGTH,
    SHOULDER_RATIO,
)
from elevation_arm.utils.errors import ArmConfigError
from elevation_arm.utils.helpers import clamp


def _require_finite(value: float, name: str) -> None:
    """Raise ``ArmConfigError`` if *value* is not a finite real number.

    Args:
        value: The configured number.
        name: Field name for the error message.

    Raises:
        ArmConfigError: When *value* is not a number or not finite.
    """
    if not isinstance(value, numbers.Real):
        raise ArmConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ArmConfigError(f"{name} must be finite, got {value}")


@dataclass(frozen=True)
class AngleConstraint:
    """Closed joint-angle range in degrees, identical for every joint.

    Attributes:
        min_angle: Lower limit (inclusive).
        max_angle: Upper limit (inclusive).
    """

    min_angle: float = MIN_ANGLE
    max_angle: float = MAX_ANGLE

    def __post_init__(self) -> None:
        """Validate that the pair is finite and ordered."""
        _require_finite(self.min_angle, "min_angle")
        _require_finite(self.max_angle, "max_angle")
        if self.min_angle >= self.max_angle:
            raise ArmConfigError(
                f"min_angle ({self.min_angle}) must be below max_angle ({self.max_angle})"
            )

    def clamp(self, angle: float) -> float:
        """Saturate *angle* to [min_angle, max_angle]."""
        return clamp(angle, self.min_angle, self.max_angle)

    def contains(self, angle: float) -> bool:
        """Return True if *angle* lies within [min_angle, max_angle]."""
        return self.min_angle <= angle <= self.max_angle


@dataclass(frozen=True)
class SegmentGeometry:
    """Link lengths of the arm.

    The shoulder and elbow links share ``segment_length``; the terminal
    end-effector link has its own ``effector_length``.

    Attributes:
        segment_length: Length of the shoulder and elbow links.
        effector_length: Length of the end effector.
    """

    segment_length: float = SEGMENT_LENGTH
    effector_length: float = EFFECTOR_LENGTH

    def __post_init__(self) -> None:
        """Reject non-finite or non-positive lengths."""
        for name in ("segment_length", "effector_length"):
            value = getattr(self, name)
            _require_finite(value, name)
            if value <= 0.0:
                raise ArmConfigError(f"{name} must be positive, got {value}")

    @property
    def link_lengths(self) -> Tuple[float, float, float]:
        """Lengths of the three links in chain order."""
        return (self.segment_length, self.segment_length, self.effector_length)

    @property
    def reach(self) -> float:
        """Distance from the base to the tip with the arm fully extended."""
        return sum(self.link_lengths)


@dataclass(frozen=True)
class ArmConfig:
    """Complete configuration of the elevation arm.

    Attributes:
        constraint: Joint limit pair shared by all joints.
        geometry: Link lengths.
        shoulder_ratio: Share of the required rotation given to the shoulder.
        elbow_ratio: Share of the required rotation given to the elbow.
        decimals: Rounding applied to solved joint angles.
    """

    constraint: AngleConstraint = field(default_factory=AngleConstraint)
    geometry: SegmentGeometry = field(default_factory=SegmentGeometry)
    shoulder_ratio: float = SHOULDER_RATIO
    elbow_ratio: float = ELBOW_RATIO
    decimals: int = ANGLE_DECIMALS

    def __post_init__(self) -> None:
        """Check the heuristic parameters."""
        _require_finite(self.shoulder_ratio, "shoulder_ratio")
        _require_finite(self.elbow_ratio, "elbow_ratio")
        if self.decimals < 0:
            raise ArmConfigError(f"decimals must be non-negative, got {self.decimals}")

    @classmethod
    def from_values(
        cls,
        segment_length: float = SEGMENT_LENGTH,
        effector_length: float = EFFECTOR_LENGTH,
        min_angle: float = MIN_ANGLE,
        max_angle: float = MAX_ANGLE,
    ) -> "ArmConfig":
        """Build a config from flat values, as supplied by the command line.

        Args:
            segment_length: Length of the shoulder and elbow links.
            effector_length: Length of the end effector.
            min_angle: Lower joint limit in degrees.
            max_angle: Upper joint limit in degrees.

        Returns:
            A validated ``ArmConfig``.

        Raises:
            ArmConfigError: If any value is invalid.
        """
        return cls(
            constraint=AngleConstraint(min_angle=min_angle, max_angle=max_angle),
            geometry=SegmentGeometry(
                segment_length=segment_length, effector_length=effector_length
            ),
        )
