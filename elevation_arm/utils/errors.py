"""
Exception types raised by the elevation_arm package.

Every error derives from ``ValueError`` so callers that only guard
against bad values keep working.

Classes:
    ElevationArmError: Base class for package errors.
    InvalidInputError: A target elevation that is NaN or infinite.
    ArmConfigError: An invalid geometry, joint-limit, or range setting.
"""

from __future__ import annotations


class ElevationArmError(ValueError):
    """Base class for all elevation_arm errors."""


class InvalidInputError(ElevationArmError):
    """Raised when a target elevation is not a finite number."""


class ArmConfigError(ElevationArmError):
    """Raised when a configuration dataclass is constructed with bad values."""
