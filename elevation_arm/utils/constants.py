"""
Shared constants for the elevation_arm package.

Holds the default arm geometry, the joint limit pair shared by every
joint, the proportional split used by the angle heuristic, and the
elevation range exposed to input widgets.  Every value here is a default
only; the configuration dataclasses accept overrides.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Geometry defaults (display units)
# ---------------------------------------------------------------------------
SEGMENT_LENGTH: float = 100.0
EFFECTOR_LENGTH: float = 170.0

# ---------------------------------------------------------------------------
# Joint limits (degrees), one pair shared by shoulder, elbow and wrist
# ---------------------------------------------------------------------------
MIN_ANGLE: float = -125.0
MAX_ANGLE: float = 125.0

# ---------------------------------------------------------------------------
# Angle heuristic
# ---------------------------------------------------------------------------
# 0 degrees elevation points straight up; the joints must sum to
# VERTICAL_DEG - elevation.
VERTICAL_DEG: float = 90.0
SHOULDER_RATIO: float = -0.4
ELBOW_RATIO: float = 0.8
ANGLE_DECIMALS: int = 1

# ---------------------------------------------------------------------------
# Elevation input range (integer steps, degrees)
# ---------------------------------------------------------------------------
MIN_ELEVATION: int = -90
MAX_ELEVATION: int = 90
DEFAULT_ELEVATION: int = 0
