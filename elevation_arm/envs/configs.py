"""
Dataclass configuration for the elevation simulation environment.

Classes:
    ElevationSimConfig: Input range, episode settings and arm configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from elevation_arm.robots.configs import ArmConfig
from elevation_arm.utils.constants import (
    DEFAULT_ELEVATION,
    MAX_ELEVATION,
    MIN_ELEVATION,
)
from elevation_arm.utils.errors import ArmConfigError


@dataclass(frozen=True)
class ElevationSimConfig:
    """Configuration for ``ElevationSimEnv``.

    The elevation input is a slider with integer steps, so the range bounds
    and the initial value are integers.

    Attributes:
        task: Environment identifier.
        min_elevation: Lowest selectable target elevation (degrees).
        max_elevation: Highest selectable target elevation (degrees).
        initial_elevation: Target solved on ``reset``.
        episode_length: Steps before the episode is truncated.
        arm: Arm geometry, limits and heuristic settings.
    """

    task: str = "Elevation-Sim-v0"
    min_elevation: int = MIN_ELEVATION
    max_elevation: int = MAX_ELEVATION
    initial_elevation: int = DEFAULT_ELEVATION
    episode_length: int = 200
    arm: ArmConfig = field(default_factory=ArmConfig)

    def __post_init__(self) -> None:
        """Validate the elevation range and episode settings."""
        if self.min_elevation >= self.max_elevation:
            raise ArmConfigError(
                f"min_elevation ({self.min_elevation}) must be below "
                f"max_elevation ({self.max_elevation})"
            )
        if not self.min_elevation <= self.initial_elevation <= self.max_elevation:
            raise ArmConfigError(
                f"initial_elevation {self.initial_elevation} outside "
                f"[{self.min_elevation}, {self.max_elevation}]"
            )
        if self.episode_length < 1:
            raise ArmConfigError("episode_length must be at least 1")

    @property
    def env_type(self) -> str:
        """Return the ``task`` field value."""
        return self.task

    @property
    def num_targets(self) -> int:
        """Number of selectable integer elevations."""
        return self.max_elevation - self.min_elevation + 1
