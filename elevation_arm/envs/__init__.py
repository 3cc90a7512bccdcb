"""
Gymnasium-compatible environment for the elevation arm.

The action is an integer target elevation; observations carry the solved
joint angles, the pose, and the achieved elevation.
"""

from elevation_arm.envs.configs import ElevationSimConfig
from elevation_arm.envs.elevation_env import ElevationSimEnv
from elevation_arm.envs.factory import make_sim_env

__all__ = [
    "ElevationSimConfig",
    "ElevationSimEnv",
    "make_sim_env",
]
