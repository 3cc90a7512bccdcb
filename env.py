"""
Hub-style entry point for loading the elevation environment.

Lets the project be loaded through a ``make_env`` hook::

    from env import make_env
    envs = make_env(n_envs=2)

Functions:
    make_env: Create vectorised simulation environments.
"""

from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym

from elevation_arm.envs.configs import ElevationSimConfig
from elevation_arm.envs.factory import make_sim_env


def make_env(
    n_envs: int = 1,
    use_async_envs: bool = False,
    cfg: Optional[ElevationSimConfig] = None,
) -> Dict[str, Dict[int, gym.vector.VectorEnv]]:
    """Create vectorised elevation environments.

    Args:
        n_envs: Number of parallel environments.
        use_async_envs: Use ``AsyncVectorEnv`` if True.
        cfg: Optional ``ElevationSimConfig``; defaults to the standard arm.

    Returns:
        ``{suite_name: {0: VectorEnv}}``.
    """
    resolved = cfg if cfg is not None else ElevationSimConfig()
    return make_sim_env(resolved, n_envs=n_envs, use_async_envs=use_async_envs)
