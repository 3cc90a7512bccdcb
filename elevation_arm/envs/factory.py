"""
Factory function for creating elevation simulation environments.

Callers can instantiate the environment by config or by name and receive
a Gymnasium ``VectorEnv`` wrapped in a ``{suite: {task_id: env}}`` mapping.

Functions:
    make_sim_env: Create one or more vectorised simulation environments.
"""

from __future__ import annotations

from typing import Dict

import gymnasium as gym

from elevation_arm.envs.configs import ElevationSimConfig


# ---------------------------------------------------------------------------
# Config look-up table (name -> default config constructor)
# ---------------------------------------------------------------------------
_ENV_REGISTRY: Dict[str, type] = {
    "elevation": ElevationSimConfig,
}


def _resolve_config(cfg: ElevationSimConfig | str) -> ElevationSimConfig:
    """Convert a string name to its default config, or pass through a config.

    Args:
        cfg: Either an ``ElevationSimConfig`` instance or ``'elevation'``.

    Returns:
        A concrete ``ElevationSimConfig`` instance.

    Raises:
        ValueError: If the string name is not in the registry.
    """
    if isinstance(cfg, ElevationSimConfig):
        return cfg
    if cfg not in _ENV_REGISTRY:
        raise ValueError(f"Unknown env '{cfg}'. Choose from {list(_ENV_REGISTRY)}")
    return _ENV_REGISTRY[cfg]()


def _validate_n_envs(n_envs: int) -> None:
    """Raise if *n_envs* is less than one.

    Raises:
        ValueError: When ``n_envs < 1``.
    """
    if n_envs < 1:
        raise ValueError("`n_envs` must be at least 1")


def _build_vector_env(
    cfg: ElevationSimConfig, n_envs: int, use_async: bool
) -> gym.vector.VectorEnv:
    """Construct a Gymnasium vector environment.

    Args:
        cfg: Environment configuration forwarded to each constructor.
        n_envs: Number of parallel copies.
        use_async: If *True*, use ``AsyncVectorEnv``; otherwise ``SyncVectorEnv``.

    Returns:
        A ``VectorEnv`` wrapping *n_envs* instances.
    """
    from elevation_arm.envs.elevation_env import ElevationSimEnv

    wrapper_cls = gym.vector.AsyncVectorEnv if use_async else gym.vector.SyncVectorEnv
    fns = [lambda c=cfg: ElevationSimEnv(c) for _ in range(n_envs)]
    return wrapper_cls(fns)


def make_sim_env(
    cfg: ElevationSimConfig | str = "elevation",
    n_envs: int = 1,
    use_async_envs: bool = False,
) -> Dict[str, Dict[int, gym.vector.VectorEnv]]:
    """Create vectorised elevation environments.

    Args:
        cfg: Either an ``ElevationSimConfig`` instance or a registered name.
        n_envs: Number of parallel environments (default 1).
        use_async_envs: Whether to use ``AsyncVectorEnv`` (default *False*).

    Returns:
        ``{suite_name: {0: VectorEnv}}`` mapping.
    """
    resolved_cfg = _resolve_config(cfg)
    _validate_n_envs(n_envs)
    vec = _build_vector_env(resolved_cfg, n_envs, use_async_envs)
    return {resolved_cfg.env_type: {0: vec}}
