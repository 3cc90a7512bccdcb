"""
Gymnasium environment around the elevation input.

Each action is one integer target elevation, as emitted by a slider.  The
environment solves it and returns the joint angles, the pose and the
achieved elevation.  Rewards penalise the gap between target and achieved
elevation, which is non-zero only when a joint limit was hit.

Classes:
    ElevationSimEnv: Gymnasium environment for the elevation arm.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from elevation_arm.envs.configs import ElevationSimConfig
from elevation_arm.robots.elevation_arm import ArmSolution, ElevationArm
from elevation_arm.utils.constants import VERTICAL_DEG
from elevation_arm.utils.errors import InvalidInputError


class ElevationSimEnv(gym.Env):
    """Gymnasium environment for the planar elevation arm.

    The environment holds only the latest ``ArmSolution``; each step
    replaces it wholesale.

    Attributes:
        metadata: Gymnasium metadata; the environment does not render.
        cfg: ``ElevationSimConfig`` controlling the range and the arm.
    """

    metadata: Dict[str, Any] = {"render_modes": []}

    def __init__(self, cfg: ElevationSimConfig | None = None) -> None:
        """Initialise the environment.

        Args:
            cfg: Optional configuration; a default ``ElevationSimConfig`` is
                used when *None*.
        """
        super().__init__()
        self.cfg = cfg or ElevationSimConfig()
        self.arm = ElevationArm(self.cfg.arm)
        self._step_count = 0
        self._solution: ArmSolution = self.arm.solve(self.cfg.initial_elevation)
        self._init_spaces()

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_spaces(self) -> None:
        """Define action and observation Gymnasium spaces."""
        self.action_space = spaces.Discrete(
            self.cfg.num_targets, start=self.cfg.min_elevation
        )
        constraint = self.cfg.arm.constraint
        reach = self.cfg.arm.geometry.reach
        self.observation_space = spaces.Dict(
            {
                "joint_angles": spaces.Box(
                    low=constraint.min_angle,
                    high=constraint.max_angle,
                    shape=(3,),
                    dtype=np.float64,
                ),
                "pose": spaces.Box(low=-reach, high=reach, shape=(3, 2), dtype=np.float64),
                "achieved_elevation": spaces.Box(
                    low=VERTICAL_DEG - 3 * constraint.max_angle,
                    high=VERTICAL_DEG - 3 * constraint.min_angle,
                    shape=(1,),
                    dtype=np.float64,
                ),
            }
        )

    # ------------------------------------------------------------------
    # Observation / reward helpers
    # ------------------------------------------------------------------

    def _build_observation(self) -> Dict[str, np.ndarray]:
        """Convert the current solution into the observation dict.

        Returns:
            Dictionary with ``joint_angles``, ``pose`` and
            ``achieved_elevation`` arrays.
        """
        sol = self._solution
        return {
            "joint_angles": sol.angles.as_array(),
            "pose": sol.pose.as_array(),
            "achieved_elevation": np.array([sol.achieved_elevation], dtype=np.float64),
        }

    def _build_info(self) -> Dict[str, Any]:
        """Return target, achieved elevation and the success flag."""
        sol = self._solution
        return {
            "target_elevation": sol.target_elevation,
            "achieved_elevation": sol.achieved_elevation,
            "is_success": sol.reachable,
        }

    def _validate_action(self, action: Any) -> int:
        """Check that *action* is a whole-degree target inside the range.

        Args:
            action: Scalar action as passed to ``step``.

        Returns:
            The target elevation as an ``int``.

        Raises:
            InvalidInputError: If *action* is not a scalar number, has a
                fractional part, or lies outside the action space.
        """
        arr = np.asarray(action)
        if arr.shape != () or arr.dtype.kind not in "biuf":
            raise InvalidInputError(f"Action {action!r} is not a scalar number")
        value = float(arr)
        if not value.is_integer():
            raise InvalidInputError(f"Action {action!r} is not a whole degree")
        if not self.action_space.contains(np.int64(value)):
            raise InvalidInputError(
                f"Action {action!r} outside [{self.cfg.min_elevation}, "
                f"{self.cfg.max_elevation}]"
            )
        return int(value)

    def _compute_reward(self) -> float:
        """Return the negative absolute elevation error."""
        return -abs(self._solution.elevation_error)

    # ------------------------------------------------------------------
    # Gymnasium API
    # ------------------------------------------------------------------

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """Reset the arm to the initial elevation.

        Args:
            seed: Optional seed for Gymnasium's ``np_random``.
            options: Optional dict; ``options["elevation"]`` overrides the
                initial target.

        Returns:
            Tuple of (observation dict, info dict).
        """
        super().reset(seed=seed)
        self._step_count = 0
        target = self.cfg.initial_elevation
        if options and "elevation" in options:
            target = options["elevation"]
        self._solution = self.arm.solve(target)
        return self._build_observation(), self._build_info()

    def step(
        self, action: Any
    ) -> Tuple[Dict[str, np.ndarray], float, bool, bool, Dict[str, Any]]:
        """Solve the target elevation given by *action*.

        Args:
            action: Integer target elevation within the action space.

        Returns:
            Tuple of (obs, reward, terminated, truncated, info).

        Raises:
            InvalidInputError: If *action* is not an integer in the action space.
        """
        target = self._validate_action(action)
        self._step_count += 1
        self._solution = self.arm.solve(target)
        truncated = self._step_count >= self.cfg.episode_length
        return (
            self._build_observation(),
            self._compute_reward(),
            False,
            truncated,
            self._build_info(),
        )

    @property
    def solution(self) -> ArmSolution:
        """The most recent solution."""
        return self._solution
