#!/usr/bin/env python3
"""
Command-line entry point for the elevation arm.

Solves target elevations and prints the joint angles, the pose and the
achieved elevation, either as a readable table or as the JSON payload a
renderer consumes.  Run directly with ``python run_arm.py`` or through the
``elevation-arm`` console script.

Usage examples::

    # One target, readable output
    python run_arm.py --mode solve --elevation 30

    # The whole slider range as JSON
    python run_arm.py --mode sweep --start -90 --stop 90 --json

    # Step the Gymnasium environment through every target
    python run_arm.py --mode rollout --min-angle -100 --max-angle 100
"""

from __future__ import annotations

import argparse
import json
from typing import List, Optional, Sequence

from elevation_arm.envs.configs import ElevationSimConfig
from elevation_arm.envs.elevation_env import ElevationSimEnv
from elevation_arm.robots.configs import ArmConfig
from elevation_arm.robots.elevation_arm import ArmSolution, ElevationArm
from elevation_arm.utils.constants import (
    DEFAULT_ELEVATION,
    EFFECTOR_LENGTH,
    MAX_ANGLE,
    MAX_ELEVATION,
    MIN_ANGLE,
    MIN_ELEVATION,
    SEGMENT_LENGTH,
)
from elevation_arm.utils.errors import ElevationArmError

# ======================================================================
# Formatting
# ======================================================================


def _format_solution(sol: ArmSolution) -> str:
    """Render one solution as a single readable line.

    Args:
        sol: The solution to format.

    Returns:
        A fixed-width line with angles, tip position and achieved elevation.
    """
    a, tip = sol.angles, sol.pose.tip
    line = (
        f"target {sol.target_elevation:>6.1f}° | "
        f"shoulder {a.shoulder:>6.1f}° elbow {a.elbow:>6.1f}° wrist {a.wrist:>6.1f}° | "
        f"tip ({tip.x:>7.1f}, {tip.y:>7.1f}) | "
        f"achieved {sol.achieved_elevation:>6.1f}°"
    )
    if sol.clamped:
        line += f" (clamped: {', '.join(sol.clamped_joints)})"
    if not sol.reachable:
        line += " (unreachable)"
    return line


def _print_solutions(solutions: List[ArmSolution], as_json: bool) -> None:
    """Print *solutions* either as JSON or one line each.

    Args:
        solutions: Solutions to print.
        as_json: Emit the renderer payload as JSON instead of text.
    """
    if as_json:
        payload = [sol.to_dict() for sol in solutions]
        print(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
        return
    for sol in solutions:
        print(_format_solution(sol))


# ======================================================================
# Configuration builders
# ======================================================================


def _build_arm_config(args: argparse.Namespace) -> ArmConfig:
    """Construct an ``ArmConfig`` from parsed CLI arguments.

    Args:
        args: Namespace from ``argparse``.

    Returns:
        A validated ``ArmConfig``.
    """
    return ArmConfig.from_values(
        segment_length=args.segment_length,
        effector_length=args.effector_length,
        min_angle=args.min_angle,
        max_angle=args.max_angle,
    )


# ======================================================================
# Mode runners
# ======================================================================


def _run_solve(arm_cfg: ArmConfig, args: argparse.Namespace) -> None:
    """Solve and print a single target elevation."""
    _print_solutions([ElevationArm(arm_cfg).solve(args.elevation)], args.json)


def _run_sweep(arm_cfg: ArmConfig, args: argparse.Namespace) -> None:
    """Solve and print every target between ``--start`` and ``--stop``."""
    solutions = ElevationArm(arm_cfg).sweep(args.start, args.stop, args.step)
    _print_solutions(solutions, args.json)


def _run_rollout(arm_cfg: ArmConfig, args: argparse.Namespace) -> None:
    """Step the Gymnasium environment through the whole elevation range.

    Args:
        arm_cfg: Arm configuration.
        args: Parsed CLI arguments.
    """
    env_cfg = ElevationSimConfig(
        min_elevation=MIN_ELEVATION,
        max_elevation=MAX_ELEVATION,
        episode_length=MAX_ELEVATION - MIN_ELEVATION + 1,
        arm=arm_cfg,
    )
    env = ElevationSimEnv(env_cfg)
    env.reset()
    total_reward = 0.0
    reached = 0
    for target in range(env_cfg.min_elevation, env_cfg.max_elevation + 1):
        _, reward, _, truncated, info = env.step(target)
        total_reward += reward
        reached += int(info["is_success"])
        if not args.json:
            print(f"step {target:>4d} | reward {reward:>7.2f} | {_format_solution(env.solution)}")
        if truncated:
            break
    summary = {
        "targets": env_cfg.num_targets,
        "reached": reached,
        "total_reward": round(total_reward, 1),
    }
    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print("-" * 60)
        print(f"Reached {reached}/{env_cfg.num_targets} targets, total reward {total_reward:.1f}")


# ======================================================================
# CLI
# ======================================================================


def _build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ``argparse.ArgumentParser``.
    """
    parser = argparse.ArgumentParser(description="Planar elevation arm solver")
    parser.add_argument("--mode", choices=["solve", "sweep", "rollout"], default="solve")
    parser.add_argument("--elevation", type=float, default=float(DEFAULT_ELEVATION))
    parser.add_argument("--start", type=float, default=float(MIN_ELEVATION))
    parser.add_argument("--stop", type=float, default=float(MAX_ELEVATION))
    parser.add_argument("--step", type=float, default=1.0)
    parser.add_argument("--segment-length", type=float, default=SEGMENT_LENGTH)
    parser.add_argument("--effector-length", type=float, default=EFFECTOR_LENGTH)
    parser.add_argument("--min-angle", type=float, default=MIN_ANGLE)
    parser.add_argument("--max-angle", type=float, default=MAX_ANGLE)
    parser.add_argument("--json", action="store_true", help="print JSON payloads")
    return parser


# ======================================================================
# Dispatch
# ======================================================================


# Mapping from mode name to runner function
_MODE_DISPATCH = {
    "solve": _run_solve,
    "sweep": _run_sweep,
    "rollout": _run_rollout,
}


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse *argv* and run the selected mode.

    Configuration and input errors are reported through ``parser.error``,
    which exits with status 2.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when *None*.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        arm_cfg = _build_arm_config(args)
        if not args.json:
            print(f"Mode: {args.mode} | limits [{args.min_angle}, {args.max_angle}]")
            print("-" * 60)
        _MODE_DISPATCH[args.mode](arm_cfg, args)
    except ElevationArmError as exc:
        parser.error(str(exc))


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------
if __name__ == "__main__":
    main()
