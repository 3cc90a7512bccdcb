"""
Planar elevation arm kinematics.

Provides the joint-angle heuristic, forward kinematics for the
three-segment chain, the achieved-elevation readout, and the pipeline
that composes them into one immutable solution per target elevation.
"""
