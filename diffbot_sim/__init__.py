"""Differential-drive robot simulation: trajectory timing law, kinematic model, PID controller and closed-loop runner."""

__version__ = "0.1.0"