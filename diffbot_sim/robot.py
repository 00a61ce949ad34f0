"""Kinematic model of a two-wheeled differential-drive robot."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from diffbot_sim.scheduler import RateScheduler

#: Distance between the two wheels, in metres.
WHEEL_BASE = 0.085

#: Integration step of the robot model, in seconds.
SAMPLING_TIME = 0.01


@dataclass(frozen=True)
class Pose:
    """Planar position and heading."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0


@dataclass
class RobotModel:
    """Forward-Euler unicycle model driven by right and left wheel speeds.

    ``update`` runs the model once; ``step`` is called at the base rate and
    runs the model only on the steps the scheduler marks active.
    """

    wheel_base: float = WHEEL_BASE
    sample_time: float = SAMPLING_TIME
    scheduler: RateScheduler = field(default_factory=RateScheduler)
    state: Pose = field(default_factory=Pose)
    output: Pose = field(default_factory=Pose)

    def __post_init__(self) -> None:
        if self.wheel_base <= 0:
            raise ValueError("wheel base must be positive")
        if self.sample_time <= 0:
            raise ValueError("sample time must be positive")

    def update(self, vd: float, vg: float) -> Pose:
        """Integrate one sample; return the pose held before the update."""
        current = self.state
        speed = (vd + vg) * 0.5
        self.state = Pose(
            x=current.x + self.sample_time * speed * math.cos(current.theta),
            y=current.y + self.sample_time * speed * math.sin(current.theta),
            theta=current.theta + (vd - vg) / self.wheel_base * self.sample_time,
        )
        self.output = current
        return current

    def step(self, vd: float, vg: float) -> Pose:
        """Advance one base step and return the current output pose."""
        if self.scheduler.tick():
            self.update(vd, vg)
        return self.output

    def reset(self) -> None:
        """Return the robot to the origin and restart the scheduler."""
        self.state = Pose()
        self.output = Pose()
        self.scheduler.reset()