"""Position controller for a differential-drive robot.

Two PID loops act on the x and y position errors. Their outputs are turned
into wheel speeds by input-output linearisation of the unicycle kinematics.
The forward speed is held by a saturated discrete integrator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from diffbot_sim.robot import WHEEL_BASE

#: Integration step of the controller, in seconds.
SAMPLING_TIME = 0.01

#: Initial value of the forward-speed integrator.
INITIAL_SPEED = 0.05


@dataclass(frozen=True)
class ControllerGains:
    """Tunable parameters of the controller.

    ``p``, ``i`` and ``d`` are the PID gains and ``n`` the derivative filter
    coefficient; ``wheel_base`` is the distance between the wheels and
    ``v_max`` the bound on the forward speed.
    """

    p: float = 82.0
    i: float = 0.0
    d: float = 42.0
    n: float = 20.0
    wheel_base: float = WHEEL_BASE
    v_max: float = 5.0

    def __post_init__(self) -> None:
        if self.wheel_base <= 0:
            raise ValueError("wheel base must be positive")
        if self.v_max <= 0:
            raise ValueError("speed limit must be positive")


@dataclass(frozen=True)
class WheelSpeeds:
    """Right (``vd``) and left (``vg``) wheel speed commands."""

    vd: float
    vg: float


@dataclass
class _PidAxis:
    """Parallel PID with a forward-Euler derivative filter on one axis."""

    integrator: float = 0.0
    filter: float = 0.0

    def update(self, error: float, gains: ControllerGains, dt: float) -> float:
        derivative = (gains.d * error - self.filter) * gains.n
        output = gains.p * error + self.integrator + derivative
        self.integrator += gains.i * error * dt
        self.filter += dt * derivative
        return output


@dataclass
class RobotController:
    """Stateful controller turning position errors into wheel speeds."""

    gains: ControllerGains = field(default_factory=ControllerGains)
    sample_time: float = SAMPLING_TIME
    initial_speed: float = INITIAL_SPEED
    speed_state: float = field(init=False)
    speed: float = field(init=False, default=0.0)
    _x_axis: _PidAxis = field(init=False, repr=False)
    _y_axis: _PidAxis = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.sample_time <= 0:
            raise ValueError("sample time must be positive")
        self.reset()

    def _saturated_speed(self) -> float:
        limit = self.gains.v_max
        return min(max(self.speed_state, -limit), limit)

    def update(
        self,
        x_ref: float,
        y_ref: float,
        x_feedback: float,
        y_feedback: float,
        theta: float,
    ) -> WheelSpeeds:
        """Run one controller sample and return the wheel speed commands."""
        speed = self._saturated_speed()
        if speed == 0:
            raise ZeroDivisionError("linearisation is undefined at zero forward speed")
        self.speed = speed

        dt = self.sample_time
        u1 = self._x_axis.update(x_ref - x_feedback, self.gains, dt)
        u2 = self._y_axis.update(y_ref - y_feedback, self.gains, dt)

        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        turn = (-sin_t / speed * u1 + cos_t / speed * u2) * (self.gains.wheel_base / 2.0)

        self.speed_state += (cos_t * u1 + sin_t * u2) * dt
        return WheelSpeeds(vd=speed + turn, vg=speed - turn)

    def reset(self) -> None:
        """Restore all integrator and filter states to their initial values."""
        self.speed_state = self.initial_speed
        self.speed = 0.0
        self._x_axis = _PidAxis()
        self._y_axis = _PidAxis()