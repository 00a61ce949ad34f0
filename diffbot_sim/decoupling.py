"""Multi-rate wrapper running the position controller at its own sample rate."""

from __future__ import annotations

from dataclasses import dataclass, field

from diffbot_sim.controller import RobotController, WheelSpeeds
from diffbot_sim.scheduler import RateScheduler


def _idle_speeds() -> WheelSpeeds:
    return WheelSpeeds(vd=0.0, vg=0.0)


@dataclass
class DecouplingModel:
    """Runs a ``RobotController`` on the steps its scheduler marks active.

    ``step`` is called at the base rate. On active steps the controller is
    evaluated and its wheel speeds become the new output; on the others the
    previous output is held.
    """

    controller: RobotController = field(default_factory=RobotController)
    scheduler: RateScheduler = field(default_factory=RateScheduler)
    output: WheelSpeeds = field(default_factory=_idle_speeds)

    def step(
        self,
        x_ref: float,
        y_ref: float,
        x_feedback: float,
        y_feedback: float,
        theta: float,
    ) -> WheelSpeeds:
        """Advance one base step and return the current wheel speed commands."""
        if self.scheduler.active:
            self.output = self.controller.update(
                x_ref, y_ref, x_feedback, y_feedback, theta
            )
        self.scheduler.tick()
        return self.output

    def reset(self) -> None:
        """Restore the controller, scheduler and outputs to their initial state."""
        self.controller.reset()
        self.scheduler.reset()
        self.output = _idle_speeds()