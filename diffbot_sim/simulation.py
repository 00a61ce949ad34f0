"""Closed-loop simulation of the robot following a point-to-point trajectory."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from diffbot_sim.decoupling import DecouplingModel
from diffbot_sim.robot import RobotModel
from diffbot_sim.trajectory import mpar, sfun

#: Limit handed to the timing law as its velocity bound.
AMAX = 1.0
#: Limit handed to the timing law as its acceleration bound.
VMAX = 3.0
#: Controller cycle time, in seconds.
TC = 0.01
#: Time between successive reference points, in seconds.
STEP = 0.1
#: Base-rate steps run for each reference point.
INNER_STEPS = 3000
#: Pause after each base-rate step when run from the command line, in seconds.
BASE_DELAY = 0.001

DEFAULT_INPUT_FILE = "traj_input.dat"
DEFAULT_OUTPUT_FILE = "traj_output.dat"


@dataclass(frozen=True)
class Sample:
    """One reference point and the position the robot reached for it."""

    time: float
    x_ref: float
    y_ref: float
    x: float
    y: float

    def describe(self) -> str:
        """Console line comparing reference and reached position."""
        return (
            f"position_ref ({self.x_ref:g},{self.y_ref:g})  "
            f"position_real ({self.x:g},{self.y:g}) "
        )


def run_trajectory(
    start: tuple[float, float] = (0.0, 0.0),
    end: tuple[float, float] = (5.0, 5.0),
    amax: float = AMAX,
    vmax: float = VMAX,
    tc: float = TC,
    step: float = STEP,
    inner_steps: int = INNER_STEPS,
    delay: float = 0.0,
) -> Iterator[Sample]:
    """Drive the robot along a straight line from ``start`` to ``end``.

    The timing law is computed from the x displacement. For each reference
    point the controller and the robot are run ``inner_steps`` base steps,
    sleeping ``delay`` seconds after each, and a ``Sample`` is yielded.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    if inner_steps < 0:
        raise ValueError("inner_steps must be non-negative")
    if delay < 0:
        raise ValueError("delay must be non-negative")

    start_x, start_y = start
    end_x, end_y = end
    law = mpar(abs(end_x - start_x), amax, vmax, tc)

    controller = DecouplingModel()
    robot = RobotModel()

    t = 0.0
    while t < law.duration:
        alpha = sfun(t, law.T, law.tau)
        x_ref = alpha * end_x + (1 - alpha) * start_x
        y_ref = alpha * end_y + (1 - alpha) * start_y
        sample_time = t
        t += step

        for _ in range(inner_steps):
            pose = robot.output
            speeds = controller.step(x_ref, y_ref, pose.x, pose.y, pose.theta)
            robot.step(speeds.vd, speeds.vg)
            if delay:
                time.sleep(delay)

        reached = robot.output
        yield Sample(
            time=sample_time, x_ref=x_ref, y_ref=y_ref, x=reached.x, y=reached.y
        )


def write_results(
    samples: Iterable[Sample],
    input_path: str | Path,
    output_path: str | Path,
) -> int:
    """Write references to ``input_path`` and reached positions to ``output_path``.

    Returns the number of samples written.
    """
    count = 0
    with open(input_path, "w", encoding="utf-8") as refs, open(
        output_path, "w", encoding="utf-8"
    ) as reached:
        for sample in samples:
            refs.write(f" ({sample.x_ref:g}, {sample.y_ref:g}) \n")
            reached.write(f" ({sample.x:g}, {sample.y:g}) \n")
            count += 1
    return count


def _echo(samples: Iterable[Sample]) -> Iterator[Sample]:
    for sample in samples:
        print(sample.describe(), flush=True)
        yield sample


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate a differential-drive robot following a trajectory."
    )
    parser.add_argument("--start", nargs=2, type=float, default=(0.0, 0.0),
                        metavar=("X", "Y"), help="start position")
    parser.add_argument("--end", nargs=2, type=float, default=(5.0, 5.0),
                        metavar=("X", "Y"), help="end position")
    parser.add_argument("--inner-steps", type=int, default=INNER_STEPS,
                        help="base steps per reference point")
    parser.add_argument("--delay", type=float, default=BASE_DELAY,
                        help="pause after each base step, in seconds")
    parser.add_argument("--input-file", default=DEFAULT_INPUT_FILE,
                        help="file receiving the reference positions")
    parser.add_argument("--output-file", default=DEFAULT_OUTPUT_FILE,
                        help="file receiving the reached positions")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from the command line."""
    args = _parser().parse_args(argv)
    try:
        samples = run_trajectory(
            start=tuple(args.start),
            end=tuple(args.end),
            inner_steps=args.inner_steps,
            delay=args.delay,
        )
        write_results(_echo(samples), args.input_file, args.output_file)
    except (ValueError, ZeroDivisionError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0