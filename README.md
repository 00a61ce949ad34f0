# diffbot-sim

A discrete-time simulation of a two-wheeled differential-drive robot. Two PID
loops, one on the x error and one on the y error, drive a controller that
linearises the robot's input-output behaviour. The controller steers the robot
along a straight-line reference path whose progress follows a trapezoidal
velocity profile: an acceleration ramp, a cruise phase and a deceleration ramp.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
diffbot-sim
```

By default this moves the robot from `(0, 0)` to `(5, 5)`. For each reference
point it prints a line such as

```
position_ref (0.0025,0.0025)  position_real (...) 
```

It also writes two files:

- `traj_input.dat` holds one reference position per line, as ` (x, y) `.
- `traj_output.dat` holds the position the robot reached for each reference point, in the same form.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--start X Y` | `0 0` | start position |
| `--end X Y` | `5 5` | end position |
| `--inner-steps N` | `3000` | base steps run for each reference point |
| `--delay SECONDS` | `0.001` | pause after each base step |
| `--input-file PATH` | `traj_input.dat` | file for the reference positions |
| `--output-file PATH` | `traj_output.dat` | file for the reached positions |

With the default delay the run sleeps 3 seconds for every reference point.
Pass `--delay 0` to run as fast as possible.

The command returns exit status 1 and prints `error: ...` to standard error in
three cases: an argument is invalid, the controller's forward speed becomes
zero, or a file cannot be written.

## Library use

### `diffbot_sim.trajectory`

- `mpar(dq, qtmax, qttmax, tc)` takes a displacement, a maximum velocity, a maximum acceleration and a controller cycle time.
  - It returns a frozen `TimingLaw(T, tau)`. `T` is the time at which the cruise phase ends and `tau` is the ramp time.
  - Both times are rounded up to whole cycles, and neither is shorter than four cycles.
  - `TimingLaw.duration` is `T + tau`.
  - It raises `ValueError` if the displacement is negative or if any of the limits or the cycle time is not positive.
- `sfun(t, T, tau)` returns the normalised progress along the path at time `t`. The value runs from 0 to 1 and is 1 after `T + tau`.

### `diffbot_sim.scheduler`

- `RateScheduler(period=10)` counts base-rate steps.
  - `active` is true on every `period`-th step.
  - `tick()` advances one step and returns whether the step it left was active.
  - `reset()` returns the counter to zero.

### `diffbot_sim.robot`

- `Pose(x, y, theta)` is a frozen planar pose.
- `RobotModel(wheel_base=0.085, sample_time=0.01)` is a forward-Euler unicycle model driven by the right (`vd`) and left (`vg`) wheel speeds.
  - `update(vd, vg)` integrates one sample. It returns the pose held before the update and stores that pose as `output`.
  - `step(vd, vg)` advances one base step. It runs `update` only on the steps that its `RateScheduler` marks active, and returns `output`.
  - `reset()` puts the robot back at the origin and restarts the scheduler.

### `diffbot_sim.controller`

- `ControllerGains` is frozen and holds these values:
  - `p=82.0`, `i=0.0` and `d=42.0`, the PID gains;
  - `n=20.0`, the derivative filter coefficient;
  - `wheel_base=0.085`;
  - `v_max=5.0`, the limit on the forward speed.
- `RobotController(gains, sample_time=0.01, initial_speed=0.05)` turns position errors into wheel speeds.
  - `update(x_ref, y_ref, x_feedback, y_feedback, theta)` runs one sample and returns `WheelSpeeds(vd, vg)`.
  - The forward speed comes from an integrator that is clamped to `±v_max`. If that speed is zero, `update` raises `ZeroDivisionError`.
  - `reset()` restores every integrator and filter state.

### `diffbot_sim.decoupling`

- `DecouplingModel` runs a `RobotController` under its own `RateScheduler`.
  - `step(x_ref, y_ref, x_feedback, y_feedback, theta)` is called every base step. It evaluates the controller only on active steps and otherwise returns the wheel speeds held from the last active step.
  - `reset()` restores the controller, the scheduler and the held output.

### `diffbot_sim.simulation`

- `run_trajectory(start, end, amax, vmax, tc, step, inner_steps, delay)` is a generator that runs the closed loop.
  - The timing law is computed from the x displacement.
  - The reference points are spaced `step` seconds apart.
  - For each reference point it runs `inner_steps` base steps of the controller and the robot, then yields a `Sample(time, x_ref, y_ref, x, y)`.
  - `Sample.describe()` gives the console line shown above.
- `write_results(samples, input_path, output_path)` writes the two files described under "Command line" and returns the number of samples written.
- `main(argv=None)` is the entry point of the `diffbot-sim` command.

Example:

```python
from diffbot_sim.simulation import run_trajectory, write_results

samples = run_trajectory(start=(0.0, 0.0), end=(5.0, 5.0), inner_steps=300)
count = write_results(samples, "traj_input.dat", "traj_output.dat")
```

## Limitations

- The simulation is purely kinematic. It does not model wheel dynamics, motor limits, noise or obstacles.
- The reference path is always a straight line between two points.
- The package does not plot its results. It only prints them and writes the two text files.