"""Trapezoidal-velocity timing law for point-to-point motion."""

from __future__ import annotations

import math
from dataclasses import dataclass

#: Default spacing between trajectory reference points, in seconds.
DELTA_T = 0.1

#: Minimum number of controller cycles in each phase of the motion.
MIN_CYCLES = 4


@dataclass(frozen=True)
class TimingLaw:
    """Timing parameters: ``T`` is the cruise end time, ``tau`` the ramp time."""

    T: float
    tau: float

    @property
    def duration(self) -> float:
        """Total time from start to rest."""
        return self.T + self.tau


def mpar(dq: float, qtmax: float, qttmax: float, tc: float) -> TimingLaw:
    """Compute the timing law for a displacement ``dq``.

    ``qtmax`` and ``qttmax`` are the maximum velocity and acceleration and
    ``tc`` the controller cycle time. Both times are rounded up to whole
    cycles and are never shorter than four cycles.
    """
    if dq < 0:
        raise ValueError("displacement must be non-negative")
    if qtmax <= 0 or qttmax <= 0:
        raise ValueError("velocity and acceleration limits must be positive")
    if tc <= 0:
        raise ValueError("cycle time must be positive")

    t_min = MIN_CYCLES * tc
    tau_min = MIN_CYCLES * tc

    T = dq / qtmax
    tau = qtmax / qttmax
    if T < tau:
        tau = math.sqrt(dq / qttmax)
        T = tau

    T = tc * math.ceil(T / tc)
    tau = tc * math.ceil(tau / tc)

    return TimingLaw(T=max(T, t_min), tau=max(tau, tau_min))


def sfun(t: float, T: float, tau: float) -> float:
    """Normalised progress (0 to 1) along the motion at time ``t``."""
    s = 0.0
    if 0 <= t <= tau:
        s = t**2 / (2 * T * tau)
    if tau <= t <= T:
        s = tau**2 / (2 * T * tau) + (t - tau) / T
    if T <= t <= T + tau:
        s = 1 - (t - T - tau) ** 2 / (2 * T * tau)
    if t > T + tau:
        s = 1.0
    return s