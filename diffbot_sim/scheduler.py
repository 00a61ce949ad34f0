"""Base-rate task counter that decides when a slower subrate runs."""

from __future__ import annotations

from dataclasses import dataclass, field

#: The task counter is stored in an unsigned 8-bit slot.
MAX_COUNTER = 255


@dataclass
class RateScheduler:
    """Counts base-rate steps and flags every ``period``-th one as active.

    The subrate runs on the step where the counter is zero; the counter
    then advances and wraps back to zero after ``period`` steps.
    """

    period: int = 10
    counter: int = field(default=0)

    def __post_init__(self) -> None:
        if not 1 <= self.period <= MAX_COUNTER + 1:
            raise ValueError(
                f"period must be between 1 and {MAX_COUNTER + 1}, got {self.period}"
            )
        if not 0 <= self.counter < self.period:
            raise ValueError(
                f"counter must be between 0 and {self.period - 1}, got {self.counter}"
            )

    @property
    def active(self) -> bool:
        """Whether the subrate runs on the current base step."""
        return self.counter == 0

    def tick(self) -> bool:
        """Advance one base step; return whether the subrate was active on it."""
        was_active = self.active
        self.counter += 1
        if self.counter > self.period - 1:
            self.counter = 0
        return was_active

    def reset(self) -> None:
        """Return the counter to its initial state."""
        self.counter = 0