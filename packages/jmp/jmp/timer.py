"""Timer - accumulates elapsed time against a target."""
from __future__ import annotations

# Summing fixed increments drifts by a few ulps. Timers fed by such
# increments pass this as their tolerance.
STEP_TOLERANCE = 1e-9


class Timer:
    """Progress counter compared against a target duration.

    ``add`` extends the target, ``step`` advances elapsed progress, and
    the timer is done once elapsed has caught up with the target.

    An auto-reset timer rolls over as soon as a ``step`` completes it:
    the target is subtracted from elapsed and cleared, so any overshoot
    carries into the next ``add``. This is the shape of a lag
    accumulator, where ``add`` receives wall-clock time and ``step``
    consumes fixed increments. A manual timer keeps its state until
    ``reset`` and works as a countdown.

    ``is_done`` is strict by default: elapsed must reach the target.
    A non-zero ``tolerance`` also counts progress that falls short of the
    target by at most that much as done.
    """

    def __init__(
        self, target: float = 0.0, auto_reset: bool = True, tolerance: float = 0.0
    ) -> None:
        if target < 0:
            raise ValueError("target must be non-negative")
        if tolerance < 0:
            raise ValueError("tolerance must be non-negative")
        self._target = target
        self._elapsed = 0.0
        self._auto_reset = auto_reset
        self._tolerance = tolerance

    @property
    def target(self) -> float:
        return self._target

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def auto_reset(self) -> bool:
        return self._auto_reset

    @property
    def remaining(self) -> float:
        """Target minus elapsed. Negative when progress ran past the target."""
        return self._target - self._elapsed

    @property
    def is_done(self) -> bool:
        return self._elapsed >= self._target - self._tolerance

    def add(self, amount: float) -> Timer:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        self._target += amount
        return self

    def step(self, dt: float) -> Timer:
        if dt < 0:
            raise ValueError("dt must be non-negative")
        self._elapsed += dt
        if self._auto_reset and self.is_done:
            self._elapsed = max(self._elapsed - self._target, 0.0)
            self._target = 0.0
        return self

    def reset(self) -> None:
        self._elapsed = 0.0
        if not self._auto_reset:
            self._target = 0.0

    def __repr__(self) -> str:
        return (
            f"Timer(elapsed={self._elapsed!r}, target={self._target!r}, "
            f"auto_reset={self._auto_reset!r})"
        )
