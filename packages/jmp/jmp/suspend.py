"""SuspendController - pauses world stepping in simulated time."""
from __future__ import annotations

import logging
from typing import Callable

from jmp.timer import STEP_TOLERANCE, Timer
from jmp.types import SuspendError

logger = logging.getLogger(__name__)


class SuspendController:
    """Holds the suspend countdown, the tap flag, and a one-shot continuation.

    While suspended the simulation loop feeds each fixed increment to
    ``advance`` instead of stepping the world. Rendering is unaffected.
    """

    def __init__(self) -> None:
        self._timer = Timer(auto_reset=False, tolerance=STEP_TOLERANCE)
        self._tap_required = False
        self._pending: Callable[[], None] | None = None

    @property
    def timer(self) -> Timer:
        return self._timer

    @property
    def tap_required(self) -> bool:
        return self._tap_required

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def suspended(self) -> bool:
        # A pending continuation keeps a zero-length suspend alive until
        # the next increment delivers it.
        return (
            self._tap_required
            or self._pending is not None
            or not self._timer.is_done
        )

    def suspend(
        self,
        duration: float,
        tap_required: bool = False,
        on_resume: Callable[[], None] | None = None,
    ) -> None:
        """Stop the world for ``duration`` simulated seconds.

        With ``tap_required`` the world stays stopped after the countdown
        until ``tap`` is called. Only one suspend may be pending at a time.
        """
        if self.suspended:
            raise SuspendError("Multiple concurrent suspends not supported")
        if duration < 0:
            raise ValueError("duration must be non-negative")
        self._timer.add(duration)
        self._tap_required = tap_required
        self._pending = on_resume
        logger.debug(
            "suspended for %.3fs (tap_required=%s)", duration, tap_required
        )

    def unsuspend(self) -> None:
        self._timer.reset()
        self._tap_required = False
        callback, self._pending = self._pending, None
        logger.debug("unsuspended")
        if callback is not None:
            callback()

    def advance(self, dt: float) -> bool:
        """Step the countdown by one increment; resume if nothing else blocks.

        Returns True when this call resumed the simulation.
        """
        if self._timer.step(dt).is_done and not self._tap_required:
            self.unsuspend()
            return True
        return False

    def tap(self) -> bool:
        """External resume signal. Returns True if the tap was consumed."""
        if self._tap_required and self._timer.is_done:
            self.unsuspend()
            return True
        return False
