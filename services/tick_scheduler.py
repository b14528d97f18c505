"""
Tick scheduler.

Decouples the simulation tick rate from the render frame rate. The host
pulses the scheduler once per animation frame with the elapsed time; the
scheduler fires at most one simulation tick per pulse.
"""

import logging
import math
from typing import Callable, Optional

from domain.phase import Phase
from domain.state import SimulationState

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Accumulates frame time and triggers a tick once the current interval
    has elapsed.

    Surplus time is dropped when a tick fires: a long stalled frame yields a
    single tick, never a burst of catch-up ticks.
    """

    def __init__(self) -> None:
        self.accumulator_ms: float = 0.0

    def reset(self) -> None:
        self.accumulator_ms = 0.0

    def on_frame_pulse(
        self,
        state: SimulationState,
        delta_ms: float,
        tick_fn: Callable[[SimulationState], object],
    ) -> bool:
        """
        Add `delta_ms` and run `tick_fn(state)` if the interval has elapsed.

        Time only accumulates while the game is running. The interval is read
        from `state` on every pulse, so a speed-up applies right after the tick
        that earned it.

        Returns:
            True if a tick ran on this pulse.
        """
        if state.phase is not Phase.RUNNING:
            return False

        self.accumulator_ms += _sanitize_delta(delta_ms)
        if self.accumulator_ms < state.tick_interval_ms:
            return False

        self.accumulator_ms = 0.0
        tick_fn(state)
        return True


class FrameClock:
    """
    Converts absolute animation timestamps into per-frame deltas.

    The first timestamp is measured from 0, like a requestAnimationFrame
    loop that starts with lastTime = 0.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self.last_ms = start_ms

    def delta(self, timestamp_ms: float) -> float:
        elapsed = timestamp_ms - self.last_ms
        self.last_ms = timestamp_ms
        return elapsed


def _sanitize_delta(delta_ms: Optional[float]) -> float:
    """Negative, non-numeric or non-finite deltas count as no time passing."""
    try:
        delta = float(delta_ms)
    except (TypeError, ValueError):
        logger.debug(f"Ignoring malformed frame delta: {delta_ms!r}")
        return 0.0
    if not math.isfinite(delta) or delta < 0:
        logger.debug(f"Ignoring out-of-range frame delta: {delta_ms!r}")
        return 0.0
    return delta
