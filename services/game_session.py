"""
Game session - the boundary the host environment talks to.

Owns the one SimulationState of the running game together with its tick
scheduler and random source. Input handlers, the frame loop and the
presentation layer all go through a session; nothing else keeps game state.
"""

import logging
import random
from typing import Any, Optional

from domain.config import GameConfig, DEFAULT_CONFIG
from domain.engine import tick
from domain.game_state import GameSnapshot
from domain.intent import IntentResult, submit_intent
from domain.phase import Phase, PhaseEvent, next_phase
from domain.state import SimulationState, new_game
from services.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)


class GameSession:
    """
    Manages:
      - the current SimulationState
      - the tick scheduler
      - start / restart transitions
      - snapshots for the presentation layer
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or random.Random()
        self.scheduler = TickScheduler()
        self.state: SimulationState = new_game(self.config, self.rng)

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def on_frame_pulse(self, delta_ms: float) -> bool:
        """
        Called by the host once per display refresh with the elapsed time.

        Returns:
            True if a simulation tick ran during this pulse.
        """
        return self.scheduler.on_frame_pulse(self.state, delta_ms, self._tick)

    def _tick(self, state: SimulationState):
        return tick(state, self.rng)

    def on_direction_input(self, raw: Any) -> IntentResult:
        """
        Forward a normalized direction (a Direction or its name).

        An intent accepted before the game has started also starts it.
        Malformed input is ignored.
        """
        result = submit_intent(self.state, raw)
        if result.is_start_signal:
            self.start()
        return result

    def on_start_or_restart_request(self) -> Phase:
        """
        Handle a generic "activate" gesture (key press, tap, click).

        Starts the game if it has not started, restarts it if it is over and
        is ignored while it is running. Returns the phase afterwards.
        """
        if self.state.phase is Phase.NOT_STARTED:
            self.start()
        elif self.state.phase is Phase.OVER:
            self.restart()
        return self.state.phase

    def start(self) -> None:
        phase = next_phase(self.state.phase, PhaseEvent.START)
        if phase is not self.state.phase:
            self.state.phase = phase
            logger.info("Game started")

    def restart(self) -> None:
        """
        Replace the whole game with a fresh one.

        Only meaningful once the game is over; the new game waits in
        NOT_STARTED for the next start request.
        """
        if next_phase(self.state.phase, PhaseEvent.RESTART) is self.state.phase:
            return
        previous_score = self.state.score
        self.state = new_game(self.config, self.rng)
        self.scheduler.reset()
        logger.info(f"Game restarted (previous score: {previous_score})")

    def snapshot(self) -> GameSnapshot:
        """Return a read-only view of the current game."""
        return GameSnapshot.from_state(self.state)
