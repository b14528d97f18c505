"""
Direction intent buffer.

Turns a requested direction into the single pending direction the engine
applies on its next tick. Between ticks the last accepted request wins;
earlier ones are overwritten, not queued.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .direction import Direction
from .phase import Phase
from .state import SimulationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntentResult:
    """
    Outcome of one submitted intent.

    Attributes:
        accepted: whether the pending direction was overwritten
        direction: the direction now pending, or None if nothing changed
        is_start_signal: the intent was accepted before the game started;
            the caller is expected to start the game
    """

    accepted: bool
    direction: Optional[Direction] = None
    is_start_signal: bool = False


REJECTED = IntentResult(accepted=False)


def resolve_intent(requested: Direction, current_direction: Direction) -> Optional[Direction]:
    """
    Return `requested` if it may replace `current_direction`, else None.

    Only a change of axis is allowed. Reversing would run the head straight
    into the neck, and repeating the current direction changes nothing.
    """
    if requested.is_orthogonal_to(current_direction):
        return requested
    return None


def submit_intent(state: SimulationState, requested: Any) -> IntentResult:
    """
    Buffer `requested` as the next direction for `state`.

    The check is made against the direction applied on the last tick, not
    against an earlier pending intent. While moving Right, Up then Down
    within one tick leaves Down pending; Up then Left leaves Up pending,
    since Left still reverses the applied direction.

    Malformed input is ignored and never raises.
    """
    direction = Direction.coerce(requested)
    if direction is None:
        logger.debug(f"Ignoring malformed direction input: {requested!r}")
        return REJECTED

    if state.phase is Phase.OVER:
        return REJECTED

    accepted = resolve_intent(direction, state.direction)
    if accepted is None:
        return REJECTED

    state.pending_direction = accepted
    return IntentResult(
        accepted=True,
        direction=accepted,
        is_start_signal=state.phase is Phase.NOT_STARTED,
    )
