"""
Top-level game phase and its state machine.
"""

from enum import Enum


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


class PhaseEvent(Enum):
    START = "start"
    COLLIDE = "collide"
    RESTART = "restart"


# Every legal move of the state machine. Anything missing is ignored.
_TRANSITIONS = {
    (Phase.NOT_STARTED, PhaseEvent.START): Phase.RUNNING,
    (Phase.RUNNING, PhaseEvent.COLLIDE): Phase.OVER,
    (Phase.OVER, PhaseEvent.RESTART): Phase.NOT_STARTED,
}


def next_phase(phase: Phase, event: PhaseEvent) -> Phase:
    """
    Return the phase reached by applying `event` to `phase`.

    Events that do not apply to the current phase leave it unchanged, so
    e.g. a start request while RUNNING or a collision while OVER are no-ops.
    """
    return _TRANSITIONS.get((phase, event), phase)
