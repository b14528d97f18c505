"""
Keyboard input normalization.
"""

import logging
from typing import Dict, Optional

from domain.direction import Direction, UP, DOWN, LEFT, RIGHT
from domain.intent import IntentResult
from domain.phase import Phase
from services.game_session import GameSession

logger = logging.getLogger(__name__)

# Arrow keys and WASD, as reported by KeyboardEvent.key
KEY_BINDINGS: Dict[str, Direction] = {
    "ArrowUp": UP, "w": UP, "W": UP,
    "ArrowDown": DOWN, "s": DOWN, "S": DOWN,
    "ArrowLeft": LEFT, "a": LEFT, "A": LEFT,
    "ArrowRight": RIGHT, "d": RIGHT, "D": RIGHT,
}

RESTART_KEYS = {"Enter", " "}


def key_to_direction(key: str) -> Optional[Direction]:
    return KEY_BINDINGS.get(key)


def handle_key(session: GameSession, key: str) -> Optional[IntentResult]:
    """
    Route one key press to the session.

    After a game over, Enter or Space restarts. Before the first tick any
    key starts the game. A bound key is then forwarded as a direction intent.

    Returns:
        The intent result for bound keys, None otherwise.
    """
    phase = session.phase
    if phase is Phase.OVER and key in RESTART_KEYS:
        session.on_start_or_restart_request()
        return None

    if phase is Phase.NOT_STARTED:
        session.on_start_or_restart_request()

    direction = key_to_direction(key)
    if direction is None:
        logger.debug(f"Unbound key: {key!r}")
        return None
    return session.on_direction_input(direction)
