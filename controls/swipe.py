"""
Touch swipe detection.
"""

from typing import Optional

from domain.direction import Direction, UP, DOWN, LEFT, RIGHT
from domain.intent import IntentResult
from services.game_session import GameSession


class SwipeTracker:
    """
    Turns a touch start / touch end pair into a direction.

    The axis with the larger displacement wins; its sign picks the
    direction. Screen coordinates: y grows downwards.
    """

    def __init__(self) -> None:
        self.start_x: Optional[float] = None
        self.start_y: Optional[float] = None

    def touch_start(self, x: float, y: float) -> None:
        self.start_x = x
        self.start_y = y

    def touch_end(self, x: float, y: float) -> Optional[Direction]:
        if self.start_x is None or self.start_y is None:
            return None

        dx = x - self.start_x
        dy = y - self.start_y
        self.start_x = None
        self.start_y = None

        if abs(dx) > abs(dy):
            return RIGHT if dx > 0 else LEFT
        if dy > 0:
            return DOWN
        if dy < 0:
            return UP
        return None


def handle_swipe(session: GameSession, tracker: SwipeTracker, x: float, y: float) -> Optional[IntentResult]:
    """Finish a swipe at (x, y) and forward the direction, if any."""
    direction = tracker.touch_end(x, y)
    if direction is None:
        return None
    return session.on_direction_input(direction)
