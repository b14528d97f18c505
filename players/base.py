"""
Base player interface for the headless host.
"""

from domain.direction import Direction
from domain.game_state import GameSnapshot


class Player:
    """
    Base class/interface for player logic.

    A player looks at the latest snapshot and returns the direction it
    wants the snake to take next.
    """

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        """
        Return a move direction given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            One of: UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError
