"""
Autopilot player - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.direction import Direction, VALID_MOVES
from domain.game_state import GameSnapshot
from .base import Player


class AutopilotPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: GameSnapshot) -> Direction:
        body = snapshot.snake
        size = snapshot.grid_size

        # Filter out moves that:
        # 1. Reverse into the neck (the intent buffer would drop them anyway)
        # 2. Hit walls
        # 3. Hit own body, tail included (the engine never lets the head
        #    onto the tail cell)
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.name):
            if move is snapshot.direction.opposite:
                continue

            new_x, new_y = move.step(snapshot.head)
            if new_x < 0 or new_x >= size or new_y < 0 or new_y >= size:
                continue

            if (new_x, new_y) in body:
                continue

            valid_moves.append(move)

        # No way out, keep going (we'll die anyway)
        if not valid_moves:
            return snapshot.direction

        # Head for the food when one of the safe moves gets closer to it
        if snapshot.food is None:
            return self.rng.choice(valid_moves)
        fx, fy = snapshot.food
        hx, hy = snapshot.head
        closer = [
            move for move in valid_moves
            if abs(fx - (hx + move.dx)) + abs(fy - (hy + move.dy)) < abs(fx - hx) + abs(fy - hy)
        ]
        return self.rng.choice(closer or valid_moves)
