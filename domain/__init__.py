"""
Domain entities for the Neon Snake game engine.

This module contains the core game entities and the simulation step. They
are independent of timing, input devices and rendering.
"""

from .constants import (
    GRID_SIZE,
    INITIAL_INTERVAL_MS,
    SPEED_STEP_MS,
    MIN_INTERVAL_MS,
    FEED_REWARD,
)
from .direction import Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from .phase import Phase, PhaseEvent, next_phase
from .config import GameConfig, DEFAULT_CONFIG
from .snake import Snake
from .state import SimulationState, new_game, starting_snake
from .game_state import GameSnapshot
from .intent import IntentResult, resolve_intent, submit_intent
from .food import spawn_food
from .engine import TickOutcome, tick

__all__ = [
    'GRID_SIZE', 'INITIAL_INTERVAL_MS', 'SPEED_STEP_MS', 'MIN_INTERVAL_MS', 'FEED_REWARD',
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Phase', 'PhaseEvent', 'next_phase',
    'GameConfig', 'DEFAULT_CONFIG',
    'Snake',
    'SimulationState', 'new_game', 'starting_snake',
    'GameSnapshot',
    'IntentResult', 'resolve_intent', 'submit_intent',
    'spawn_food',
    'TickOutcome', 'tick',
]
