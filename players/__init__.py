"""
Player implementations for Neon Snake.

Players stand in for a human at the keyboard when the game runs headless.
"""

from .base import Player
from .autopilot import AutopilotPlayer

__all__ = [
    'Player',
    'AutopilotPlayer',
]
