"""
Services that drive the domain: frame timing and the host-facing session.
"""

from .tick_scheduler import TickScheduler, FrameClock
from .game_session import GameSession

__all__ = [
    'TickScheduler',
    'FrameClock',
    'GameSession',
]
