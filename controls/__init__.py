"""
Input normalization for Neon Snake.

Each module turns raw device events into session calls: a direction intent
or a start/restart request.
"""

from .keyboard import KEY_BINDINGS, RESTART_KEYS, key_to_direction, handle_key
from .swipe import SwipeTracker, handle_swipe
from .pointer import handle_click

__all__ = [
    'KEY_BINDINGS',
    'RESTART_KEYS',
    'key_to_direction',
    'handle_key',
    'SwipeTracker',
    'handle_swipe',
    'handle_click',
]
