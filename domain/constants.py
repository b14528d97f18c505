"""
Game constants for Neon Snake.
"""

# Board
GRID_SIZE = 20

# Speed progression (milliseconds between ticks)
INITIAL_INTERVAL_MS = 140
SPEED_STEP_MS = 3
MIN_INTERVAL_MS = 70

# Scoring
FEED_REWARD = 10

# Canonical starting snake length (head included)
START_LENGTH = 3

# Why a game ended
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"

# Overlay messages shown by the presentation layer
START_MESSAGE = "Tap or press any key to start"
GAME_OVER_MESSAGE = "Game over! Score: {score}. Tap or press Enter to restart."
