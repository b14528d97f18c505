"""
Game configuration.

The defaults are fixed in code; a host may override them through
GameConfig.from_mapping using the option names it exposes to players.
"""

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from .constants import (
    GRID_SIZE,
    INITIAL_INTERVAL_MS,
    SPEED_STEP_MS,
    MIN_INTERVAL_MS,
    FEED_REWARD,
    START_LENGTH,
)

# Host-facing option name -> GameConfig field
OPTION_NAMES: Dict[str, str] = {
    "gridSize": "grid_size",
    "initialIntervalMs": "initial_interval_ms",
    "speedStepMs": "speed_step_ms",
    "minIntervalMs": "min_interval_ms",
    "feedReward": "feed_reward",
}


INT_FIELDS = ("grid_size", "feed_reward")
FLOAT_FIELDS = ("initial_interval_ms", "speed_step_ms", "min_interval_ms")


@dataclass(frozen=True)
class GameConfig:
    """
    Tunables for one game.

    Attributes:
        grid_size: width and height of the square board, in cells
        initial_interval_ms: milliseconds between ticks at the start of a game
        speed_step_ms: how much the interval shrinks each time the snake feeds
        min_interval_ms: the interval never drops below this floor
        feed_reward: points awarded per food eaten
    """

    grid_size: int = GRID_SIZE
    initial_interval_ms: float = INITIAL_INTERVAL_MS
    speed_step_ms: float = SPEED_STEP_MS
    min_interval_ms: float = MIN_INTERVAL_MS
    feed_reward: int = FEED_REWARD

    def __post_init__(self):
        for name in INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")

        # The canonical snake sits left of centre and needs room for its body
        if self.grid_size < START_LENGTH + 1:
            raise ValueError(
                f"gridSize must be at least {START_LENGTH + 1}, got {self.grid_size}"
            )
        if self.min_interval_ms <= 0:
            raise ValueError(f"minIntervalMs must be positive, got {self.min_interval_ms}")
        if self.initial_interval_ms < self.min_interval_ms:
            raise ValueError(
                f"initialIntervalMs ({self.initial_interval_ms}) must not be below "
                f"minIntervalMs ({self.min_interval_ms})"
            )
        if self.speed_step_ms < 0:
            raise ValueError(f"speedStepMs must not be negative, got {self.speed_step_ms}")
        if self.feed_reward < 0:
            raise ValueError(f"feedReward must not be negative, got {self.feed_reward}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "GameConfig":
        """
        Build a config from host options.

        Recognized keys are gridSize, initialIntervalMs, speedStepMs,
        minIntervalMs and feedReward (their snake_case field names work too).
        Missing keys keep their defaults.

        Raises:
            ValueError: on an unknown key or a value that fails validation.
        """
        field_names = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_NAMES.get(key, key)
            if name not in field_names:
                available = ", ".join(OPTION_NAMES)
                raise ValueError(
                    f"Unknown game option '{key}'. Available options: {available}"
                )
            kwargs[name] = cls._coerce(name, value)
        return cls(**kwargs)

    @staticmethod
    def _coerce(name: str, value: Any):
        if isinstance(value, bool):
            raise ValueError(f"Invalid value for {name}: {value!r}")
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid value for {name}: {value!r}") from None
        if not math.isfinite(number):
            raise ValueError(f"Invalid value for {name}: {value!r}")
        if name in INT_FIELDS:
            # Whole numbers only; 20.7 cells is not a grid
            if not number.is_integer():
                raise ValueError(f"Invalid value for {name}: {value!r}")
            return int(number)
        return number

    def to_options(self) -> Dict[str, Any]:
        """Return the config keyed by host-facing option names."""
        return {option: getattr(self, name) for option, name in OPTION_NAMES.items()}


DEFAULT_CONFIG = GameConfig()
