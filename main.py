import argparse
import json
import logging
import os
import random
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from domain.config import GameConfig
from domain.phase import Phase
from players import AutopilotPlayer, Player
from services.game_session import GameSession

logger = logging.getLogger(__name__)

# Environment variable -> host-facing option name
ENV_OPTIONS = {
    "SNAKE_GRID_SIZE": "gridSize",
    "SNAKE_INITIAL_INTERVAL_MS": "initialIntervalMs",
    "SNAKE_SPEED_STEP_MS": "speedStepMs",
    "SNAKE_MIN_INTERVAL_MS": "minIntervalMs",
    "SNAKE_FEED_REWARD": "feedReward",
}

# One display refresh at 60Hz
DEFAULT_FRAME_MS = 1000 / 60


def config_from_env() -> GameConfig:
    """
    Build a GameConfig from SNAKE_* environment variables.

    Unset variables keep the built-in defaults.
    """
    options = {
        option: os.getenv(env_name)
        for env_name, option in ENV_OPTIONS.items()
        if os.getenv(env_name)
    }
    return GameConfig.from_mapping(options)


def run_headless(
    config: Optional[GameConfig] = None,
    frames: int = 10_000,
    frame_ms: float = DEFAULT_FRAME_MS,
    seed: Optional[int] = None,
    show_board: bool = False,
    player: Optional[Player] = None,
) -> Dict[str, Any]:
    """
    Runs a single game with an autopilot at the keyboard.

    Args:
        config: Game tunables (defaults if None).
        frames: Upper limit on frame pulses before giving up.
        frame_ms: Elapsed time reported on every pulse.
        seed: Seed for food placement and the autopilot, for repeatable runs.
        show_board: Print the board after every tick.
        player: Who steers (an AutopilotPlayer if None).

    Returns:
        A dictionary summarizing the game (score, length, ticks, phase, ...).
    """
    rng = random.Random(seed)
    session = GameSession(config=config, rng=rng)
    player = player or AutopilotPlayer(random.Random(rng.random()))

    session.on_start_or_restart_request()

    frame = 0
    while frame < frames and session.phase is Phase.RUNNING:
        session.on_direction_input(player.get_move(session.snapshot()))
        ticked = session.on_frame_pulse(frame_ms)
        frame += 1

        if ticked and show_board:
            snapshot = session.snapshot()
            print(f"\nScore: {snapshot.score}  Interval: {snapshot.tick_interval_ms}ms")
            print(snapshot.print_board())

    snapshot = session.snapshot()
    if snapshot.phase is Phase.OVER:
        print(f"\n{snapshot.status_message}")
    else:
        logger.info(f"Stopped after {frame} frames without a game over")

    return {
        "score": snapshot.score,
        "length": len(snapshot.snake),
        "ticks": session.state.ticks,
        "frames": frame,
        "phase": snapshot.phase.value,
        "death_reason": snapshot.death_reason,
        "tick_interval_ms": snapshot.tick_interval_ms,
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv=None):
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(
        description="Run a headless Neon Snake game steered by the autopilot."
    )
    parser.add_argument("--frames", type=int, required=False, default=10_000,
                        help="Maximum number of frame pulses")
    parser.add_argument("--frame-ms", type=float, required=False, default=DEFAULT_FRAME_MS,
                        help="Milliseconds reported per frame pulse")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Random seed for a repeatable game")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")

    args = parser.parse_args(argv)

    result = run_headless(
        config=config_from_env(),
        frames=args.frames,
        frame_ms=args.frame_ms,
        seed=args.seed,
        show_board=args.show_board,
    )

    print("\nGame Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
