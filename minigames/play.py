"""
Command-line launcher for the mini-games

    minigames dodge --assets ./catch-and-dodge
    minigames soccer --difficulty hard
    minigames soccer --headless --steps 2000 --seed 7
"""

import argparse
import logging
from typing import Optional

import numpy as np

from minigames.configs.game_config import ASSET_PATHS, DEFAULT_DIFFICULTY, DIFFICULTY_CONFIGS
from minigames.core import (
    DodgeConfig,
    InputState,
    InvalidConfigError,
    SoccerConfig,
    init_session,
)

logger = logging.getLogger(__name__)


def build_config(game: str, difficulty: str = DEFAULT_DIFFICULTY,
                 width: Optional[int] = None, height: Optional[int] = None):
    overrides = {}
    if width is not None:
        overrides["width"] = width
    if height is not None:
        overrides["height"] = height
    if game == "dodge":
        return DodgeConfig.from_preset(**overrides)
    return SoccerConfig.from_preset(difficulty=difficulty, **overrides)


def run_headless(game: str, config, steps: int, dt: float, seed: Optional[int]):
    """Drive a session with random stick input, no window"""
    session = init_session(config, seed=seed)
    session.start()
    rng = np.random.default_rng(seed)
    inp = InputState()

    for _ in range(steps):
        inp.set_analog(*rng.uniform(-1.0, 1.0, size=2))
        result = session.tick(dt, inp)
        if result.match_state.ended:
            break

    match = session.match
    print(f"\n{'='*60}")
    print(f"{game}: {session.tick_count} ticks, phase={match.phase.value}")
    if game == "soccer":
        print(f"Score: {match.score} - {match.opponent_score}  winner={match.winner}")
    else:
        print(f"Score: {match.score}  life={match.life}")
    print(f"{'='*60}\n")
    return match


def run_window(game: str, config, assets_dir: Optional[str], seed: Optional[int]):
    import arcade

    from minigames.assets import AssetProvider
    from minigames.render import GameWindow

    assets = None
    if assets_dir is not None:
        assets = AssetProvider(assets_dir, ASSET_PATHS[game])
        report = assets.load()
        if not report.ok:
            logger.warning("%d asset(s) missing, drawing fallback shapes", len(report.failed))

    # assets are resolved before the first tick can run
    session = init_session(config, seed=seed)
    GameWindow(
        session,
        assets=assets,
        title="Catch and Dodge" if game == "dodge" else "Soccer",
        auto_start=(game == "dodge"),
    )
    arcade.run()


def main():
    parser = argparse.ArgumentParser(description="Play the arcade mini-games")
    parser.add_argument(
        "game",
        type=str,
        choices=["dodge", "soccer"],
        help="Which game to run",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        default=DEFAULT_DIFFICULTY,
        choices=sorted(DIFFICULTY_CONFIGS),
        help=f"Opponent speed preset for soccer (default: {DEFAULT_DIFFICULTY})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for item spawns (default: none)",
    )
    parser.add_argument("--width", type=int, default=None, help="Playfield width override")
    parser.add_argument("--height", type=int, default=None, help="Playfield height override")
    parser.add_argument(
        "--assets",
        type=str,
        default=None,
        help="Directory with sprites and sounds; without it shapes are drawn",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Simulate with random input instead of opening a window",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=3600,
        help="Tick budget for --headless (default: 3600)",
    )
    parser.add_argument(
        "--dt",
        type=float,
        default=1 / 60,
        help="Seconds per tick for --headless (default: 1/60)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args.game, args.difficulty, args.width, args.height)
    except InvalidConfigError as e:
        parser.error(str(e))
    logger.debug("Config: %s", config.to_dict())

    if args.headless:
        run_headless(args.game, config, args.steps, args.dt, args.seed)
    else:
        run_window(args.game, config, args.assets, args.seed)


if __name__ == "__main__":
    main()
