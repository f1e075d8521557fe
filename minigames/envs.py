"""
MinigameEnv - Gymnasium wrapper around one game session
-------------------------------------------------------
- Same simulation core the Arcade front end runs
- Gymnasium API, fixed dt per step
- Action: analog stick vector in [-1, 1]^2 (what the touch joystick feeds the core)
- Vector observation, normalized to [-1, 1]
- Reward: points scored minus damage taken / goals conceded

Quick test:
    python -m minigames.envs
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from minigames.core import (
    DodgeConfig,
    EntityKind,
    FeedbackEvent,
    InputState,
    SoccerConfig,
    init_session,
)
from minigames.core.games import BALL_ID, OPPONENT_ID, PLAYER_ID
from minigames.core.utils import clamp

GAMES = ("dodge", "soccer")


class MinigameEnv(gym.Env):
    """Either mini-game as a single-agent environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        game: str = "dodge",
        render_mode: Optional[str] = None,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        config=None,
        **overrides,
    ):
        super().__init__()

        assert game in GAMES, f"game must be one of {GAMES}"
        self.game = game
        self.render_mode = render_mode
        self.dt = dt
        self.max_steps = max_steps

        if config is None:
            config = DodgeConfig.from_preset(**overrides) if game == "dodge" else SoccerConfig.from_preset(**overrides)
        assert config.game == game, f"{type(config).__name__} does not configure {game!r}"
        self.config = config

        self.action_space = spaces.Box(low=-1.0, high=1.0, shape=(2,), dtype=np.float32)

        # dodge: player x(1) life(1) + per item: x, y, kind(3)
        # soccer: player(2) opponent(2) ball pos(2) ball vel(2)
        if game == "dodge":
            obs_dim = 2 + 3 * config.item_count
        else:
            obs_dim = 8
        self.observation_space = spaces.Box(low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32)

        self._window = None
        self.session = None
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        self._step_count = 0

        self.session = init_session(self.config, seed=seed)
        self.session.start()
        if self._window is not None:
            self._window.session = self.session

        return self._get_obs(), self._get_info()

    def step(self, action):
        action = np.asarray(action, dtype=np.float32)
        inp = InputState()
        inp.set_analog(float(action[0]), float(action[1]))

        result = self.session.tick(self.dt, inp)
        reward = self._compute_reward(result.feedback_events)

        terminated = result.match_state.ended
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        store = self.session.store
        w, h = float(cfg.width), float(cfg.height)

        def nx(x):
            return clamp(x / w * 2 - 1, -1, 1)

        def ny(y):
            return clamp(y / h * 2 - 1, -1, 1)

        player = store.get(PLAYER_ID)
        if self.game == "dodge":
            obs_parts: List[float] = [
                nx(player.x),
                clamp(self.session.match.life / max(1, cfg.initial_life) * 2 - 1, -1, 1),
            ]
            for item in store.of_kind(EntityKind.COLLECTIBLE_GOOD, EntityKind.COLLECTIBLE_BAD):
                kind = 1.0 if item.kind is EntityKind.COLLECTIBLE_GOOD else -1.0
                obs_parts += [nx(item.x), ny(item.y), kind]
        else:
            opponent = store.get(OPPONENT_ID)
            ball = store.get(BALL_ID)
            vmax = max(1e-6, cfg.player_kick_speed, cfg.opponent_kick_speed)
            obs_parts = [
                nx(player.x), ny(player.y),
                nx(opponent.x), ny(opponent.y),
                nx(ball.x), ny(ball.y),
                clamp(ball.vx / vmax, -1, 1), clamp(ball.vy / vmax, -1, 1),
            ]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events) -> float:
        R_SCORE = 1.0
        R_DAMAGE = 1.0

        reward = 0.0
        for event in events:
            if event in (FeedbackEvent.ITEM_CAUGHT, FeedbackEvent.GOAL_SCORED):
                reward += R_SCORE
            elif event in (FeedbackEvent.DAMAGE_FLASH, FeedbackEvent.GOAL_CONCEDED):
                reward -= R_DAMAGE
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        match = self.session.match
        return {
            "score": match.score,
            "opponent_score": match.opponent_score,
            "life": match.life,
            "phase": match.phase.value,
            "winner": match.winner,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from minigames.render import GameWindow
            self._window = GameWindow(self.session, title=f"MinigameEnv - {self.game}")

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(game: str = "dodge", render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random-policy episode and return its total reward"""
    env = MinigameEnv(game=game, render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random {game} episode return: {total}  ({info['step']} steps, phase={info['phase']})")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode("dodge", render=False)
    run_random_episode("soccer", render=False)
