"""
Immutable per-session game configuration
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import asdict, dataclass, fields
from typing import ClassVar

from minigames.configs.game_config import (
    DEFAULT_DIFFICULTY,
    DIFFICULTY_CONFIGS,
    DODGE_CONFIG,
    SOCCER_CONFIG,
)
from minigames.core.errors import InvalidConfigError

logger = logging.getLogger(__name__)


def _build(cls, params: dict):
    try:
        config = cls(**params)
    except TypeError as e:
        raise InvalidConfigError(f"Unknown {cls.game} config option: {e}") from e
    config.validate()
    return config


def _require(cond: bool, message: str):
    if not cond:
        logger.warning("Rejected config: %s", message)
        raise InvalidConfigError(message)


def _require_finite(config):
    for f in fields(config):
        value = getattr(config, f.name)
        if isinstance(value, bool):
            continue
        _require(
            isinstance(value, numbers.Real) and math.isfinite(value),
            f"{f.name} must be a finite number, got {value!r}",
        )


@dataclass(frozen=True)
class DodgeConfig:
    """Catch-and-dodge constants. Sizes in px, player speed in px/s."""

    game: ClassVar[str] = "dodge"

    width: float = 400
    height: float = 600
    player_width: float = 30
    player_height: float = 35
    player_bottom_margin: float = 10
    player_speed: float = 240.0
    item_width: float = 40
    item_height: float = 40
    item_speed: float = 3.0
    item_speed_scaled: bool = False
    item_count: int = 10
    good_reward: int = 10
    bad_damage: int = 1
    initial_life: int = 1

    @classmethod
    def from_preset(cls, **overrides) -> "DodgeConfig":
        params = dict(DODGE_CONFIG)
        params.update(overrides)
        return _build(cls, params)

    @property
    def player_y(self) -> float:
        return self.height - self.player_height - self.player_bottom_margin

    def validate(self):
        _require_finite(self)
        _require(self.width > 0 and self.height > 0, "playfield must have a positive size")
        _require(self.player_width > 0 and self.player_height > 0, "player must have a positive size")
        _require(self.item_width > 0 and self.item_height > 0, "items must have a positive size")
        _require(self.player_width <= self.width, "player is wider than the playfield")
        _require(self.item_width <= self.width, "items are wider than the playfield")
        _require(self.player_y >= 0, "player does not fit vertically in the playfield")
        _require(self.player_speed >= 0 and self.item_speed >= 0, "speeds must not be negative")
        _require(self.item_count >= 0, "item count must not be negative")
        _require(self.good_reward >= 0 and self.bad_damage >= 0, "rewards must not be negative")
        _require(self.initial_life >= 1, "initial life must be at least 1")

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SoccerConfig:
    """Soccer constants. Radii in px, speeds in px/s, friction applied per tick."""

    game: ClassVar[str] = "soccer"

    width: float = 800
    height: float = 500
    player_radius: float = 15.0
    player_speed: float = 200.0
    opponent_radius: float = 15.0
    opponent_speed: float = 150.0
    ball_radius: float = 10.0
    player_kick_speed: float = 300.0
    opponent_kick_speed: float = 300.0
    friction: float = 0.98
    stop_threshold: float = 0.1
    restitution: float = 0.8
    goal_width_ratio: float = 0.3
    goal_depth: float = 10.0
    winning_score: int = 3

    @classmethod
    def from_preset(cls, difficulty: str = DEFAULT_DIFFICULTY, **overrides) -> "SoccerConfig":
        if difficulty not in DIFFICULTY_CONFIGS:
            raise InvalidConfigError(
                f"Unknown difficulty {difficulty!r}, expected one of {sorted(DIFFICULTY_CONFIGS)}"
            )
        params = dict(SOCCER_CONFIG)
        params.update(DIFFICULTY_CONFIGS[difficulty])
        params.update(overrides)
        return _build(cls, params)

    @property
    def goal_top(self) -> float:
        return (self.height - self.height * self.goal_width_ratio) / 2

    @property
    def goal_bottom(self) -> float:
        return self.goal_top + self.height * self.goal_width_ratio

    def validate(self):
        _require_finite(self)
        _require(self.width > 0 and self.height > 0, "field must have a positive size")
        for name in ("player_radius", "opponent_radius", "ball_radius"):
            r = getattr(self, name)
            _require(r > 0, f"{name} must be positive")
            _require(2 * r <= min(self.width, self.height), f"{name} does not fit in the field")
        for name in ("player_speed", "opponent_speed", "player_kick_speed", "opponent_kick_speed"):
            _require(getattr(self, name) >= 0, f"{name} must not be negative")
        _require(0 < self.friction <= 1, "friction must be in (0, 1]")
        _require(0 <= self.restitution <= 1, "restitution must be in [0, 1]")
        _require(self.stop_threshold >= 0, "stop threshold must not be negative")
        _require(0 < self.goal_width_ratio <= 1, "goal width ratio must be in (0, 1]")
        _require(0 < self.goal_depth < self.width / 2, "goal depth must be positive and fit in half the field")
        _require(self.winning_score >= 1, "winning score must be at least 1")

    def to_dict(self) -> dict:
        return asdict(self)
