from __future__ import annotations

import dataclasses
import math

import pytest

from minigames.core import DodgeConfig, InvalidConfigError, SoccerConfig, init_session


def test_presets_match_original_games() -> None:
    dodge = DodgeConfig.from_preset()
    assert (dodge.width, dodge.height) == (400, 600)
    assert dodge.player_y == 600 - 35 - 10
    assert dodge.item_count == 10
    assert dodge.good_reward == 10
    assert dodge.initial_life == 1

    soccer = SoccerConfig.from_preset()
    assert soccer.opponent_speed == 150.0
    assert soccer.friction == 0.98
    assert soccer.restitution == 0.8
    assert soccer.goal_top == pytest.approx(175.0)
    assert soccer.goal_bottom == pytest.approx(325.0)


@pytest.mark.parametrize("difficulty,speed", [("easy", 100.0), ("medium", 150.0), ("hard", 200.0)])
def test_difficulty_sets_opponent_speed(difficulty: str, speed: float) -> None:
    assert SoccerConfig.from_preset(difficulty=difficulty).opponent_speed == speed


def test_config_is_immutable() -> None:
    cfg = DodgeConfig.from_preset()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.width = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"width": 0},
        {"player_speed": -1.0},
        {"item_speed": -3.0},
        {"initial_life": 0},
        {"initial_life": -2},
        {"player_width": 500},
        {"item_count": -1},
        {"player_speed": math.inf},
        {"item_speed": math.nan},
        {"width": math.inf},
        {"item_width": "40"},
    ],
)
def test_invalid_dodge_config_is_rejected(overrides: dict) -> None:
    with pytest.raises(InvalidConfigError):
        DodgeConfig.from_preset(**overrides)


@pytest.mark.parametrize(
    "overrides",
    [
        {"height": -5},
        {"ball_radius": 0},
        {"player_radius": 400},
        {"opponent_speed": -10.0},
        {"friction": 0.0},
        {"friction": 1.5},
        {"restitution": 1.2},
        {"winning_score": 0},
        {"goal_width_ratio": 0.0},
        {"goal_depth": 0.0},
        {"goal_depth": 400.0},
        {"player_kick_speed": math.inf},
        {"opponent_speed": math.inf},
        {"stop_threshold": math.nan},
    ],
)
def test_invalid_soccer_config_is_rejected(overrides: dict) -> None:
    with pytest.raises(InvalidConfigError):
        SoccerConfig.from_preset(**overrides)


def test_unknown_difficulty_and_option_are_rejected() -> None:
    with pytest.raises(InvalidConfigError):
        SoccerConfig.from_preset(difficulty="impossible")
    with pytest.raises(InvalidConfigError):
        DodgeConfig.from_preset(gravity=9.8)


def test_session_init_validates_directly_built_configs() -> None:
    with pytest.raises(InvalidConfigError):
        init_session(DodgeConfig(initial_life=0))


def test_infinite_speed_never_reaches_the_simulation() -> None:
    with pytest.raises(InvalidConfigError):
        init_session(DodgeConfig(player_speed=math.inf))
