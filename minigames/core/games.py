"""
Per-game rules on top of the shared stepper and collision core.

A rules object knows how to build the actors of its game, how one tick
advances them and when the match is over. It keeps no state of its own
between ticks; everything mutable lives in the session's store and match.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .collision import CatchRule, FeedbackEvent, GoalDetector, KickRule
from .config import DodgeConfig, SoccerConfig
from .entities import Entity, EntityKind, EntityStore, Shape
from .match import OPPONENT, PLAYER, MatchState
from .stepper import Bounds, fell_out, pursue, step_ball, step_controlled, step_falling

logger = logging.getLogger(__name__)

PLAYER_ID = "player"
OPPONENT_ID = "opponent"
BALL_ID = "ball"


class GameRules:
    name = "base"

    def __init__(self, config):
        self.config = config
        self.bounds = Bounds(float(config.width), float(config.height))

    def build(self, rng: np.random.Generator) -> EntityStore:
        raise NotImplementedError

    def initial_match(self) -> MatchState:
        return MatchState()

    def advance(
        self,
        store: EntityStore,
        match: MatchState,
        move: Tuple[float, float],
        dt: float,
    ) -> List[FeedbackEvent]:
        raise NotImplementedError

    def outcome(self, match: MatchState) -> Tuple[bool, Optional[str]]:
        """(match over?, winner)"""
        raise NotImplementedError


# ----------------------------
# Catch and dodge
# ----------------------------

class DodgeRules(GameRules):
    """Player slides along the bottom edge; good and bad items rain down."""

    name = "dodge"

    def item_id(self, i: int) -> str:
        return f"item-{i}"

    def build(self, rng: np.random.Generator) -> EntityStore:
        cfg = self.config
        store = EntityStore()

        def spawn_player(p: Entity):
            p.x = (cfg.width - cfg.player_width) / 2
            p.y = cfg.player_y

        def respawn_item(item: Entity):
            item.x = float(rng.uniform(0.0, cfg.width - cfg.item_width))
            item.y = -float(cfg.item_height)

        store.add(
            Entity(
                eid=PLAYER_ID,
                kind=EntityKind.PLAYER,
                shape=Shape.RECT,
                x=0.0,
                y=0.0,
                width=cfg.player_width,
                height=cfg.player_height,
                speed=cfg.player_speed,
            ),
            spawn_player,
        )

        for i in range(cfg.item_count):
            # odd slots are bombs
            kind = EntityKind.COLLECTIBLE_BAD if i % 2 == 1 else EntityKind.COLLECTIBLE_GOOD
            item = store.add(
                Entity(
                    eid=self.item_id(i),
                    kind=kind,
                    shape=Shape.RECT,
                    x=0.0,
                    y=0.0,
                    width=cfg.item_width,
                    height=cfg.item_height,
                    speed=cfg.item_speed,
                ),
                respawn_item,
            )
            # first drop starts at a random height above the screen
            item.y = -float(rng.uniform(0.0, 1.0)) * cfg.height

        return store

    def initial_match(self) -> MatchState:
        return MatchState(life=self.config.initial_life)

    def advance(self, store, match, move, dt):
        cfg = self.config
        player = store.get(PLAYER_ID)
        step_controlled(player, move, dt, self.bounds, x_axis=True, y_axis=False)

        items = store.of_kind(EntityKind.COLLECTIBLE_GOOD, EntityKind.COLLECTIBLE_BAD)
        for item in items:
            step_falling(item, dt, scaled=cfg.item_speed_scaled)
            if fell_out(item, self.bounds):
                store.reset(item.eid)

        rule = CatchRule(store, match, reward=cfg.good_reward, damage=cfg.bad_damage)
        events: List[FeedbackEvent] = []
        for item in items:
            events.extend(rule.apply(player, item))
            if match.life <= 0:
                break
        return events

    def outcome(self, match):
        if match.life <= 0:
            return True, None
        return False, None


# ----------------------------
# Soccer
# ----------------------------

class SoccerRules(GameRules):
    """Player vs pursuit-AI opponent, one ball, goals at the left and right edges."""

    name = "soccer"

    def __init__(self, config: SoccerConfig):
        super().__init__(config)
        self.player_kick = KickRule(config.player_kick_speed, fallback_direction=(1.0, 0.0))
        self.opponent_kick = KickRule(config.opponent_kick_speed, fallback_direction=(-1.0, 0.0))
        self.goals = GoalDetector(
            width=config.width,
            goal_top=config.goal_top,
            goal_bottom=config.goal_bottom,
            goal_depth=config.goal_depth,
        )

    def build(self, rng: np.random.Generator) -> EntityStore:
        cfg = self.config
        store = EntityStore()

        def spawn_player(p: Entity):
            p.x = cfg.width / 4
            p.y = cfg.height / 2

        def spawn_opponent(o: Entity):
            o.x = cfg.width * 3 / 4
            o.y = cfg.height / 2

        def spawn_ball(b: Entity):
            b.x = cfg.width / 2
            b.y = cfg.height / 2
            b.vx = 0.0
            b.vy = 0.0

        store.add(
            Entity(PLAYER_ID, EntityKind.PLAYER, Shape.CIRCLE, 0.0, 0.0,
                   radius=cfg.player_radius, speed=cfg.player_speed),
            spawn_player,
        )
        store.add(
            Entity(OPPONENT_ID, EntityKind.OPPONENT, Shape.CIRCLE, 0.0, 0.0,
                   radius=cfg.opponent_radius, speed=cfg.opponent_speed),
            spawn_opponent,
        )
        store.add(
            Entity(BALL_ID, EntityKind.BALL, Shape.CIRCLE, 0.0, 0.0,
                   radius=cfg.ball_radius, speed=cfg.player_kick_speed),
            spawn_ball,
        )
        return store

    def advance(self, store, match, move, dt):
        cfg = self.config
        player = store.get(PLAYER_ID)
        opponent = store.get(OPPONENT_ID)
        ball = store.get(BALL_ID)

        step_controlled(player, move, dt, self.bounds)
        pursue(opponent, ball, dt, self.bounds)
        step_ball(
            ball,
            dt,
            self.bounds,
            friction=cfg.friction,
            stop_threshold=cfg.stop_threshold,
            restitution=cfg.restitution,
        )

        events: List[FeedbackEvent] = []
        events.extend(self.player_kick.apply(player, ball))
        events.extend(self.opponent_kick.apply(opponent, ball))

        scorer = self.goals.check(ball)
        if scorer == PLAYER:
            match.score += 1
            events.append(FeedbackEvent.GOAL_SCORED)
        elif scorer == OPPONENT:
            match.opponent_score += 1
            events.append(FeedbackEvent.GOAL_CONCEDED)

        if scorer is not None:
            logger.info("Goal for %s (%d - %d)", scorer, match.score, match.opponent_score)
            store.reset(BALL_ID)
        return events

    def outcome(self, match):
        if match.score >= self.config.winning_score:
            return True, PLAYER
        if match.opponent_score >= self.config.winning_score:
            return True, OPPONENT
        return False, None


def make_rules(config) -> GameRules:
    if isinstance(config, DodgeConfig):
        return DodgeRules(config)
    if isinstance(config, SoccerConfig):
        return SoccerRules(config)
    raise TypeError(f"Unsupported config type: {type(config).__name__}")
