"""
Overlap tests and collision responses for both games.

Every rule answers the same two questions: collide(a, b) tells whether the
pair touches this tick, resolve(a, b) applies the game-specific response and
returns the feedback events the front end should react to (sounds, flashes).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from .entities import Entity, EntityKind, EntityStore
from .match import OPPONENT, PLAYER, MatchState
from .utils import circle_collide, normalize, rect_collide, vec_len

logger = logging.getLogger(__name__)

# share of the overlap the ball is pushed out by
PUSH_OUT_FACTOR = 0.51


class FeedbackEvent(str, Enum):
    ITEM_CAUGHT = "item_caught"
    DAMAGE_FLASH = "damage_flash"
    KICK = "kick"
    GOAL_SCORED = "goal_scored"
    GOAL_CONCEDED = "goal_conceded"
    MATCH_ENDED = "match_ended"


def rects_overlap(a: Entity, b: Entity) -> bool:
    return rect_collide(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)


def circles_overlap(a: Entity, b: Entity) -> bool:
    return circle_collide(a.x, a.y, a.radius, b.x, b.y, b.radius)


class CollisionRule:
    """Base class for a pairwise collision response"""

    def collide(self, a: Entity, b: Entity) -> bool:
        raise NotImplementedError

    def resolve(self, a: Entity, b: Entity) -> List[FeedbackEvent]:
        raise NotImplementedError

    def apply(self, a: Entity, b: Entity) -> List[FeedbackEvent]:
        if not self.collide(a, b):
            return []
        return self.resolve(a, b)


class CatchRule(CollisionRule):
    """
    Player vs falling item.

    Good items add the reward to the score, bad ones cost life and flash the
    screen. Either way the item respawns above the playfield right away. An item
    that keeps overlapping (e.g. one that does not fall) hits again every tick.
    """

    def __init__(self, store: EntityStore, match: MatchState, reward: int, damage: int):
        self.store = store
        self.match = match
        self.reward = reward
        self.damage = damage

    def collide(self, a: Entity, b: Entity) -> bool:
        return rects_overlap(a, b)

    def resolve(self, player: Entity, item: Entity) -> List[FeedbackEvent]:
        events: List[FeedbackEvent] = []
        if item.kind is EntityKind.COLLECTIBLE_GOOD:
            self.match.score += self.reward
            events.append(FeedbackEvent.ITEM_CAUGHT)
        elif item.kind is EntityKind.COLLECTIBLE_BAD:
            self.match.life = max(0, self.match.life - self.damage)
            events.append(FeedbackEvent.DAMAGE_FLASH)
        self.store.reset(item.eid)
        return events


class KickRule(CollisionRule):
    """
    Kicker (player or opponent) vs ball.

    The ball is pushed out along the centre-to-centre direction, then its
    velocity is replaced by kick_speed along that direction. The kicker's own
    motion plays no part.
    """

    def __init__(self, kick_speed: float, fallback_direction: Tuple[float, float]):
        self.kick_speed = kick_speed
        self.fallback_direction = fallback_direction

    def collide(self, a: Entity, b: Entity) -> bool:
        return circles_overlap(a, b)

    def resolve(self, kicker: Entity, ball: Entity) -> List[FeedbackEvent]:
        dx = ball.x - kicker.x
        dy = ball.y - kicker.y
        distance = vec_len(dx, dy)
        overlap = kicker.radius + ball.radius - distance

        nx, ny = normalize(dx, dy)
        if nx == 0.0 and ny == 0.0:
            # centres coincide: kick toward the goal this side attacks
            nx, ny = self.fallback_direction

        ball.x += nx * overlap * PUSH_OUT_FACTOR
        ball.y += ny * overlap * PUSH_OUT_FACTOR
        ball.vx = nx * self.kick_speed
        ball.vy = ny * self.kick_speed

        logger.debug("%s kicked the ball: v=(%.1f, %.1f)", kicker.eid, ball.vx, ball.vy)
        return [FeedbackEvent.KICK]


class GoalDetector:
    """
    Goal mouths are vertical bands of goal_depth px at both side lines.

    The player attacks the right goal, the opponent the left one.
    """

    def __init__(self, width: float, goal_top: float, goal_bottom: float, goal_depth: float):
        self.width = width
        self.goal_top = goal_top
        self.goal_bottom = goal_bottom
        self.goal_depth = goal_depth

    def in_mouth(self, ball: Entity) -> bool:
        return self.goal_top < ball.y < self.goal_bottom

    def check(self, ball: Entity) -> Optional[str]:
        """Side that scored, or None"""
        if not self.in_mouth(ball):
            return None
        if ball.x + ball.radius > self.width - self.goal_depth:
            return PLAYER
        if ball.x - ball.radius < self.goal_depth:
            return OPPONENT
        return None
