"""
Per-tick motion: controlled movers, falling items, the ball and pursuit AI
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .entities import Entity, Shape
from .utils import clamp, normalize


@dataclass(frozen=True)
class Bounds:
    """Playfield rectangle, y grows downwards"""
    width: float
    height: float


def clamp_into(entity: Entity, bounds: Bounds, x_axis: bool = True, y_axis: bool = True):
    """Keep the entity's whole extent inside the playfield"""
    if entity.shape is Shape.CIRCLE:
        r = entity.radius
        if x_axis:
            entity.x = clamp(entity.x, r, bounds.width - r)
        if y_axis:
            entity.y = clamp(entity.y, r, bounds.height - r)
    else:
        if x_axis:
            entity.x = clamp(entity.x, 0.0, bounds.width - entity.width)
        if y_axis:
            entity.y = clamp(entity.y, 0.0, bounds.height - entity.height)


def step_controlled(
    entity: Entity,
    move: Tuple[float, float],
    dt: float,
    bounds: Bounds,
    x_axis: bool = True,
    y_axis: bool = True,
):
    """position += move * speed * dt on the enabled axes, then clamp"""
    mx, my = move
    if x_axis:
        entity.x += mx * entity.speed * dt
    if y_axis:
        entity.y += my * entity.speed * dt
    clamp_into(entity, bounds, x_axis=x_axis, y_axis=y_axis)


def step_falling(item: Entity, dt: float, scaled: bool = False):
    """
    Items drop straight down at their own speed.

    Unscaled, the speed is a per-tick distance like the browser version;
    scaled, it is px/s and motion becomes frame-rate independent.
    """
    item.y += item.speed * dt if scaled else item.speed


def fell_out(item: Entity, bounds: Bounds) -> bool:
    return item.y > bounds.height


def pursue(chaser: Entity, target: Entity, dt: float, bounds: Bounds):
    """Move straight toward the target's current position"""
    nx, ny = normalize(target.x - chaser.x, target.y - chaser.y)
    step_controlled(chaser, (nx, ny), dt, bounds)


def step_ball(
    ball: Entity,
    dt: float,
    bounds: Bounds,
    friction: float,
    stop_threshold: float,
    restitution: float,
):
    # decay, snap, move, bounce
    ball.vx *= friction
    ball.vy *= friction
    if abs(ball.vx) < stop_threshold:
        ball.vx = 0.0
    if abs(ball.vy) < stop_threshold:
        ball.vy = 0.0

    ball.x += ball.vx * dt
    ball.y += ball.vy * dt

    r = ball.radius
    if ball.x - r < 0:
        ball.x = r
        ball.vx = -ball.vx * restitution
    elif ball.x + r > bounds.width:
        ball.x = bounds.width - r
        ball.vx = -ball.vx * restitution

    if ball.y - r < 0:
        ball.y = r
        ball.vy = -ball.vy * restitution
    elif ball.y + r > bounds.height:
        ball.y = bounds.height - r
        ball.vy = -ball.vy * restitution
