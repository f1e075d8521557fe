"""
Keyboard + touch input, merged into one movement vector per tick
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .utils import clamp_to_unit


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass
class InputState:
    """
    Polled input snapshot: four digital directions plus an analog vector.

    Hosts flip the flags from key events and overwrite the analog vector from
    the joystick; the core only ever reads it.
    """
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    dx: float = 0.0
    dy: float = 0.0

    def press(self, direction: Direction):
        setattr(self, Direction(direction).value, True)

    def release(self, direction: Direction):
        setattr(self, Direction(direction).value, False)

    def set_analog(self, dx: float, dy: float):
        if not (math.isfinite(dx) and math.isfinite(dy)):
            dx, dy = 0.0, 0.0
        self.dx, self.dy = clamp_to_unit(dx, dy)

    def touch_steer(self, touch_x: float, playfield_width: float):
        """Dodge touch controls: holding the left half steers left, the right half steers right"""
        if touch_x < playfield_width / 2:
            self.left, self.right = True, False
        else:
            self.left, self.right = False, True

    def release_touch(self):
        self.left = False
        self.right = False

    def clear(self):
        self.left = self.right = self.up = self.down = False
        self.dx = self.dy = 0.0


def joystick_vector(offset_x: float, offset_y: float, max_radius: float) -> Tuple[float, float]:
    """
    Map a joystick handle offset (px from the base centre) into the unit disc.

    Inside max_radius the vector scales with distance; outside it keeps the
    direction at full magnitude.
    """
    if max_radius <= 0:
        return 0.0, 0.0
    distance = math.hypot(offset_x, offset_y)
    if distance > max_radius:
        return offset_x / distance, offset_y / distance
    return offset_x / max_radius, offset_y / max_radius


def digital_vector(state: InputState) -> Tuple[float, float]:
    dx = float(state.right) - float(state.left)
    dy = float(state.down) - float(state.up)
    return dx, dy


def aggregate(state: InputState) -> Tuple[float, float]:
    """
    Sum the key vector and the analog vector; rescale to length 1 if longer.

    Keys and touch add up rather than override each other: holding a key while pushing the
    joystick the other way cancels out.
    """
    kx, ky = digital_vector(state)
    ax, ay = state.dx, state.dy
    if not (math.isfinite(ax) and math.isfinite(ay)):
        ax, ay = 0.0, 0.0
    ax, ay = clamp_to_unit(ax, ay)
    return clamp_to_unit(kx + ax, ky + ay)
