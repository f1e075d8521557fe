"""
Arcade front end: drives a session from the window clock and draws its snapshot.

The window owns no game logic. It maps key and mouse events onto the
session's InputState, calls tick() from on_update, and draws whatever
get_renderable_entities() returns. Simulation coordinates grow downwards,
Arcade's grow upwards, so every y is flipped here.
"""

from __future__ import annotations

import logging
from typing import Optional

import arcade

from minigames.assets import AssetProvider
from minigames.core import (
    Direction,
    EntityKind,
    FeedbackEvent,
    MatchPhase,
    Session,
    get_renderable_entities,
    joystick_vector,
)

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    arcade.key.LEFT: Direction.LEFT,
    arcade.key.A: Direction.LEFT,
    arcade.key.RIGHT: Direction.RIGHT,
    arcade.key.D: Direction.RIGHT,
    arcade.key.UP: Direction.UP,
    arcade.key.W: Direction.UP,
    arcade.key.DOWN: Direction.DOWN,
    arcade.key.S: Direction.DOWN,
}

FLASH_SECS = 0.1
JOYSTICK_RADIUS = 50.0


class GameWindow(arcade.Window):
    """Arcade window hosting one session of either game"""

    def __init__(
        self,
        session: Session,
        assets: Optional[AssetProvider] = None,
        title: str = "Minigames",
        auto_start: bool = False,
    ):
        cfg = session.config
        super().__init__(int(cfg.width), int(cfg.height), title)
        self.session = session
        self.assets = assets

        self.flash_timer = 0.0
        self._joystick_origin = None

        # Colors
        self.FIELD_C = (102, 205, 170)
        self.LINE_C = arcade.color.WHITE
        self.GOAL_C = (221, 221, 221)
        self.SKY_C = (18, 18, 22)
        self.FLASH_C = (200, 30, 30)
        self.HUD_C = (220, 220, 220)
        self.FALLBACK_C = {
            EntityKind.PLAYER: (40, 90, 230),
            EntityKind.OPPONENT: (220, 60, 60),
            EntityKind.BALL: (255, 255, 255),
            EntityKind.COLLECTIBLE_GOOD: (240, 210, 80),
            EntityKind.COLLECTIBLE_BAD: (60, 60, 60),
        }

        if auto_start:
            session.start()

    # ----------------------------
    # Clock
    # ----------------------------

    def on_update(self, delta_time: float):
        if self.flash_timer > 0:
            self.flash_timer = max(0.0, self.flash_timer - delta_time)

        result = self.session.tick(delta_time)
        for event in result.feedback_events:
            self.on_feedback(event)

    def on_feedback(self, event: FeedbackEvent):
        if event is FeedbackEvent.DAMAGE_FLASH:
            self.flash_timer = FLASH_SECS
        elif event is FeedbackEvent.KICK:
            self._play("kick")
        elif event in (FeedbackEvent.GOAL_SCORED, FeedbackEvent.GOAL_CONCEDED):
            self._play("goal")

    def _play(self, name: str):
        sound = self.assets.sound(name) if self.assets else None
        if sound is not None:
            arcade.play_sound(sound)

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in KEY_DIRECTIONS:
            self.session.input.press(KEY_DIRECTIONS[symbol])
        elif symbol in (arcade.key.SPACE, arcade.key.ENTER):
            phase = self.session.match.phase
            if phase is MatchPhase.NOT_STARTED:
                self.session.start()
            elif phase is MatchPhase.ENDED:
                self.session.restart()
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in KEY_DIRECTIONS:
            self.session.input.release(KEY_DIRECTIONS[symbol])

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if self.session.game == "dodge":
            self.session.input.touch_steer(x, self.width)
        else:
            self._joystick_origin = (x, y)

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int):
        if self.session.game == "dodge":
            self.session.input.touch_steer(x, self.width)
        elif self._joystick_origin is not None:
            ox, oy = self._joystick_origin
            # screen y is up, simulation y is down
            self.session.input.set_analog(*joystick_vector(x - ox, -(y - oy), JOYSTICK_RADIUS))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        if self.session.game == "dodge":
            self.session.input.release_touch()
        else:
            self._joystick_origin = None
            self.session.input.set_analog(0.0, 0.0)

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        self.clear()
        if self.session.game == "soccer":
            self._draw_field()
        else:
            arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, self.SKY_C)

        for ent in get_renderable_entities(self.session):
            self._draw_entity(ent)

        if self.flash_timer > 0:
            arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, (*self.FLASH_C, 90))

        self._draw_hud()
        self._draw_overlay()

    def _draw_entity(self, ent):
        h = self.height
        texture = self.assets.texture(ent.kind.value) if self.assets else None
        if ent.radius > 0:
            left, right = ent.x - ent.radius, ent.x + ent.radius
            bottom, top = h - (ent.y + ent.radius), h - (ent.y - ent.radius)
        else:
            left, right = ent.x, ent.x + ent.width
            bottom, top = h - (ent.y + ent.height), h - ent.y

        if top < 0 or bottom > h:
            return

        if texture is not None:
            arcade.draw_texture_rect(texture, arcade.LRBT(left, right, bottom, top))
        elif ent.radius > 0:
            arcade.draw_circle_filled(ent.x, h - ent.y, ent.radius, self.FALLBACK_C[ent.kind])
        else:
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, self.FALLBACK_C[ent.kind])

    def _draw_field(self):
        cfg = self.session.config
        w, h = self.width, self.height
        arcade.draw_lrbt_rectangle_filled(0, w, 0, h, self.FIELD_C)
        arcade.draw_circle_outline(w / 2, h / 2, min(w, h) * 0.1, self.LINE_C, 2)
        arcade.draw_line(w / 2, 0, w / 2, h, self.LINE_C, 2)

        goal_bottom = h - cfg.goal_bottom
        goal_top = h - cfg.goal_top
        arcade.draw_lrbt_rectangle_filled(0, cfg.goal_depth, goal_bottom, goal_top, self.GOAL_C)
        arcade.draw_lrbt_rectangle_filled(w - cfg.goal_depth, w, goal_bottom, goal_top, self.GOAL_C)

    def _draw_hud(self):
        match = self.session.match
        if self.session.game == "soccer":
            txt = f"Score: {match.score} - {match.opponent_score}"
        else:
            txt = f"Score: {match.score}  Life: {match.life}"
        arcade.draw_text(txt, 12, self.height - 28, self.HUD_C, 14)

    def _draw_overlay(self):
        match = self.session.match
        cx, cy = self.width / 2, self.height / 2
        if match.phase is MatchPhase.NOT_STARTED:
            arcade.draw_text("Press SPACE to start", cx, cy, self.HUD_C, 24, anchor_x="center")
        elif match.phase is MatchPhase.ENDED:
            if self.session.game == "soccer":
                headline = "YOU WIN" if match.winner == "player" else "YOU LOSE"
            else:
                headline = "GAME OVER"
            arcade.draw_text(headline, cx, cy, arcade.color.RED, 48, anchor_x="center")
            arcade.draw_text(
                f"Final score: {match.score}  (SPACE to restart)",
                cx, cy - 40, self.HUD_C, 16, anchor_x="center",
            )
