from __future__ import annotations

import math

import numpy as np
import pytest

from minigames.core import EntityKind, FeedbackEvent, InputState, MatchPhase, tick
from minigames.core.collision import PUSH_OUT_FACTOR
from minigames.core.games import BALL_ID, OPPONENT_ID, PLAYER_ID

DT = 1 / 60


def test_kickoff_layout(make_soccer) -> None:
    session = make_soccer(start=False)
    store = session.store
    assert (store.get(PLAYER_ID).x, store.get(PLAYER_ID).y) == (200.0, 250.0)
    assert (store.get(OPPONENT_ID).x, store.get(OPPONENT_ID).y) == (600.0, 250.0)
    ball = store.get(BALL_ID)
    assert (ball.x, ball.y, ball.vx, ball.vy) == (400.0, 250.0, 0.0, 0.0)
    assert [e.kind for e in store] == [EntityKind.PLAYER, EntityKind.OPPONENT, EntityKind.BALL]


@pytest.mark.parametrize("difficulty, speed", [("easy", 100.0), ("medium", 150.0), ("hard", 200.0)])
def test_opponent_chases_ball_at_difficulty_speed(make_soccer, difficulty, speed) -> None:
    session = make_soccer(difficulty=difficulty)
    opponent = session.store.get(OPPONENT_ID)
    tick(session, 0.5)
    assert opponent.x == pytest.approx(600.0 - speed * 0.5)
    assert opponent.y == pytest.approx(250.0)


def test_player_kick_through_tick(make_soccer) -> None:
    session = make_soccer()
    player = session.store.get(PLAYER_ID)
    ball = session.store.get(BALL_ID)
    player.x, player.y = 380.0, 250.0

    result = tick(session, 0.0)

    assert FeedbackEvent.KICK in result.feedback_events
    assert ball.x == pytest.approx(400.0 + 5.0 * PUSH_OUT_FACTOR)
    assert (ball.vx, ball.vy) == pytest.approx((300.0, 0.0))


def test_opponent_on_top_of_ball_kicks_toward_left_goal(make_soccer) -> None:
    # hard opponent covers the 200 px to the ball in one second
    session = make_soccer(difficulty="hard")
    ball = session.store.get(BALL_ID)

    result = tick(session, 1.0)

    assert FeedbackEvent.KICK in result.feedback_events
    assert ball.x == pytest.approx(400.0 - 25.0 * PUSH_OUT_FACTOR)
    assert (ball.vx, ball.vy) == pytest.approx((-300.0, 0.0))


def test_ball_slows_down_and_stops(make_soccer) -> None:
    session = make_soccer(opponent_speed=0.0)
    ball = session.store.get(BALL_ID)
    ball.vy = 50.0

    tick(session, DT)
    assert ball.vy == pytest.approx(50.0 * 0.98)

    for _ in range(400):
        tick(session, DT)
    assert (ball.vx, ball.vy) == (0.0, 0.0)


def test_player_goal_scores_and_resets_ball(make_soccer) -> None:
    session = make_soccer()
    ball = session.store.get(BALL_ID)
    ball.x, ball.y = 781.0, 250.0

    result = tick(session, 0.0)

    assert result.match_state.score == 1
    assert result.score_delta == 1
    assert FeedbackEvent.GOAL_SCORED in result.feedback_events
    assert (ball.x, ball.y, ball.vx, ball.vy) == (400.0, 250.0, 0.0, 0.0)
    assert result.match_state.phase is MatchPhase.PLAYING


def test_opponent_goal_counts(make_soccer) -> None:
    session = make_soccer()
    ball = session.store.get(BALL_ID)
    ball.x, ball.y = 15.0, 250.0

    result = tick(session, 0.0)

    assert result.match_state.opponent_score == 1
    assert result.match_state.score == 0
    assert result.score_delta is None
    assert FeedbackEvent.GOAL_CONCEDED in result.feedback_events
    assert (ball.x, ball.y) == (400.0, 250.0)


def test_ball_beside_goal_mouth_bounces(make_soccer) -> None:
    session = make_soccer(opponent_speed=0.0)
    ball = session.store.get(BALL_ID)
    ball.x, ball.y = 789.0, 100.0
    ball.vx = 100.0

    result = tick(session, DT)

    assert result.match_state.score == 0
    assert ball.x == 790.0
    assert ball.vx < 0


def test_third_goal_wins_and_freezes_match(make_soccer) -> None:
    session = make_soccer()
    session.match.score = 2
    ball = session.store.get(BALL_ID)
    ball.x, ball.y = 781.0, 250.0

    result = tick(session, DT)

    assert result.match_state.score == 3
    assert result.match_state.phase is MatchPhase.ENDED
    assert result.match_state.winner == "player"
    assert FeedbackEvent.MATCH_ENDED in result.feedback_events

    ball.x, ball.y = 781.0, 250.0
    later = tick(session, DT)
    assert later.match_state.score == 3
    assert later.feedback_events == []
    assert (ball.x, ball.y) == (781.0, 250.0)


def test_opponent_can_win(make_soccer) -> None:
    session = make_soccer(winning_score=1)
    ball = session.store.get(BALL_ID)
    ball.x, ball.y = 15.0, 250.0
    result = tick(session, 0.0)
    assert result.match_state.ended
    assert result.match_state.winner == "opponent"


def test_players_stay_on_the_field(make_soccer) -> None:
    session = make_soccer(difficulty="hard", winning_score=1000)
    store = session.store
    rng = np.random.default_rng(11)
    for _ in range(2000):
        inp = InputState()
        inp.set_analog(*rng.uniform(-1.0, 1.0, size=2))
        tick(session, float(rng.uniform(0.0, 0.1)), inp)
        for ent in (store.get(PLAYER_ID), store.get(OPPONENT_ID)):
            assert ent.radius <= ent.x <= 800.0 - ent.radius
            assert ent.radius <= ent.y <= 500.0 - ent.radius


def test_restart_after_win(make_soccer) -> None:
    session = make_soccer(winning_score=1)
    ball = session.store.get(BALL_ID)
    ball.x, ball.y = 781.0, 250.0
    tick(session, 0.0)
    assert session.match.ended

    session.restart()
    assert session.match.playing
    assert (session.match.score, session.match.opponent_score, session.match.winner) == (0, 0, None)


def test_both_kicks_in_one_tick_opponent_velocity_wins(make_soccer) -> None:
    session = make_soccer(opponent_kick_speed=250.0)
    player = session.store.get(PLAYER_ID)
    opponent = session.store.get(OPPONENT_ID)
    ball = session.store.get(BALL_ID)
    player.x, player.y = 385.0, 250.0
    opponent.x, opponent.y = 410.0, 262.0

    result = tick(session, 0.0)

    assert result.feedback_events.count(FeedbackEvent.KICK) == 2

    # player's push-out first: overlap 10 along +x
    pushed_x, pushed_y = 400.0 + 10.0 * PUSH_OUT_FACTOR, 250.0
    dx, dy = pushed_x - 410.0, pushed_y - 262.0
    distance = math.hypot(dx, dy)
    nx, ny = dx / distance, dy / distance
    overlap = 25.0 - distance

    assert ball.x == pytest.approx(pushed_x + nx * overlap * PUSH_OUT_FACTOR)
    assert ball.y == pytest.approx(pushed_y + ny * overlap * PUSH_OUT_FACTOR)
    assert (ball.vx, ball.vy) == pytest.approx((nx * 250.0, ny * 250.0))
