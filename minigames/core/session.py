"""
Session API driven by the host loop.

The core never schedules itself: a host (the Arcade window, the Gym adapter
or a test) creates a session, calls tick() once per frame with the elapsed
time, and reads back plain data to draw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

import numpy as np

from .collision import FeedbackEvent
from .config import DodgeConfig, SoccerConfig
from .entities import EntityKind, EntityStore
from .games import GameRules, make_rules
from .input import InputState, aggregate
from .match import MatchMachine, MatchState
from .utils import sanitize_dt

logger = logging.getLogger(__name__)

GameConfig = Union[DodgeConfig, SoccerConfig]


@dataclass
class TickResult:
    match_state: MatchState
    score_delta: Optional[int] = None
    feedback_events: List[FeedbackEvent] = field(default_factory=list)


@dataclass(frozen=True)
class RenderableEntity:
    eid: str
    kind: EntityKind
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0


class Session:
    """All mutable state of one game: entities, match and held input"""

    def __init__(self, config: GameConfig, seed: Optional[int] = None):
        config.validate()
        self.config = config
        self.rules: GameRules = make_rules(config)
        self.seed = seed
        self.rng = np.random.default_rng(seed)

        self.store: EntityStore = None  # type: ignore
        self.match: MatchState = None  # type: ignore
        self.machine: MatchMachine = None  # type: ignore
        self.input: InputState = None  # type: ignore
        self.tick_count = 0
        self._rebuild()

    @property
    def game(self) -> str:
        return self.rules.name

    def _rebuild(self):
        # entities, match and input always come back together
        self.store = self.rules.build(self.rng)
        self.match = self.rules.initial_match()
        self.machine = MatchMachine(self.match)
        self.input = InputState()
        self.tick_count = 0

    def start(self):
        self.machine.begin()

    def reset(self):
        self._rebuild()
        logger.info("Session reset (%s)", self.game)

    def restart(self):
        self.reset()
        self.start()

    def tick(self, dt: float, input_state: Optional[InputState] = None) -> TickResult:
        if not self.match.playing:
            return TickResult(match_state=self.match.snapshot())

        dt = sanitize_dt(dt)
        move = aggregate(input_state if input_state is not None else self.input)
        score_before = self.match.score

        events = self.rules.advance(self.store, self.match, move, dt)

        over, winner = self.rules.outcome(self.match)
        if over:
            self.machine.conclude(winner)
            events.append(FeedbackEvent.MATCH_ENDED)

        self.tick_count += 1
        delta = self.match.score - score_before
        return TickResult(
            match_state=self.match.snapshot(),
            score_delta=delta if delta else None,
            feedback_events=events,
        )

    def renderables(self) -> List[RenderableEntity]:
        return [
            RenderableEntity(
                eid=e.eid,
                kind=e.kind,
                x=e.x,
                y=e.y,
                width=e.width,
                height=e.height,
                radius=e.radius,
            )
            for e in self.store
        ]


# ----------------------------
# Functional API
# ----------------------------

def init_session(config: GameConfig, seed: Optional[int] = None) -> Session:
    session = Session(config, seed=seed)
    logger.info("Session created: game=%s seed=%s", session.game, seed)
    return session


def start(session: Session):
    session.start()


def tick(session: Session, dt: float, input_state: Optional[InputState] = None) -> TickResult:
    return session.tick(dt, input_state)


def get_renderable_entities(session: Session) -> List[RenderableEntity]:
    return session.renderables()


def reset(session: Session):
    session.reset()
