"""
Match bookkeeping (score, life, phase) and the phase state machine
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from statemachine import State, StateMachine

logger = logging.getLogger(__name__)

PLAYER = "player"
OPPONENT = "opponent"


class MatchPhase(str, Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    ENDED = "ended"


@dataclass
class MatchState:
    score: int = 0
    opponent_score: int = 0
    life: int = 0
    phase: MatchPhase = MatchPhase.NOT_STARTED
    winner: Optional[str] = None

    @property
    def playing(self) -> bool:
        return self.phase is MatchPhase.PLAYING

    @property
    def ended(self) -> bool:
        return self.phase is MatchPhase.ENDED

    def snapshot(self) -> "MatchState":
        return replace(self)


class MatchMachine(StateMachine):
    """
    Guards MatchState.phase: not_started -> playing -> ended.

    ended is final; the only way back is building a new MatchState (and a new
    machine) through a session reset.
    """

    not_started = State(
        MatchPhase.NOT_STARTED.value,
        value=MatchPhase.NOT_STARTED.value,
        initial=True,
    )
    playing = State(MatchPhase.PLAYING.value, value=MatchPhase.PLAYING.value)
    ended = State(MatchPhase.ENDED.value, value=MatchPhase.ENDED.value, final=True)

    kick_off = not_started.to(playing)
    finish = playing.to(ended)

    def __init__(self, match: MatchState):
        self.match = match
        super().__init__(start_value=match.phase.value)

    def sync_phase_to_model(self) -> None:
        self.match.phase = MatchPhase(str(self.current_state_value))

    def begin(self) -> None:
        self.kick_off()
        self.sync_phase_to_model()
        logger.info("Match started (life=%d)", self.match.life)

    def conclude(self, winner: Optional[str]) -> None:
        self.finish()
        self.match.winner = winner
        self.sync_phase_to_model()
        logger.info(
            "Match ended: winner=%s score=%d opponent_score=%d life=%d",
            winner, self.match.score, self.match.opponent_score, self.match.life,
        )
