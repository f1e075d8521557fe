"""Shared simulation core for the dodge and soccer mini-games"""

from .collision import FeedbackEvent
from .config import DodgeConfig, SoccerConfig
from .entities import Entity, EntityKind, EntityStore, Shape
from .errors import AssetLoadError, InvalidConfigError
from .input import Direction, InputState, aggregate, joystick_vector
from .match import MatchPhase, MatchState
from .session import (
    RenderableEntity,
    Session,
    TickResult,
    get_renderable_entities,
    init_session,
    reset,
    start,
    tick,
)

__all__ = [
    'FeedbackEvent',
    'DodgeConfig',
    'SoccerConfig',
    'Entity',
    'EntityKind',
    'EntityStore',
    'Shape',
    'AssetLoadError',
    'InvalidConfigError',
    'Direction',
    'InputState',
    'aggregate',
    'joystick_vector',
    'MatchPhase',
    'MatchState',
    'RenderableEntity',
    'Session',
    'TickResult',
    'get_renderable_entities',
    'init_session',
    'reset',
    'start',
    'tick',
]
