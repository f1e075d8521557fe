"""
Game entity dataclasses and the per-session entity store
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional


class EntityKind(str, Enum):
    PLAYER = "player"
    OPPONENT = "opponent"
    COLLECTIBLE_GOOD = "collectible_good"
    COLLECTIBLE_BAD = "collectible_bad"
    BALL = "ball"


class Shape(str, Enum):
    RECT = "rect"        # x, y is the top-left corner
    CIRCLE = "circle"    # x, y is the centre


@dataclass
class Entity:
    """One actor on the playfield"""
    eid: str
    kind: EntityKind
    shape: Shape
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    speed: float = 0.0  # px/s for movers, fall rate for items

    @property
    def left(self) -> float:
        return self.x - self.radius if self.shape is Shape.CIRCLE else self.x

    @property
    def right(self) -> float:
        return self.x + self.radius if self.shape is Shape.CIRCLE else self.x + self.width

    @property
    def top(self) -> float:
        return self.y - self.radius if self.shape is Shape.CIRCLE else self.y

    @property
    def bottom(self) -> float:
        return self.y + self.radius if self.shape is Shape.CIRCLE else self.y + self.height


Spawner = Callable[[Entity], None]


class EntityStore:
    """
    Holds the fixed set of actors of one session.

    Each entity is registered together with a spawner that puts it back into
    its start state; reset() reruns it without touching identity, kind or size.
    """

    def __init__(self):
        self._entities: Dict[str, Entity] = {}
        self._spawners: Dict[str, Spawner] = {}

    def add(self, entity: Entity, spawner: Optional[Spawner] = None) -> Entity:
        if entity.eid in self._entities:
            raise ValueError(f"Duplicate entity id: {entity.eid}")
        self._entities[entity.eid] = entity
        if spawner is not None:
            self._spawners[entity.eid] = spawner
            spawner(entity)
        return entity

    def get(self, eid: str) -> Entity:
        return self._entities[eid]

    def for_each(self, fn: Callable[[Entity], None]):
        for entity in self._entities.values():
            fn(entity)

    def of_kind(self, *kinds: EntityKind) -> List[Entity]:
        return [e for e in self._entities.values() if e.kind in kinds]

    def reset(self, eid: str):
        entity = self._entities[eid]
        entity.vx = 0.0
        entity.vy = 0.0
        spawner = self._spawners.get(eid)
        if spawner is not None:
            spawner(entity)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, eid: str) -> bool:
        return eid in self._entities
