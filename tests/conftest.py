from __future__ import annotations

import pytest

from minigames.core import DodgeConfig, SoccerConfig, init_session


@pytest.fixture()
def make_dodge():
    """Factory for a started dodge session; keyword args override the preset."""

    def _make(seed: int = 0, start: bool = True, **overrides):
        session = init_session(DodgeConfig.from_preset(**overrides), seed=seed)
        if start:
            session.start()
        return session

    return _make


@pytest.fixture()
def make_soccer():
    """Factory for a started soccer session; keyword args override the preset."""

    def _make(seed: int = 0, start: bool = True, difficulty: str = "medium", **overrides):
        session = init_session(SoccerConfig.from_preset(difficulty=difficulty, **overrides), seed=seed)
        if start:
            session.start()
        return session

    return _make
