"""Arcade mini-games - catch-and-dodge and top-down soccer on one simulation core"""

from .core import DodgeConfig, SoccerConfig, init_session
from .envs import MinigameEnv, run_random_episode

__all__ = ['DodgeConfig', 'SoccerConfig', 'init_session', 'MinigameEnv', 'run_random_episode']
