"""Sliding-tile 2048 game engine."""

from game2048.core import EngineConfig, GameState, Grid, Lost, Move, Playing, Won
from game2048.envs import GameEngine

__all__ = ["EngineConfig", "GameEngine", "GameState", "Grid", "Lost", "Move", "Playing", "Won"]
