# -*- coding: utf-8 -*-
"""
This module provides the building blocks of a 2048-like game.

It includes the immutable grid, the move directions, sliding and merging of tiles, tile spawning,
legality and terminal checks, the game phases and the engine configuration.
"""

from .config import EngineConfig
from .gameboard import (
    DEFAULT_SIZE,
    TILE_SPAWN_PROBS,
    WINNING_VALUE,
    Grid,
    can_move,
    compact_line,
    empty_cells,
    has_won,
    illegal_moves,
    is_done,
    legal_moves,
    merge_line,
    slide,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import Move, is_effective_move
from .gamestate import GameState, Lost, Playing, Won, is_terminal, phase_name

__all__ = [
    "DEFAULT_SIZE",
    "TILE_SPAWN_PROBS",
    "WINNING_VALUE",
    "EngineConfig",
    "GameState",
    "Grid",
    "Lost",
    "Move",
    "Playing",
    "Won",
    "can_move",
    "compact_line",
    "empty_cells",
    "has_won",
    "illegal_moves",
    "is_done",
    "is_effective_move",
    "is_terminal",
    "legal_moves",
    "merge_line",
    "phase_name",
    "slide",
    "slide_and_merge",
    "spawn_tile",
]
