"""
Configuration for the game engine.
"""

from dataclasses import dataclass

from game2048.core.gameboard import DEFAULT_SIZE, TILE_SPAWN_PROBS


@dataclass
class EngineConfig:
    """
    Settings of a game engine.

    The win threshold is not configurable, see ``game2048.core.gameboard.WINNING_VALUE``.
    """

    # ##>: Board dimension used by new_game when no size is given.
    size: int = DEFAULT_SIZE

    # ##>: Tiles placed on the empty board of a new game.
    initial_tiles: int = 2

    # ##>: Probability that a spawned tile is a 4 instead of a 2.
    four_probability: float = TILE_SPAWN_PROBS[4]

    # ##>: Seed of the engine's generator; None draws from the module-level generator.
    seed: int | None = None

    def __post_init__(self):
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size <= 0:
            raise ValueError(f'size must be a positive integer, got {self.size!r}')
        if self.initial_tiles <= 0:
            raise ValueError(f'initial_tiles must be > 0, got {self.initial_tiles}')
        if not 0.0 <= self.four_probability <= 1.0:
            raise ValueError(f'four_probability must be within [0, 1], got {self.four_probability}')
