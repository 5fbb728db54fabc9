"""
Move directions for the 2048 game, with the geometry helpers used by the board logic.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from numpy import array_equal

if TYPE_CHECKING:
    from game2048.core.gameboard import Grid


class Move(Enum):
    """
    The four sliding directions.

    The value of each member is the number of counter-clockwise quarter turns that bring the
    direction onto LEFT, which lets every move reuse the same leftward slide.
    """

    UP = 1
    DOWN = 3
    LEFT = 0
    RIGHT = 2

    @property
    def row_delta(self) -> int:
        """-1 for UP, 1 for DOWN, 0 otherwise."""
        return _DELTAS[self][0]

    @property
    def col_delta(self) -> int:
        """-1 for LEFT, 1 for RIGHT, 0 otherwise."""
        return _DELTAS[self][1]

    @property
    def rotation(self) -> int:
        return self.value

    @property
    def is_vertical(self) -> bool:
        return self in (Move.UP, Move.DOWN)

    @property
    def is_horizontal(self) -> bool:
        return self in (Move.LEFT, Move.RIGHT)

    @classmethod
    def all_moves(cls) -> list[Move]:
        """Every direction, in declaration order."""
        return list(cls)


# ##>: (row delta, column delta) per direction.
_DELTAS: dict[Move, tuple[int, int]] = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}


def is_effective_move(before: Grid, after: Grid, score_increase: int) -> bool:
    """
    Decide whether a slide changed anything.

    Parameters
    ----------
    before : Grid
        The grid before sliding.
    after : Grid
        The grid after sliding and merging, before any tile spawn.
    score_increase : int
        The score gained by the slide.

    Returns
    -------
    bool
        True if at least one cell differs or the slide scored points.

    Notes
    -----
    A merge always changes a cell in practice, the score condition only covers a slide that
    would reproduce the same numbers after merging.
    """
    return not array_equal(before.cells, after.cells) or score_increase > 0
