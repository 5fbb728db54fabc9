"""
Game phases. A ``GameState`` is exactly one of ``Playing``, ``Won`` or ``Lost``, each wrapping the grid.
"""

from dataclasses import dataclass

from game2048.core.gameboard import Grid


@dataclass(frozen=True)
class Playing:
    """
    Normal play.

    Attributes
    ----------
    grid : Grid
        The current board.
    can_undo : bool
        Whether a prior snapshot exists.
    """

    grid: Grid
    can_undo: bool = False


@dataclass(frozen=True)
class Won:
    """
    A tile reached the winning value.

    Attributes
    ----------
    grid : Grid
        The current board.
    continue_playing : bool
        False right after winning, while input is paused; True once the player chose to keep going.
    """

    grid: Grid
    continue_playing: bool = False


@dataclass(frozen=True)
class Lost:
    """Terminal: no direction changes the grid."""

    grid: Grid


GameState = Playing | Won | Lost


def is_terminal(state: GameState) -> bool:
    return isinstance(state, Lost)


def phase_name(state: GameState) -> str:
    """Short label of the phase, used for display."""
    return type(state).__name__.upper()
