"""
Board primitives for the 2048 game: the immutable grid snapshot, the sliding and merging of tiles,
tile spawning and the legality checks built on top of them.
"""

from __future__ import annotations

from numpy import any as np_any
from numpy import argwhere, array, array_equal, asarray, int64, integer, issubdtype, ndarray, rot90, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from game2048.core.gamemove import Move, is_effective_move

# ##>: Board size used when none is given.
DEFAULT_SIZE = 4

# ##>: Reaching this tile wins the game.
WINNING_VALUE = 2048

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

_TILE_VALUES = [2, 4]

# ##>: Module-level generator, used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


class Grid:
    """
    Immutable N x N snapshot of tile values plus the accumulated score.

    Cells hold 0 for an empty square or a power of two starting at 2. The underlying array is
    read-only; every operation that changes the board builds a new ``Grid``, so older snapshots
    stay valid for undo. Equality is structural over cells and score.
    """

    __slots__ = ('_cells', '_score')

    def __init__(self, cells, score: int = 0, size: int | None = None):
        """
        Build a grid from a square matrix of tile values.

        Parameters
        ----------
        cells : array_like
            The size x size matrix of tile values.
        score : int, optional
            The accumulated score (default is 0).
        size : int, optional
            The expected dimension. When given, ``cells`` must match it.

        Raises
        ------
        ValueError
            If the matrix is empty, not square, does not match ``size``, holds a value that is
            neither 0 nor a power of two, holds non-integer values, or if the score is negative or
            not an integer.
        """
        try:
            raw = asarray(cells)
        except (TypeError, ValueError) as error:
            raise ValueError(f'Grid cells must form a square integer matrix: {error}') from error

        if raw.ndim != 2 or raw.shape[0] != raw.shape[1] or raw.shape[0] == 0:
            raise ValueError(f'Grid cells must form a non-empty square matrix, got shape {raw.shape}')
        if not issubdtype(raw.dtype, integer):
            raise ValueError(f'Grid cells must hold integers, got dtype {raw.dtype}')
        if not isinstance(score, (int, integer)) or isinstance(score, bool):
            raise ValueError(f'Grid score must be an integer, got {score!r}')

        matrix = array(raw, dtype=int64)
        if size is not None and matrix.shape[0] != size:
            raise ValueError(f'Grid cells must be {size}x{size}, got {matrix.shape[0]}x{matrix.shape[1]}')

        tiles = matrix[matrix != 0]
        if np_any(tiles < 2) or np_any(tiles & (tiles - 1)):
            raise ValueError(f'Grid tiles must be 0 or powers of two, got {sorted(set(tiles.tolist()))}')
        if score < 0:
            raise ValueError(f'Grid score must be >= 0, got {score}')

        matrix.flags.writeable = False
        self._cells = matrix
        self._score = int(score)

    @classmethod
    def empty(cls, size: int = DEFAULT_SIZE) -> Grid:
        """
        Create an all-empty grid with a zero score.

        Raises
        ------
        ValueError
            If ``size`` is not a positive integer.
        """
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ValueError(f'Grid size must be a positive integer, got {size!r}')
        return cls(zeros((size, size), dtype=int64))

    @property
    def cells(self) -> ndarray:
        return self._cells

    @property
    def score(self) -> int:
        return self._score

    @property
    def size(self) -> int:
        return self._cells.shape[0]

    @property
    def max_tile(self) -> int:
        return int(self._cells.max())

    def with_cells(self, cells, score_increase: int = 0) -> Grid:
        """Return a new grid holding ``cells`` with the score raised by ``score_increase``."""
        return Grid(cells, score=self._score + score_increase, size=self.size)

    def tolist(self) -> list[list[int]]:
        return self._cells.tolist()

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = position
        return int(self._cells[row, col])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._score == other._score and bool(array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash((self._score, self._cells.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f'Grid(cells={self.tolist()}, score={self._score})'


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal tiles of a line toward its start and compute the score.

    Parameters
    ----------
    line : ndarray
        A 1D array holding one row or column, already oriented so that index 0 is the
        end the tiles travel to.

    Returns
    -------
    score : int
        The sum of the merged tile values.
    merged_line : ndarray
        The non-empty tiles after merging, without padding.

    Notes
    -----
    - Zeros are dropped before merging.
    - The scan is a single pass: a freshly merged tile never merges again in the same move,
      so ``[2, 2, 2, 2]`` gives ``[4, 4]`` and not ``[8]``.
    """
    tiles = line[line != 0]
    merged = []
    score = 0

    index = 0
    while index < len(tiles):
        value = int(tiles[index])
        if index + 1 < len(tiles) and tiles[index + 1] == value:
            value *= 2
            score += value
            index += 2
        else:
            index += 1
        merged.append(value)

    return score, array(merged, dtype=line.dtype)


def compact_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Merge a line and pad it back to its original length with trailing zeros.
    """
    score, merged = merge_line(line)
    result = zeros_like(line)
    result[: len(merged)] = merged
    return score, result


def slide_and_merge(cells: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of a board to the left, merging equal neighbours.

    Parameters
    ----------
    cells : ndarray
        The board as a 2D array. It is not modified.

    Returns
    -------
    score : int
        The total score of all merges.
    updated_cells : ndarray
        The new board.

    Notes
    -----
    For other directions, rotate the board before calling this function and rotate the result back.
    """
    result = zeros_like(cells)
    score = 0

    for i, row in enumerate(cells):
        row_score, result[i] = compact_line(row)
        score += row_score

    return score, result


def slide(grid: Grid, move: Move) -> tuple[Grid, int]:
    """
    Apply a move to a grid without spawning a tile.

    Parameters
    ----------
    grid : Grid
        The grid before the move.
    move : Move
        The direction of travel.

    Returns
    -------
    new_grid : Grid
        The grid after sliding and merging, its score already increased.
    score_increase : int
        The points gained by this move.

    Raises
    ------
    TypeError
        If ``move`` is not a ``Move``.
    """
    if not isinstance(move, Move):
        raise TypeError(f'move must be a Move, got {type(move).__name__}')

    rotated = rot90(grid.cells, k=move.rotation)
    score, updated = slide_and_merge(rotated)
    return grid.with_cells(rot90(updated, k=-move.rotation), score_increase=score), score


def empty_cells(grid: Grid) -> list[tuple[int, int]]:
    """Coordinates (row, col) of every empty cell, in row-major order."""
    return [(int(row), int(col)) for row, col in argwhere(grid.cells == 0)]


def spawn_tile(grid: Grid, rng: Generator | None = None, four_probability: float = TILE_SPAWN_PROBS[4]) -> Grid:
    """
    Place one new tile on a uniformly chosen empty cell.

    Parameters
    ----------
    grid : Grid
        The grid to add a tile to. It is not modified.
    rng : Generator, optional
        Source of randomness. The module-level generator is used when omitted.
    four_probability : float, optional
        Probability that the new tile is a 4 rather than a 2 (default is 0.1).

    Returns
    -------
    Grid
        A new grid with the extra tile, or ``grid`` itself when no cell is empty.
    """
    rng = rng if rng is not None else _GENERATOR

    available = empty_cells(grid)
    if not available:
        return grid

    row, col = available[rng.choice(len(available))]
    value = int(rng.choice(_TILE_VALUES, p=[1.0 - four_probability, four_probability]))

    cells = grid.cells.copy()
    cells[row, col] = value
    return grid.with_cells(cells)


def has_won(grid: Grid) -> bool:
    """True once any tile has reached the winning value."""
    return bool(np_any(grid.cells >= WINNING_VALUE))


def can_move(grid: Grid, move: Move) -> bool:
    """
    Check whether a move would change the grid.

    The move is applied hypothetically; it is legal if any cell changes or it scores points.
    """
    moved, score_increase = slide(grid, move)
    return is_effective_move(grid, moved, score_increase)


def legal_moves(grid: Grid) -> list[Move]:
    """Moves that would change the grid."""
    return [move for move in Move.all_moves() if can_move(grid, move)]


def illegal_moves(grid: Grid) -> list[Move]:
    """Moves that would leave the grid untouched."""
    return [move for move in Move.all_moves() if not can_move(grid, move)]


def is_done(grid: Grid) -> bool:
    """
    Check if no direction can change the grid anymore.

    Returns
    -------
    bool
        True if the game is over, False otherwise.
    """
    return not any(can_move(grid, move) for move in Move.all_moves())
