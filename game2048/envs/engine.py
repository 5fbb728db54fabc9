"""Game engine: owns the current game state and one prior snapshot, and applies moves."""

import logging

from numpy.random import Generator, default_rng

from game2048.core.config import EngineConfig
from game2048.core.gameboard import Grid, can_move, has_won, is_done, slide, spawn_tile
from game2048.core.gamemove import Move, is_effective_move
from game2048.core.gamestate import GameState, Lost, Playing, Won, is_terminal, phase_name

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameEngine:
    """
    2048 game engine.

    The engine holds exactly one current state and at most one previous state, which makes a
    single level of undo possible. Every operation is synchronous and works on owned, immutable
    snapshots; one engine serves one game session and must not be shared between callers.
    """

    def __init__(self, config: EngineConfig | None = None, generator: Generator | None = None):
        """
        Create the engine and start a new game.

        Parameters
        ----------
        config : EngineConfig, optional
            Engine settings (default is ``EngineConfig()``).
        generator : Generator, optional
            Random source for tile spawning. When omitted, one is built from ``config.seed``, or the
            module-level generator is used if no seed is set.
        """
        self.config = config if config is not None else EngineConfig()

        if generator is not None:
            self._generator = generator
        elif self.config.seed is not None:
            self._generator = default_rng(self.config.seed)
        else:
            self._generator = None

        self._current_state: GameState | None = None
        self._previous_state: GameState | None = None

        self.new_game()

    @property
    def current_state(self) -> GameState:
        return self._current_state

    @property
    def previous_state(self) -> GameState | None:
        return self._previous_state

    @property
    def can_undo(self) -> bool:
        return self._previous_state is not None

    def new_game(self, size: int | None = None) -> GameState:
        """
        Start a new game on an empty board with the configured number of random tiles.

        Parameters
        ----------
        size : int, optional
            Board dimension; ``config.size`` when omitted.

        Returns
        -------
        GameState
            The initial ``Playing`` state.

        Raises
        ------
        ValueError
            If ``size`` is not a positive integer.
        """
        size = self.config.size if size is None else size
        grid = Grid.empty(size)
        for _ in range(self.config.initial_tiles):
            grid = self._spawn(grid)

        self._previous_state = None
        self._current_state = Playing(grid)
        _logger.debug('New %dx%d game started with tiles %s', size, size, grid.tolist())
        return self._current_state

    def make_move(self, move: Move) -> GameState:
        """
        Slide the tiles in the given direction and classify the outcome.

        Parameters
        ----------
        move : Move
            The direction of travel.

        Returns
        -------
        GameState
            The new current state.

        Notes
        -----
        - A ``Lost`` state is returned unchanged.
        - When no direction can change the grid, the state becomes ``Lost`` without moving.
        - A move that changes nothing keeps the current state and spawns no tile.
        - Otherwise the pre-move state is kept for undo, a tile is spawned and the phase is
          re-evaluated on the spawned grid.
        """
        if not isinstance(move, Move):
            raise TypeError(f'move must be a Move, got {type(move).__name__}')

        state = self._current_state
        if is_terminal(state):
            return state

        if is_done(state.grid):
            _logger.info('No move left, game lost with score %d', state.grid.score)
            self._current_state = Lost(state.grid)
            return self._current_state

        moved, score_increase = slide(state.grid, move)
        if not is_effective_move(state.grid, moved, score_increase):
            _logger.debug('Move %s had no effect', move.name)
            return state

        self._previous_state = state
        grid = self._spawn(moved)
        self._current_state = self._classify(grid, state)
        _logger.debug(
            'Move %s scored %d (total %d), now %s', move.name, score_increase, grid.score, phase_name(self._current_state)
        )
        return self._current_state

    def is_valid_move(self, move: Move) -> bool:
        """
        Check if a move would be accepted in the current state.

        Returns
        -------
        bool
            False when lost, or when won and the player has not chosen to continue. Otherwise True
            if the move would change the grid.
        """
        if not isinstance(move, Move):
            raise TypeError(f'move must be a Move, got {type(move).__name__}')

        state = self._current_state
        if is_terminal(state):
            return False
        if isinstance(state, Won) and not state.continue_playing:
            return False
        return can_move(state.grid, move)

    def undo(self) -> GameState | None:
        """
        Restore the state preceding the last accepted move.

        Returns
        -------
        GameState or None
            The restored state, or None if there is nothing to roll back. Only one level is kept,
            so a second consecutive call returns None. A restored ``Playing`` state reports
            ``can_undo=False`` since no older snapshot remains.
        """
        if self._previous_state is None:
            return None

        restored, self._previous_state = self._previous_state, None
        if isinstance(restored, Playing) and restored.can_undo:
            restored = Playing(restored.grid)
        self._current_state = restored
        _logger.debug('Undo restored a %s state', phase_name(self._current_state))
        return self._current_state

    def continue_game(self) -> GameState:
        """Let the player keep going after a win; any other state is returned unchanged."""
        if isinstance(self._current_state, Won):
            self._current_state = Won(self._current_state.grid, continue_playing=True)
            _logger.debug('Continuing after win')
        return self._current_state

    def render(self) -> None:
        """
        Render the game board. This method prints the current board, score and phase to the console.
        """
        for row in self._current_state.grid.tolist():
            print(' \t'.join(map(str, row)))
        print(f'score={self._current_state.grid.score} phase={phase_name(self._current_state)}')

    def _spawn(self, grid: Grid) -> Grid:
        return spawn_tile(grid, rng=self._generator, four_probability=self.config.four_probability)

    @staticmethod
    def _classify(grid: Grid, before: GameState) -> GameState:
        # ##: A win is only announced once; afterwards the continue flag is carried along.
        if has_won(grid) and not isinstance(before, Won):
            _logger.info('Winning tile %d reached with score %d', grid.max_tile, grid.score)
            return Won(grid)
        if isinstance(before, Won):
            return Won(grid, continue_playing=before.continue_playing)
        if is_done(grid):
            _logger.info('No move left, game lost with score %d', grid.score)
            return Lost(grid)
        return Playing(grid, can_undo=True)
