# -*- coding: utf-8 -*-
"""
Play 2048 in the terminal.
"""

import argparse
import logging

from game2048.core.config import EngineConfig
from game2048.core.gamemove import Move
from game2048.envs import GameEngine

# ##>: Keyboard bindings.
KEY_MOVES = {'w': Move.UP, 'a': Move.LEFT, 's': Move.DOWN, 'd': Move.RIGHT}

HELP = 'Enter a command (w/a/s/d to move, u undo, c continue, n new game, q quit): '


def redraw(engine: GameEngine):
    """
    Redraw the game board.

    Parameters
    ----------
    engine: GameEngine
        The game engine to draw
    """
    engine.render()


def step(engine: GameEngine, move: Move):
    """
    Apply a move to the game.

    Parameters
    ----------
    engine: GameEngine
        The game engine

    move: Move
        Direction to play
    """
    if not engine.is_valid_move(move):
        print(f'{move.name} is not possible now.')
        return

    engine.make_move(move)
    redraw(engine)


def key_handler(engine: GameEngine, key: str) -> bool:
    """
    Handle one command from the keyboard.

    Parameters
    ----------
    engine: GameEngine
        The game engine

    key: str
        The command typed by the player

    Returns
    -------
    bool
        False when the player asked to quit, True otherwise.
    """
    key = key.strip().lower()

    if key == 'q':
        return False

    if key == 'n':
        engine.new_game()
        redraw(engine)
    elif key == 'u':
        if engine.undo() is None:
            print('Nothing to undo.')
        else:
            redraw(engine)
    elif key == 'c':
        engine.continue_game()
        redraw(engine)
    elif key in KEY_MOVES:
        step(engine, KEY_MOVES[key])
    else:
        print(f'Unknown command {key!r}.')
    return True


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description='Play 2048 in the terminal')
    parser.add_argument('--size', type=int, default=4, help='Board dimension')
    parser.add_argument('--seed', type=int, default=None, help='Seed for tile spawning')
    parser.add_argument('--log-level', default='WARNING', help='Logging level')

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

    engine = GameEngine(EngineConfig(size=args.size, seed=args.seed))
    redraw(engine)

    # ##: Blocking input loop.
    while True:
        try:
            key = input(HELP)
        except EOFError:
            break
        if not key_handler(engine, key):
            break

    print(f'Final score: {engine.current_state.grid.score}')


if __name__ == '__main__':
    main()
