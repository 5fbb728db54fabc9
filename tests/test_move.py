from unittest import TestCase, main

from game2048.core.gameboard import Grid
from game2048.core.gamemove import Move, is_effective_move


class TestMove(TestCase):
    def test_deltas(self):
        """
        Test if every direction carries the expected (row, column) delta.
        """
        self.assertEqual((Move.UP.row_delta, Move.UP.col_delta), (-1, 0))
        self.assertEqual((Move.DOWN.row_delta, Move.DOWN.col_delta), (1, 0))
        self.assertEqual((Move.LEFT.row_delta, Move.LEFT.col_delta), (0, -1))
        self.assertEqual((Move.RIGHT.row_delta, Move.RIGHT.col_delta), (0, 1))

    def test_orientation(self):
        """
        Test if directions are classified as vertical or horizontal.
        """
        self.assertTrue(Move.UP.is_vertical)
        self.assertTrue(Move.DOWN.is_vertical)
        self.assertFalse(Move.LEFT.is_vertical)
        self.assertTrue(Move.LEFT.is_horizontal)
        self.assertTrue(Move.RIGHT.is_horizontal)
        self.assertFalse(Move.DOWN.is_horizontal)

    def test_all_moves(self):
        """
        Test if all four directions are listed once.
        """
        moves = Move.all_moves()
        self.assertEqual(len(moves), 4)
        self.assertEqual(set(moves), {Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT})

    def test_rotation(self):
        """
        Test if rotations follow the left, up, right, down quarter turns.
        """
        self.assertEqual([move.rotation for move in (Move.LEFT, Move.UP, Move.RIGHT, Move.DOWN)], [0, 1, 2, 3])


class TestEffectiveMove(TestCase):
    def test_changed_cells(self):
        """
        Test if a change in cells makes a move effective.
        """
        before = Grid([[2, 0], [0, 0]])
        after = Grid([[0, 2], [0, 0]])
        self.assertTrue(is_effective_move(before, after, 0))

    def test_unchanged_without_score(self):
        """
        Test if identical cells and no score is not effective.
        """
        before = Grid([[2, 0], [0, 0]])
        self.assertFalse(is_effective_move(before, Grid([[2, 0], [0, 0]]), 0))

    def test_score_only(self):
        """
        Test if a score increase alone makes a move effective.
        """
        before = Grid([[4, 0], [0, 0]])
        after = Grid([[4, 0], [0, 0]], score=4)
        self.assertTrue(is_effective_move(before, after, 4))


if __name__ == '__main__':
    main()
