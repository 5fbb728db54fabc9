from dataclasses import FrozenInstanceError
from unittest import TestCase, main

from game2048.core.gameboard import Grid
from game2048.core.gamestate import GameState, Lost, Playing, Won, is_terminal, phase_name


class TestGameState(TestCase):
    def setUp(self):
        self.grid = Grid([[2, 0], [0, 4]])

    def test_defaults(self):
        """
        Test if the variants start with undo and continue disabled.
        """
        self.assertFalse(Playing(self.grid).can_undo)
        self.assertFalse(Won(self.grid).continue_playing)

    def test_value_equality(self):
        """
        Test if states compare by value, including the grid contents.
        """
        self.assertEqual(Playing(self.grid, can_undo=True), Playing(Grid([[2, 0], [0, 4]]), can_undo=True))
        self.assertNotEqual(Playing(self.grid), Playing(self.grid, can_undo=True))
        self.assertNotEqual(Won(self.grid), Lost(self.grid))
        self.assertEqual(hash(Lost(self.grid)), hash(Lost(Grid([[2, 0], [0, 4]]))))

    def test_frozen(self):
        """
        Test if states cannot be edited after creation.
        """
        state = Won(self.grid)
        with self.assertRaises(FrozenInstanceError):
            state.continue_playing = True

    def test_union(self):
        """
        Test if every variant belongs to the GameState union.
        """
        for state in (Playing(self.grid), Won(self.grid), Lost(self.grid)):
            self.assertIsInstance(state, GameState)

    def test_terminal_and_names(self):
        """
        Test if only Lost is terminal and names are upper-case labels.
        """
        self.assertTrue(is_terminal(Lost(self.grid)))
        self.assertFalse(is_terminal(Won(self.grid)))
        self.assertFalse(is_terminal(Playing(self.grid)))
        self.assertEqual(phase_name(Won(self.grid)), 'WON')


if __name__ == '__main__':
    main()
