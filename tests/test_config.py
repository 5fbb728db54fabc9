from unittest import TestCase, main

from numpy.random import default_rng

from game2048.core.config import EngineConfig
from game2048.envs import GameEngine


class TestEngineConfig(TestCase):
    def test_defaults(self):
        """
        Test if the defaults describe the classic game.
        """
        config = EngineConfig()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.initial_tiles, 2)
        self.assertAlmostEqual(config.four_probability, 0.1)
        self.assertIsNone(config.seed)

    def test_invalid_values(self):
        """
        Test if bad settings are rejected at construction.
        """
        for kwargs in ({'size': 0}, {'size': -3}, {'size': True}, {'initial_tiles': 0}, {'four_probability': 1.5}):
            with self.assertRaises(ValueError):
                EngineConfig(**kwargs)

    def test_engine_uses_config(self):
        """
        Test if the engine spawns the configured tiles.
        """
        engine = GameEngine(EngineConfig(size=3, initial_tiles=4, four_probability=1.0), generator=default_rng(2))
        cells = engine.current_state.grid.cells
        self.assertEqual(cells.shape, (3, 3))
        self.assertEqual(int((cells == 4).sum()), 4)
        self.assertEqual(int((cells == 2).sum()), 0)


if __name__ == '__main__':
    main()
