# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game engine.

This module provides the `GameEngine` class, which holds the game state and applies moves, undo and
win-continue decisions.
"""

from .engine import GameEngine

__all__ = ["GameEngine"]
