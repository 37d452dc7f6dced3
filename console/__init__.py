"""
Console module for TicTacToe.
Handles keyboard input and text output for the game engine.
"""

from .config import ConsoleConfig
from .move_source import MoveSource
from .renderer import BoardRenderer
