"""8x8 checkers rules engine."""

from .board import Board
from .game import CheckersGame
from .move import Coordinate, Move
from .pieces import Color, Piece

__all__ = ["Board", "CheckersGame", "Move", "Coordinate", "Color", "Piece"]
