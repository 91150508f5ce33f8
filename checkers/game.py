from __future__ import annotations

import logging
from typing import Optional

from .board import Board, Grid
from .move import Coordinate, Move
from .pieces import Color, Piece

logger = logging.getLogger(__name__)


class CheckersGame:
    """Turn-based 8x8 checkers state holder.

    Holds the board, the side to move and an optional selection together with
    the moves available from it. Invalid input is reported through return
    values (``False``, ``None`` or ``[]``) and never changes state.
    """

    def __init__(self) -> None:
        self.reset()

    @classmethod
    def from_board(cls, board: Board, current_player: Color = Color.RED) -> "CheckersGame":
        game = cls()
        game.board = board.copy()
        game.current_player = current_player
        return game

    def reset(self) -> None:
        self.board = Board()
        self.current_player = Color.RED
        self.selected: Optional[Coordinate] = None
        self._valid_moves_cache: Optional[list[Move]] = None

    def getCurrentPlayer(self) -> Color:
        return self.current_player

    def getPiece(self, row: int, col: int) -> Optional[Piece]:
        piece = self.board.getPiece(row, col)
        return piece.getCopy() if piece else None

    def getSelected(self) -> Optional[Coordinate]:
        return self.selected

    def selectPiece(self, row: int, col: int) -> bool:
        piece = self.board.getPiece(row, col)
        if piece is None or piece.color != self.current_player:
            logger.debug("Rejected selection of %d,%d for %s", row, col, self.current_player.value)
            return False

        self.selected = (row, col)
        self._valid_moves_cache = self.board.possibleMoves(row, col)
        return True

    def deselect(self) -> None:
        self.selected = None
        self._valid_moves_cache = None

    def getValidMoves(self) -> list[Move]:
        return list(self._valid_moves_cache) if self._valid_moves_cache else []

    def moveSelected(self, toRow: int, toCol: int) -> bool:
        if self.selected is None or not self._valid_moves_cache:
            return False

        target = (toRow, toCol)
        match = next((move for move in self._valid_moves_cache if move.end == target), None)
        if match is None:
            logger.debug("Rejected move %s -> %s", self.selected, target)
            return False

        self.board.movePiece(match)
        logger.debug("%s played %s", self.current_player.value, match)

        self.deselect()
        self._switch_turn()
        return True

    def getBoardSnapshot(self) -> Grid:
        return self.board.snapshot()

    def canAnyMove(self) -> bool:
        for row in range(self.board.boardSize):
            for col in range(self.board.boardSize):
                piece = self.board.getPiece(row, col)
                if piece and piece.color == self.current_player:
                    if self.board.possibleMoves(row, col):
                        return True
        return False

    def _switch_turn(self) -> None:
        self.current_player = self.current_player.opponent
