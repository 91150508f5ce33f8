from __future__ import annotations

import logging
from enum import Enum

from checkers.game import CheckersGame

logger = logging.getLogger(__name__)


class ClickResult(str, Enum):
    SELECTED = "selected"
    MOVED = "moved"
    DESELECTED = "deselected"


class BoardController:
    """Routes cell clicks into the engine.

    A click first tries to select a piece, then to move the selected piece
    there, and otherwise clears the selection.
    """

    def __init__(self, game: CheckersGame) -> None:
        self.game = game

    def handleCell(self, row: int, col: int) -> ClickResult:
        if self.game.selectPiece(row, col):
            return ClickResult.SELECTED
        if self.game.moveSelected(row, col):
            if not self.game.canAnyMove():
                logger.info("%s has no legal moves", self.game.getCurrentPlayer().value)
            return ClickResult.MOVED
        self.game.deselect()
        return ClickResult.DESELECTED

    def reset(self) -> None:
        self.game.reset()
