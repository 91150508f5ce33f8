from __future__ import annotations

import logging
from typing import Optional

from .move import Coordinate, Move
from .pieces import Color, Piece

logger = logging.getLogger(__name__)

BOARD_SIZE = 8
START_ROWS = 3

BoardStatePiece = tuple[int, int, str, bool]
BoardState = tuple[int, tuple[BoardStatePiece, ...]]
Grid = list[list[Optional[Piece]]]

_KING_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_MAN_DIRECTIONS = {
    Color.RED: ((-1, -1), (-1, 1)),
    Color.BLACK: ((1, -1), (1, 1)),
}


class Board:
    def __init__(self, boardSize: int = BOARD_SIZE) -> None:
        self.boardSize = boardSize
        self.board: Grid = [[None for _ in range(boardSize)] for _ in range(boardSize)]
        self._set_start_pieces()

    @classmethod
    def empty(cls, boardSize: int = BOARD_SIZE) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = boardSize
        board.board = [[None for _ in range(boardSize)] for _ in range(boardSize)]
        return board

    def to_state(self) -> BoardState:
        pieces: list[BoardStatePiece] = []
        for (row, col), piece in self.getAllPieces():
            pieces.append((row, col, piece.color.value, piece.is_king))
        return (self.boardSize, tuple(pieces))

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        board_size, pieces = state
        board = cls.empty(board_size)
        for row, col, color_value, is_king in pieces:
            board.place(row, col, Piece(Color(color_value), is_king))
        return board

    def getPiece(self, row: int, col: int) -> Optional[Piece]:
        if self._is_within_bounds(row, col):
            return self.board[row][col]
        return None

    def place(self, row: int, col: int, piece: Piece) -> None:
        if not self._is_within_bounds(row, col):
            raise ValueError(f"Square {row},{col} is off the board.")
        if not self.is_dark_square(row, col):
            raise ValueError(f"Square {row},{col} is not a playable dark square.")
        if self.board[row][col] is not None:
            raise ValueError(f"Square {row},{col} is already occupied.")
        self.board[row][col] = piece

    def getAllPieces(self) -> list[tuple[Coordinate, Piece]]:
        pieces: list[tuple[Coordinate, Piece]] = []
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                piece = self.board[row][col]
                if piece is not None:
                    pieces.append(((row, col), piece))
        return pieces

    def countPieces(self, color: Optional[Color] = None) -> int:
        return sum(1 for _, piece in self.getAllPieces() if color is None or piece.color == color)

    def possibleMoves(self, row: int, col: int) -> list[Move]:
        """Single-step and single-jump moves for the piece on ``(row, col)``.

        Steps come first, then captures. Captures are not forced and a landing
        square is never searched for a follow-up jump.
        """
        piece = self.getPiece(row, col)
        if piece is None:
            return []

        directions = _KING_DIRECTIONS if piece.is_king else _MAN_DIRECTIONS[piece.color]
        origin = (row, col)
        moves: list[Move] = []

        for dr, dc in directions:
            new_r, new_c = row + dr, col + dc
            if self._is_within_bounds(new_r, new_c) and not self.board[new_r][new_c]:
                moves.append(Move(start=origin, end=(new_r, new_c)))

        for dr, dc in directions:
            mid_r, mid_c = row + dr, col + dc
            end_r, end_c = row + 2 * dr, col + 2 * dc
            if not self._is_within_bounds(end_r, end_c) or self.board[end_r][end_c]:
                continue
            jumped = self.getPiece(mid_r, mid_c)
            if jumped and jumped.color != piece.color:
                moves.append(Move(start=origin, end=(end_r, end_c), capture=(mid_r, mid_c)))

        return moves

    def movePiece(self, move: Move) -> Optional[Piece]:
        start_row, start_col = move.start
        end_row, end_col = move.end
        piece = self.getPiece(start_row, start_col)
        if piece is None:
            raise RuntimeError(f"No piece on {start_row},{start_col} to move.")

        self.board[end_row][end_col] = piece
        self.board[start_row][start_col] = None

        captured: Optional[Piece] = None
        if move.capture is not None:
            cap_row, cap_col = move.capture
            captured = self.board[cap_row][cap_col]
            self.board[cap_row][cap_col] = None

        self._handle_promotion(piece, end_row)
        return captured

    def copy(self) -> "Board":
        new_board = Board.empty(self.boardSize)
        new_board.board = self.snapshot()
        return new_board

    def snapshot(self) -> Grid:
        return [[piece.getCopy() if piece else None for piece in row] for row in self.board]

    def __str__(self) -> str:
        lines = []
        for row in self.board:
            cells = []
            for p in row:
                if not p:
                    cells.append(".")
                    continue
                symbol = "r" if p.color == Color.RED else "b"
                cells.append(symbol.upper() if p.is_king else symbol)
            lines.append(" ".join(cells))
        return "\n".join(lines)

    def promotion_row(self, color: Color) -> int:
        return 0 if color == Color.RED else self.boardSize - 1

    def _handle_promotion(self, piece: Piece, row: int) -> None:
        if not piece.is_king and row == self.promotion_row(piece.color):
            piece.promote()
            logger.info("%s piece crowned on row %d", piece.color.value, row)

    def _set_start_pieces(self) -> None:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                if not self.is_dark_square(row, col):
                    continue
                if row < START_ROWS:
                    self.board[row][col] = Piece(Color.BLACK)
                elif row >= self.boardSize - START_ROWS:
                    self.board[row][col] = Piece(Color.RED)

    @staticmethod
    def is_dark_square(row: int, col: int) -> bool:
        return (row + col) % 2 == 1

    def _is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize
