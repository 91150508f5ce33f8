from __future__ import annotations

import sys
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from checkers.board import Board  # noqa: E402
from checkers.move import Move  # noqa: E402
from checkers.pieces import Color, Piece  # noqa: E402


class BoardLayoutTests(unittest.TestCase):
    def test_only_dark_squares_are_occupied(self) -> None:
        board = Board()
        for (row, col), _ in board.getAllPieces():
            self.assertTrue(Board.is_dark_square(row, col))
        self.assertEqual(board.countPieces(Color.RED), 12)
        self.assertEqual(board.countPieces(Color.BLACK), 12)

    def test_text_diagram(self) -> None:
        board = Board.empty()
        board.place(0, 1, Piece(Color.RED, is_king=True))
        board.place(7, 0, Piece(Color.BLACK))
        lines = str(board).splitlines()
        self.assertEqual(len(lines), 8)
        self.assertEqual(lines[0], ". R . . . . . .")
        self.assertEqual(lines[7], "b . . . . . . .")
        self.assertEqual(str(Board()).splitlines()[0], ". b . b . b . b")


class BoardPlacementTests(unittest.TestCase):
    def test_place_rejects_light_square(self) -> None:
        with self.assertRaises(ValueError):
            Board.empty().place(0, 0, Piece(Color.RED))

    def test_place_rejects_off_board(self) -> None:
        with self.assertRaises(ValueError):
            Board.empty().place(8, 1, Piece(Color.RED))

    def test_place_rejects_occupied_square(self) -> None:
        board = Board.empty()
        board.place(3, 2, Piece(Color.RED))
        with self.assertRaises(ValueError):
            board.place(3, 2, Piece(Color.BLACK))

    def test_state_round_trip_preserves_kings(self) -> None:
        board = Board.empty()
        board.place(3, 2, Piece(Color.RED, is_king=True))
        board.place(4, 5, Piece(Color.BLACK))
        state = board.to_state()
        self.assertEqual(state, (8, ((3, 2, "red", True), (4, 5, "black", False))))
        self.assertEqual(Board.from_state(state).to_state(), state)

    def test_from_state_rejects_light_square(self) -> None:
        with self.assertRaises(ValueError):
            Board.from_state((8, ((2, 2, "red", False),)))


class BoardMoveTests(unittest.TestCase):
    def test_empty_square_has_no_moves(self) -> None:
        self.assertEqual(Board().possibleMoves(4, 1), [])
        self.assertEqual(Board().possibleMoves(-1, 3), [])

    def test_move_piece_returns_captured(self) -> None:
        board = Board.empty()
        board.place(4, 1, Piece(Color.RED))
        board.place(3, 2, Piece(Color.BLACK))
        captured = board.movePiece(Move((4, 1), (2, 3), capture=(3, 2)))
        self.assertEqual(captured, Piece(Color.BLACK))
        self.assertEqual(board.to_state(), (8, ((2, 3, "red", False),)))

    def test_move_piece_from_empty_square_raises(self) -> None:
        with self.assertRaises(RuntimeError):
            Board.empty().movePiece(Move((5, 0), (4, 1)))

    def test_copy_is_independent(self) -> None:
        board = Board()
        clone = board.copy()
        clone.movePiece(Move((5, 0), (4, 1)))
        self.assertIsNotNone(board.getPiece(5, 0))
        self.assertIsNone(clone.getPiece(5, 0))


class PieceTests(unittest.TestCase):
    def test_promotion_is_one_way(self) -> None:
        piece = Piece(Color.BLACK)
        piece.promote()
        piece.promote()
        self.assertTrue(piece.is_king)
        self.assertEqual(repr(piece), "K(BLACK)")

    def test_copy_is_detached_from_board_piece(self) -> None:
        piece = Piece(Color.RED, is_king=True)
        clone = piece.getCopy()
        clone.is_king = False
        self.assertTrue(piece.is_king)

    def test_opponent(self) -> None:
        self.assertIs(Color.RED.opponent, Color.BLACK)
        self.assertIs(Color.BLACK.opponent, Color.RED)

    def test_move_str(self) -> None:
        self.assertEqual(str(Move((5, 0), (4, 1))), "5,0 - 4,1")
        self.assertEqual(str(Move((4, 1), (2, 3), capture=(3, 2))), "4,1 x 2,3")


if __name__ == "__main__":
    unittest.main()
